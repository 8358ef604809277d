"""Output schemas for store commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class StoreSearchOutput(BaseOutputSchema):
    """Output schema for search command.

    Each hit carries id, repo, file, headings, rule_level, score and text.
    """

    query: str = Field("", description="Query text")
    repo: str = Field("", description="Repo filter, empty for all repos")
    section: str = Field("", description="Section filter, empty for none")
    must_only: bool = Field(False, description="Whether only MUST chunks were eligible")
    k: int = Field(0, description="Requested number of hits")
    hits: list[dict[str, Any]] = Field(default_factory=list, description="Ranked hits")


class StoreGetOutput(BaseOutputSchema):
    """Output schema for get command."""

    id: str = Field("", description="Requested chunk id")
    found: bool = Field(False, description="True if the chunk exists")
    chunk: dict[str, Any] | None = Field(None, description="Chunk without its embedding, None if not found")


class StoreBriefOutput(BaseOutputSchema):
    """Output schema for brief command."""

    task: str = Field("", description="Task text used as the query")
    repos: list[str] = Field(default_factory=list, description="Repos included, in brief order")
    order: list[str] = Field(default_factory=list, description="Configured dependency order, upstream first")
    sections: list[dict[str, Any]] = Field(default_factory=list, description="Per-repo hits, MUST before SHOULD")
    brief: str = Field("", description="Markdown brief")
