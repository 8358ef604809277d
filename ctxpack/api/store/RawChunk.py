"""Chunk record as produced by ingestion, before embedding."""

from typing import Literal

from pydantic import BaseModel, Field

RuleLevel = Literal["MUST", "SHOULD", "MUST NOT"]


class RawChunk(BaseModel):
    """A section of a source document with its provenance."""

    id: str = Field(..., min_length=1, description="<repo>:<file>#<sectionIndex>")
    repo: str = Field(..., min_length=1)
    file: str
    headings: list[str] = Field(default_factory=list, description="Heading titles from root to this section")
    rule_level: RuleLevel | None = None
    version: str | None = None
    updated: str | None = None
    text: str = Field(..., min_length=1)
