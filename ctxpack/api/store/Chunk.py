"""Stored chunk: a RawChunk plus ranking metadata and its embedding."""

from pydantic import BaseModel, Field, FiniteFloat

from .RawChunk import RawChunk, RuleLevel


class Chunk(BaseModel):
    """Smallest retrievable unit of the store.

    Immutable once written; the store never updates or deletes records.
    """

    id: str = Field(..., min_length=1)
    repo: str = Field(..., min_length=1)
    file: str
    headings: list[str] = Field(default_factory=list)
    rule_level: RuleLevel | None = None
    version: str | None = None
    updated: str | None = None
    text: str = Field(..., min_length=1)
    dependency_rank: int | None = Field(None, gt=0, description="Lower is more upstream/authoritative")
    embedding: list[FiniteFloat] = Field(..., description="Finite values only")

    @classmethod
    def from_raw(cls, raw: RawChunk, embedding: list[float], dependency_rank: int | None = None) -> "Chunk":
        """Build a Chunk from an ingested RawChunk and its embedding."""
        return cls(
            **raw.model_dump(),
            dependency_rank=dependency_rank,
            embedding=list(embedding),
        )

    def to_line(self) -> str:
        """Serialize to a single JSONL line (without the newline)."""
        return self.model_dump_json(exclude_none=True)
