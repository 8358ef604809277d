"""Search hit."""

from dataclasses import dataclass

from .Chunk import Chunk


@dataclass(frozen=True)
class ScoredChunk:
    """A chunk with its boosted similarity score."""

    chunk: Chunk
    score: float
