"""Shape a search hit for command output."""

from typing import Any

from .Chunk import Chunk


def _chunk_to_dict(chunk: Chunk) -> dict[str, Any]:
    """Chunk fields without the embedding."""
    return chunk.model_dump(mode="python", exclude={"embedding"})


def _hit_to_dict(chunk: Chunk, score: float) -> dict[str, Any]:
    return {**_chunk_to_dict(chunk), "score": round(score, 4)}
