"""Chunk lookup miss."""

from .CtxpackError import CtxpackError


class ChunkNotFoundError(CtxpackError, LookupError):
    """Raised when a chunk id is required but absent from the store."""

    def __init__(self, chunk_id: str):
        self.chunk_id = chunk_id
        super().__init__(f"Chunk not found: {chunk_id}")
