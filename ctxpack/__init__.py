"""ctxpack - versioned, checksummed embedding indexes with similarity search."""

from .api.manifest.fetch_indexes import fetch_indexes
from .api.manifest.verify_indexes import verify_indexes
from .api.store.Chunk import Chunk
from .api.store.ChunkStore import ChunkStore
from .api.store.RawChunk import RawChunk

__all__ = ["Chunk", "ChunkStore", "RawChunk", "fetch_indexes", "verify_indexes"]
