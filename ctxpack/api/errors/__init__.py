"""Error taxonomy for ctxpack."""

from .ChunkNotFoundError import ChunkNotFoundError
from .CorruptIndexError import CorruptIndexError
from .CtxpackError import CtxpackError
from .IntegrityError import IntegrityError
from .InvalidInputError import InvalidInputError
from .ManifestError import ManifestError
from .TransportError import TransportError

__all__ = [
    "ChunkNotFoundError",
    "CorruptIndexError",
    "CtxpackError",
    "IntegrityError",
    "InvalidInputError",
    "ManifestError",
    "TransportError",
]
