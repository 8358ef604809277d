"""Invalid input error."""

from .CtxpackError import CtxpackError


class InvalidInputError(CtxpackError, ValueError):
    """Raised for malformed inputs (mismatched vector lengths, non-positive k, ...)."""
