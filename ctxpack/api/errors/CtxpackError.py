"""Base error for ctxpack."""


class CtxpackError(Exception):
    """Base class for all errors raised by ctxpack operations."""
