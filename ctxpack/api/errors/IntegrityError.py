"""Checksum mismatch error."""

from .CtxpackError import CtxpackError


class IntegrityError(CtxpackError):
    """Raised when an artifact's sha256 does not match the manifest."""

    def __init__(self, name: str, expected: str, actual: str):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"Checksum mismatch for {name}: got {actual}, expected {expected}")
