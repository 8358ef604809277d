"""Corrupt index file error."""

from pathlib import Path

from .CtxpackError import CtxpackError


class CorruptIndexError(CtxpackError):
    """Raised when a stored record cannot be parsed.

    The whole read fails; lines are never skipped silently.
    """

    def __init__(self, path: Path, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"Corrupt record in {path} at line {line_number}: {reason}")
