"""Invalid manifest error."""

from .CtxpackError import CtxpackError


class ManifestError(CtxpackError):
    """Raised when a manifest body cannot be parsed or validated."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid manifest from {source}: {reason}")
