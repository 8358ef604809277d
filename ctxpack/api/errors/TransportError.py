"""Network/download failure."""

from .CtxpackError import CtxpackError


class TransportError(CtxpackError):
    """Raised when a remote resource cannot be retrieved."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Request failed for {url}: {reason}")
