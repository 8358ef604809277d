"""Logger that discards everything."""

from .Logger import Severity


class NullLogger:
    """Default Logger: a no-op."""

    def log(self, severity: Severity, message: str) -> None:  # noqa: ARG002
        return None
