"""Logger that remembers messages and optionally forwards them."""

from .Logger import Logger, Severity


class RecordingLogger:
    """Collect (severity, message) pairs for command output."""

    def __init__(self, forward: Logger | None = None):
        self.entries: list[tuple[str, str]] = []
        self._forward = forward

    def log(self, severity: Severity, message: str) -> None:
        self.entries.append((severity, message))
        if self._forward is not None:
            self._forward.log(severity, message)

    def messages(self, *severities: str) -> list[str]:
        """Messages with any of the given severities (all when none given)."""
        return [msg for sev, msg in self.entries if not severities or sev in severities]
