"""Progress sink used by fetch, verify and pack."""

from typing import Literal, Protocol, runtime_checkable

Severity = Literal["log", "info", "success", "warning", "error"]


@runtime_checkable
class Logger(Protocol):
    """Anything that accepts (severity, message)."""

    def log(self, severity: Severity, message: str) -> None: ...
