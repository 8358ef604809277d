"""Logger that forwards to the standard logging module."""

import logging

from .Logger import Severity

_LEVELS: dict[str, int] = {
    "log": logging.DEBUG,
    "info": logging.INFO,
    "success": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class PythonLogger:
    """Route collaborator messages into a ``logging.Logger``."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    def log(self, severity: Severity, message: str) -> None:
        self._logger.log(_LEVELS.get(severity, logging.INFO), message)
