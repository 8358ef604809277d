"""Logger collaborator."""

from .Logger import Logger, Severity
from .NullLogger import NullLogger
from .PythonLogger import PythonLogger
from .RecordingLogger import RecordingLogger

__all__ = ["Logger", "NullLogger", "PythonLogger", "RecordingLogger", "Severity"]
