"""ctxpack utility functions.

Each file in this package exports exactly one function, following
the single file == function/class rule (logger.py holds the logging pair).
"""

from .expand_path import expand_path
from .file_checksum import file_checksum
from .get_package_version import get_package_version
from .logger import configure_logging, get_logger
from .now_iso import now_iso
from .write_json_file import write_json_file

__all__ = [
    "configure_logging",
    "expand_path",
    "file_checksum",
    "get_logger",
    "get_package_version",
    "now_iso",
    "write_json_file",
]
