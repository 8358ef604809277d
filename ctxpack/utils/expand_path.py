"""Expand user path (~/...) to absolute path."""

from pathlib import Path


def expand_path(path: str | Path) -> Path:
    """Expand user path (~/...) to absolute path."""
    path_obj = Path(path).expanduser()
    try:
        return path_obj.resolve(strict=False)
    except OSError:
        return path_obj.absolute()
