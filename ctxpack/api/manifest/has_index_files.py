"""Check whether a directory holds any unpacked index files."""

from pathlib import Path


def has_index_files(destination: Path) -> bool:
    """True if destination contains at least one *.jsonl file."""
    if not destination.is_dir():
        return False
    return any(p.is_file() for p in destination.glob("*.jsonl"))
