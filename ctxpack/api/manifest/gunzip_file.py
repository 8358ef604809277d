"""Decompress a gzip file."""

import gzip
import shutil
from pathlib import Path


def gunzip_file(source: Path, destination: Path) -> None:
    """Decompress source into destination byte-for-byte, replacing it."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with gzip.open(source, "rb") as src, destination.open("wb") as dst:
        shutil.copyfileobj(src, dst)
