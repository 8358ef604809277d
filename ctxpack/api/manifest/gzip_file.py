"""Compress a file with gzip."""

import gzip
import shutil
from pathlib import Path


def gzip_file(source: Path, destination: Path, level: int = 9) -> None:
    """Compress source into destination at the given level."""
    destination.parent.mkdir(parents=True, exist_ok=True)
    with source.open("rb") as src, gzip.open(destination, "wb", compresslevel=level) as dst:
        shutil.copyfileobj(src, dst)
