"""Resolve a manifest file name inside a destination directory."""

from pathlib import Path

from ..errors.ManifestError import ManifestError


def resolve_in_destination(destination: Path, name: str, source: str) -> Path:
    """Return destination / name, refusing names that leave destination.

    Raises:
        ManifestError: If name is absolute or climbs out of destination
    """
    root = destination.resolve()
    path = (root / name).resolve()
    if path == root or not path.is_relative_to(root):
        raise ManifestError(source, f"file name {name!r} escapes {destination}")
    return path
