"""Pick manifest entries by repo name."""

from collections.abc import Iterable

from .ManifestFile import ManifestFile


def select_files(files: list[ManifestFile], repo_names: Iterable[str] | None = None) -> list[ManifestFile]:
    """Keep entries whose repo or base name is requested; all entries if none are."""
    wanted = {name for name in (repo_names or []) if name}
    if not wanted:
        return list(files)
    return [f for f in files if f.repo in wanted or f.base_name in wanted]
