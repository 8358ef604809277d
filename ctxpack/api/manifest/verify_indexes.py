"""Read-only health check of installed index files."""

from pathlib import Path

from ...utils.file_checksum import file_checksum
from ..config.ReleaseConfig import ReleaseConfig
from ..errors.CtxpackError import CtxpackError
from ..logger.Logger import Logger
from ..logger.NullLogger import NullLogger
from .fetch_manifest import fetch_manifest
from .has_index_files import has_index_files
from .resolve_in_destination import resolve_in_destination


def verify_indexes(release: ReleaseConfig, destination: Path, logger: Logger | None = None) -> bool:
    """Check every manifest file exists in destination with a matching sha256.

    Never raises for missing files, network or checksum problems; the reason
    is reported through the logger and False is returned. Nothing on disk is
    modified.
    """
    logger = logger or NullLogger()

    if not has_index_files(destination):
        logger.log("error", f"No .jsonl files found in {destination}")
        return False

    try:
        manifest = fetch_manifest(release)
    except CtxpackError as e:
        logger.log("error", f"Failed to fetch manifest: {e}")
        return False

    for entry in manifest.files:
        try:
            gzip_path = resolve_in_destination(destination, entry.name, release.manifest_url)
        except CtxpackError as e:
            logger.log("error", str(e))
            return False
        if not gzip_path.is_file():
            logger.log("error", f"File not found: {gzip_path}")
            return False
        try:
            checksum = file_checksum(gzip_path)
        except OSError as e:
            logger.log("error", f"Failed to read {gzip_path}: {e}")
            return False
        if checksum != entry.sha256_gz:
            logger.log("error", f"Checksum mismatch for {entry.name}: got {checksum}, expected {entry.sha256_gz}")
            return False

    logger.log("success", "All files verified")
    return True
