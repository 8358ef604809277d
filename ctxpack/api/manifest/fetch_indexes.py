"""Download, verify and unpack published index files."""

from collections.abc import Iterable
from pathlib import Path

from ...utils.file_checksum import file_checksum
from ...utils.now_iso import now_iso
from ...utils.write_json_file import write_json_file
from ..config.ReleaseConfig import ReleaseConfig
from ..errors.IntegrityError import IntegrityError
from ..logger.Logger import Logger
from ..logger.NullLogger import NullLogger
from .download import download
from .fetch_manifest import fetch_manifest
from .gunzip_file import gunzip_file
from .InstallState import InstallState
from .resolve_in_destination import resolve_in_destination
from .select_files import select_files
from .STATE_FILENAME import STATE_FILENAME


def fetch_indexes(
    release: ReleaseConfig,
    destination: Path,
    repo_names: Iterable[str] | None = None,
    logger: Logger | None = None,
) -> InstallState:
    """Install the release's index files into destination.

    Files are processed one at a time. The first transport or checksum
    failure aborts the run: files already unpacked stay on disk, later files
    are not attempted, and state.json is left untouched.

    Args:
        release: Release to install
        destination: Store directory receiving .jsonl.gz, .jsonl and state.json
        repo_names: Only install these repos (all when empty)
        logger: Progress sink

    Returns:
        The InstallState written to state.json

    Raises:
        TransportError: Manifest or artifact could not be downloaded
        ManifestError: Manifest could not be parsed or names a file outside destination
        IntegrityError: An artifact's sha256 differs from the manifest
    """
    logger = logger or NullLogger()

    logger.log("log", f"Fetching manifest from {release.manifest_url}…")
    manifest = fetch_manifest(release)
    selected = select_files(manifest.files, repo_names)
    if not selected:
        logger.log("warning", "No manifest entries matched the requested repos")

    # Every target is checked before anything is downloaded
    targets = [
        (
            entry,
            resolve_in_destination(destination, entry.name, release.manifest_url),
            resolve_in_destination(destination, entry.unpacked, release.manifest_url),
        )
        for entry in selected
    ]

    for entry, gzip_path, output_path in targets:
        url = f"{release.release_url}/{entry.name}"

        logger.log("log", f"Downloading {entry.name}…")
        download(url, gzip_path, user_agent=release.user_agent, timeout=release.timeout_secs)

        checksum = file_checksum(gzip_path)
        if checksum != entry.sha256_gz:
            logger.log("error", f"Checksum mismatch for {entry.name}")
            raise IntegrityError(entry.name, expected=entry.sha256_gz, actual=checksum)

        gunzip_file(gzip_path, output_path)
        logger.log("log", f"Ready: {output_path}")

    state = InstallState(version=manifest.version, installed_at=now_iso())
    write_json_file(destination / STATE_FILENAME, state.to_dict())
    logger.log("success", f"Indexes installed for {manifest.version} in {destination}")
    return state
