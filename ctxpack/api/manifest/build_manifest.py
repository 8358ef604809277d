"""Compress store files and describe them in a manifest."""

from pathlib import Path

from ...utils.file_checksum import file_checksum
from ...utils.now_iso import now_iso
from ...utils.write_json_file import write_json_file
from ..errors.InvalidInputError import InvalidInputError
from ..logger.Logger import Logger
from ..logger.NullLogger import NullLogger
from .gzip_file import gzip_file
from .Manifest import Manifest, ManifestRequires
from .ManifestFile import GZIP_SUFFIX, ManifestFile


def build_manifest(
    store_dir: Path,
    *,
    pack: str,
    version: str,
    embedding_model: str,
    embedding_dim: int,
    manifest_name: str = "index-manifest.json",
    logger: Logger | None = None,
) -> Manifest:
    """Gzip every <repo>.jsonl in store_dir and write the manifest beside them.

    Raises:
        InvalidInputError: If store_dir has no .jsonl files
    """
    logger = logger or NullLogger()

    sources = sorted(p for p in store_dir.glob("*.jsonl") if p.is_file()) if store_dir.is_dir() else []
    if not sources:
        raise InvalidInputError(f"No .jsonl files in {store_dir}. Nothing to package.")

    files: list[ManifestFile] = []
    for source in sources:
        repo = source.stem
        gz_name = f"{repo}{GZIP_SUFFIX}"
        gz_path = store_dir / gz_name

        gzip_file(source, gz_path)

        entry = ManifestFile(
            repo=repo,
            name=gz_name,
            unpacked=source.name,
            bytes_gz=gz_path.stat().st_size,
            bytes=source.stat().st_size,
            sha256_gz=file_checksum(gz_path),
        )
        files.append(entry)
        logger.log("log", f"{repo}: {entry.bytes}B → {entry.bytes_gz}B, sha256={entry.sha256_gz[:12]}…")

    manifest = Manifest(
        pack=pack,
        version=version,
        created=now_iso(),
        requires=ManifestRequires(embedding_model=embedding_model, embedding_dim=embedding_dim),
        files=files,
    )
    manifest_path = store_dir / manifest_name
    write_json_file(manifest_path, manifest.model_dump(mode="json"))
    logger.log("success", f"Wrote {manifest_path}")
    return manifest
