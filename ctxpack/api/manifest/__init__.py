"""Artifact manifest API module: publish, fetch and verify index snapshots."""

from .build_manifest import build_manifest
from .fetch_indexes import fetch_indexes
from .fetch_manifest import fetch_manifest
from .InstallState import InstallState
from .Manifest import Manifest, ManifestRequires
from .ManifestFile import ManifestFile
from .read_install_state import read_install_state
from .verify_indexes import verify_indexes

__all__ = [
    "InstallState",
    "Manifest",
    "ManifestFile",
    "ManifestRequires",
    "build_manifest",
    "fetch_indexes",
    "fetch_manifest",
    "read_install_state",
    "verify_indexes",
]
