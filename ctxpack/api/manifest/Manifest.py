"""Manifest describing a published index snapshot."""

from pydantic import BaseModel, Field

from .ManifestFile import ManifestFile


class ManifestRequires(BaseModel):
    """Embedding model the snapshot was built with."""

    embedding_model: str
    embedding_dim: int = Field(..., gt=0)


class Manifest(BaseModel):
    """Trust anchor for fetch and verify; its checksums are taken as authentic."""

    pack: str | None = None
    version: str
    created: str | None = None
    requires: ManifestRequires | None = None
    files: list[ManifestFile]
