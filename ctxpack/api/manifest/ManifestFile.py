"""One published artifact in a manifest."""

from pydantic import BaseModel, Field

GZIP_SUFFIX = ".jsonl.gz"


class ManifestFile(BaseModel):
    """A compressed per-repo index file and its checksums."""

    repo: str = Field(..., description="Repo name, e.g. lib")
    name: str = Field(..., description="Compressed filename, e.g. lib.jsonl.gz")
    unpacked: str = Field(..., description="Decompressed filename, e.g. lib.jsonl")
    sha256_gz: str = Field(..., description="SHA256 of the compressed file")
    bytes_gz: int | None = Field(None, ge=0, description="Size of the compressed file")
    bytes: int | None = Field(None, ge=0, description="Size of the decompressed file")

    @property
    def base_name(self) -> str:
        """Filename without the .jsonl.gz suffix."""
        if self.name.endswith(GZIP_SUFFIX):
            return self.name[: -len(GZIP_SUFFIX)]
        return self.name
