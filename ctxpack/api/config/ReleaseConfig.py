"""Release (artifact source) configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReleaseConfig(BaseModel):
    """Where published index artifacts and their manifest live."""

    model_config = ConfigDict(extra="forbid")

    repo_url: str = Field(..., description="Repository URL, e.g. https://github.com/stackpress/mcp")
    version: str = Field(..., description="Snapshot version tag")
    manifest_name: str = Field("index-manifest.json", description="Manifest filename within the release")
    user_agent: str = Field("ctxpack fetch", description="User-Agent header for downloads")
    timeout_secs: float | None = Field(None, gt=0, description="Per-request timeout; None waits indefinitely")

    @field_validator("repo_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("release.repo_url must be a non-empty string")
        return value

    @property
    def release_url(self) -> str:
        """Base URL for all artifacts of this version."""
        return f"{self.repo_url}/releases/download/{self.version}"

    @property
    def manifest_url(self) -> str:
        return f"{self.release_url}/{self.manifest_name}"
