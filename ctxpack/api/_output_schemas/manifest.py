"""Output schemas for manifest commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ManifestFetchOutput(BaseOutputSchema):
    """Output schema for fetch command."""

    destination: str = Field("", description="Store directory that received the files")
    version: str = Field("", description="Installed snapshot version, empty on failure")
    installed_at: str = Field("", description="ISO timestamp written to state.json, empty on failure")
    messages: list[str] = Field(default_factory=list, description="Progress messages in order")


class ManifestVerifyOutput(BaseOutputSchema):
    """Output schema for verify command."""

    destination: str = Field("", description="Store directory that was checked")
    verified: bool = Field(False, description="True if every manifest file is present and matches")
    installed_version: str = Field("", description="Version recorded in state.json, empty if none")
    messages: list[str] = Field(default_factory=list, description="Progress messages in order")


class ManifestPackOutput(BaseOutputSchema):
    """Output schema for pack command."""

    store_dir: str = Field("", description="Directory that was packaged")
    manifest_path: str = Field("", description="Path of the written manifest")
    version: str = Field("", description="Snapshot version recorded in the manifest")
    files: list[dict[str, Any]] = Field(default_factory=list, description="Manifest file entries")
