"""Chunk store configuration."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from ...utils.expand_path import expand_path


class StoreConfig(BaseModel):
    """Location of the per-repo JSONL index files."""

    model_config = ConfigDict(extra="forbid")

    base_dir: str = Field(..., description="Directory holding <repo>.jsonl files, state.json and artifacts")

    @property
    def path(self) -> Path:
        """Expanded store directory."""
        return expand_path(self.base_dir)
