"""Top-level ctxpack configuration."""

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .EmbeddingConfig import EmbeddingConfig
from .LogConfig import LogConfig
from .ReleaseConfig import ReleaseConfig
from .StoreConfig import StoreConfig


class CtxpackConfig(BaseModel):
    """Top-level configuration passed explicitly into store, fetch and verify."""

    model_config = ConfigDict(extra="forbid")

    pack: str = Field("Context Pack", description="Human-readable pack name written into manifests")
    order: list[str] = Field(
        default_factory=list, description="Repo dependency order, most upstream first; a repo's rank is its position + 1"
    )
    store: StoreConfig
    release: ReleaseConfig
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get ctxpack home directory based on CTXPACK_HOME or default to ~/.ctxpack."""
        home_env = os.environ.get("CTXPACK_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".ctxpack"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on CTXPACK_HOME or default to ~/.ctxpack."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls, path: Path | None = None) -> "CtxpackConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = path or cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert CtxpackConfig instance to a dictionary for serialization."""
        return self.model_dump(mode="json")
