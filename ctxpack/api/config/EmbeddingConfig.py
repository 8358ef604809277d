"""Embedding provider configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EmbeddingConfig(BaseModel):
    """Which model turns query text into vectors."""

    model_config = ConfigDict(extra="forbid")

    provider: Literal["remote", "local"] = Field("remote", description="remote HTTP API or local sentence-transformers")
    model: str = Field("text-embedding-3-small", description="Embedding model name")
    host: str = Field("https://api.openai.com/v1", description="Base URL of the remote embeddings API")
    token: str = Field("", description="Bearer token for the remote embeddings API")
    batch_size: int = Field(64, gt=0, description="Texts per embedding request")
    dim: int | None = Field(None, gt=0, description="Expected embedding dimension, recorded in manifests")

    @model_validator(mode="after")
    def validate_model(self) -> "EmbeddingConfig":
        """Validate the model name."""
        if not self.model.strip():
            raise ValueError("embedding.model must be a non-empty string")
        return self
