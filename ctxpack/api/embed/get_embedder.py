"""Pick an Embedder for the configured provider."""

from ..config.EmbeddingConfig import EmbeddingConfig
from .Embedder import Embedder
from .LocalEmbedder import LocalEmbedder
from .RemoteEmbedder import RemoteEmbedder


def get_embedder(config: EmbeddingConfig, timeout: float | None = None) -> Embedder:
    """Return a LocalEmbedder or RemoteEmbedder."""
    if config.provider == "local":
        return LocalEmbedder(config)
    return RemoteEmbedder(config, timeout=timeout)
