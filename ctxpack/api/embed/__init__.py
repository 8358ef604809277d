"""Embedding API module."""

from .Embedder import Embedder
from .get_embedder import get_embedder
from .LocalEmbedder import LocalEmbedder
from .RemoteEmbedder import RemoteEmbedder

__all__ = ["Embedder", "LocalEmbedder", "RemoteEmbedder", "get_embedder"]
