"""sentence-transformers embeddings."""

from functools import lru_cache

import numpy as np

from ..config.EmbeddingConfig import EmbeddingConfig
from ..errors.InvalidInputError import InvalidInputError

DEFAULT_LOCAL_MODEL = "sentence-transformers/all-MiniLM-L6-v2"


@lru_cache(maxsize=4)
def _load_embedder(model_name: str):
    try:
        from sentence_transformers import SentenceTransformer
    except ImportError as exc:  # pragma: no cover - exercised in integration/runtime
        raise RuntimeError(
            "sentence-transformers is required for local embeddings. Install it in the ctxpack environment."
        ) from exc
    return SentenceTransformer(model_name)


class LocalEmbedder:
    """Embed on this machine with mean-pooled, L2-normalized vectors."""

    def __init__(self, config: EmbeddingConfig):
        self.config = config

    @property
    def model_name(self) -> str:
        # The remote default model name means nothing to sentence-transformers
        if self.config.model == "text-embedding-3-small":
            return DEFAULT_LOCAL_MODEL
        return self.config.model

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        embedder = _load_embedder(self.model_name)
        matrix = embedder.encode(
            texts,
            batch_size=self.config.batch_size,
            show_progress_bar=False,
            convert_to_numpy=True,
            normalize_embeddings=True,
        )
        matrix = np.asarray(matrix, dtype=np.float32)
        if matrix.ndim != 2:
            raise InvalidInputError(f"embedding matrix must be 2D (found ndim={matrix.ndim})")
        if matrix.shape[0] != len(texts):
            raise InvalidInputError(
                f"embedding row count must match text count (rows={matrix.shape[0]}, texts={len(texts)})"
            )
        return matrix.tolist()
