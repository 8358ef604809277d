"""OpenAI-compatible HTTP embeddings client."""

import requests

from ..config.EmbeddingConfig import EmbeddingConfig
from ..errors.InvalidInputError import InvalidInputError
from ..errors.TransportError import TransportError


class RemoteEmbedder:
    """POST {input, model} to <host>/embeddings and return data[i].embedding."""

    def __init__(self, config: EmbeddingConfig, timeout: float | None = None):
        self.config = config
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.config.host.rstrip('/')}/embeddings"

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            return []
        vectors: list[list[float]] = []
        batch_size = self.config.batch_size
        for i in range(0, len(texts), batch_size):
            vectors.extend(self._embed_batch(texts[i : i + batch_size]))
        return vectors

    def _embed_batch(self, batch: list[str]) -> list[list[float]]:
        try:
            with requests.post(
                self.url,
                headers={
                    "Authorization": f"Bearer {self.config.token}",
                    "Content-Type": "application/json",
                },
                json={"input": batch, "model": self.config.model},
                timeout=self.timeout,
            ) as response:
                response.raise_for_status()
                payload = response.json()
        except requests.RequestException as e:
            raise TransportError(self.url, f"Failed to fetch embeddings: {e}") from e
        except ValueError as e:
            raise TransportError(self.url, f"Invalid embeddings response: {e}") from e

        data = payload.get("data") if isinstance(payload, dict) else None
        if not isinstance(data, list) or len(data) != len(batch):
            raise InvalidInputError(
                f"embedding row count must match text count (rows={len(data) if isinstance(data, list) else 0}, "
                f"texts={len(batch)})"
            )
        # The API may return rows out of order; "index" restores input order
        rows = sorted(data, key=lambda d: d.get("index", 0))
        return [[float(x) for x in row["embedding"]] for row in rows]
