"""Embedding collaborator interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Embedder(Protocol):
    """Turns texts into vectors, one per text, in input order."""

    def embed(self, texts: list[str]) -> list[list[float]]: ...
