"""Cosine similarity between two vectors."""

from collections.abc import Sequence

from .dot_product import dot_product
from .vector_norm import vector_norm


def cosine_similarity(vector_a: Sequence[float], vector_b: Sequence[float]) -> float:
    """Return dot(a, b) / (|a| * |b|).

    If either vector is all zeros the denominator is treated as 1, so the
    result is the raw dot product (which is then 0.0).
    """
    denominator = vector_norm(vector_a) * vector_norm(vector_b)
    return dot_product(vector_a, vector_b) / (denominator or 1.0)
