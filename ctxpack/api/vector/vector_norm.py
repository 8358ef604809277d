"""Euclidean norm of a vector."""

from collections.abc import Sequence

import numpy as np


def vector_norm(vector: Sequence[float]) -> float:
    """Return sqrt(sum(v_i ** 2))."""
    return float(np.linalg.norm(np.asarray(vector, dtype=np.float64)))
