"""Dot product of two equal-length vectors."""

from collections.abc import Sequence

import numpy as np

from ..errors.InvalidInputError import InvalidInputError


def dot_product(vector_a: Sequence[float], vector_b: Sequence[float]) -> float:
    """Return sum(a_i * b_i).

    Raises:
        InvalidInputError: If the vectors differ in length
    """
    a = np.asarray(vector_a, dtype=np.float64)
    b = np.asarray(vector_b, dtype=np.float64)
    if a.ndim != 1 or b.ndim != 1:
        raise InvalidInputError(f"vectors must be 1D (found ndim={a.ndim} and ndim={b.ndim})")
    if a.shape[0] != b.shape[0]:
        raise InvalidInputError(f"vector lengths do not match (a={a.shape[0]}, b={b.shape[0]})")
    return float(a @ b)
