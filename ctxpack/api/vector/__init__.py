"""Vector math primitives."""

from .cosine_similarity import cosine_similarity
from .dot_product import dot_product
from .vector_norm import vector_norm

__all__ = ["cosine_similarity", "dot_product", "vector_norm"]
