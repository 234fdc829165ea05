# Path: vectordb/search/__init__.py
# Purpose: Package initializer for similarity metrics and the query engine.
# Layer: vectordb/search.
# Details: Exposes metric functions and the namespace scanner used by the store facade.

from .similarity import (
    SimilarityMetric,
    cosine_similarity,
    dot_product,
    dot_similarity,
    euclidean_similarity,
    score_vectors,
    similarity,
)
from .engine import QueryEngine, as_vector

__all__ = [
    "QueryEngine",
    "SimilarityMetric",
    "as_vector",
    "cosine_similarity",
    "dot_product",
    "dot_similarity",
    "euclidean_similarity",
    "score_vectors",
    "similarity",
]
