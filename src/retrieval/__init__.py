"""Retrieval module: embedding, vector storage and similarity."""

from .embedder import Embedder
from .providers import EmbeddingProvider, get_embedding_provider
from .similarity import cosine_similarity
from .stores import QueryMatch, VectorRecord, VectorStore, get_vector_store

__all__ = [
    "Embedder",
    "EmbeddingProvider",
    "get_embedding_provider",
    "cosine_similarity",
    "QueryMatch",
    "VectorRecord",
    "VectorStore",
    "get_vector_store",
]
