"""Vector store abstraction layer."""

from .base import Metadata, MetadataValue, QueryFilter, QueryMatch, VectorRecord, VectorStore
from .router import get_vector_store

__all__ = [
    "Metadata",
    "MetadataValue",
    "QueryFilter",
    "QueryMatch",
    "VectorRecord",
    "VectorStore",
    "get_vector_store",
]
