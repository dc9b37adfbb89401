"""Response indexing, similarity search and form connections."""

from .connections import CONNECTIONS_TOP_K, ConnectionGenerator
from .indexer import ResponseIndexer
from .models import Connection, FormResponseMetadata, ResponseMetadata, sanitize_id_part
from .search import ResponseSearch

__all__ = [
    "CONNECTIONS_TOP_K",
    "Connection",
    "ConnectionGenerator",
    "FormResponseMetadata",
    "ResponseIndexer",
    "ResponseMetadata",
    "ResponseSearch",
    "sanitize_id_part",
]
