"""ChromaDB vector store for local development.

Each (index, namespace) pair maps to one persistent collection:
    responses            -> default namespace of index "responses"
    responses__ns__ns1   -> namespace "ns1"
"""

import json
import logging
from typing import Any, Optional

import chromadb

from src.errors import IndexNotFoundError

from .base import Metadata, QueryFilter, QueryMatch, VectorRecord, VectorStore

logger = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = "__ns__"
LIST_FIELDS_KEY = "_list_fields"
COLLECTION_METADATA = {"hnsw:space": "cosine"}


def _encode_metadata(metadata: Metadata) -> dict:
    """Chroma only stores scalars; list values are JSON-encoded.

    The list-field marker is always written since Chroma rejects empty metadata.
    """
    encoded: dict[str, Any] = {}
    list_fields = []
    for key, value in metadata.items():
        if isinstance(value, list):
            encoded[key] = json.dumps(value)
            list_fields.append(key)
        else:
            encoded[key] = value
    encoded[LIST_FIELDS_KEY] = ",".join(list_fields)
    return encoded


def _decode_metadata(metadata: Optional[dict]) -> Metadata:
    if not metadata:
        return {}
    decoded = dict(metadata)
    list_fields = decoded.pop(LIST_FIELDS_KEY, "")
    for key in filter(None, list_fields.split(",")):
        if key in decoded:
            decoded[key] = json.loads(decoded[key])
    return decoded


def _to_chroma_where(query_filter: QueryFilter | None) -> Optional[dict]:
    """Chroma needs an explicit $and when several fields are given."""
    if not query_filter:
        return None
    if len(query_filter) > 1 and not any(k.startswith("$") for k in query_filter):
        return {"$and": [{key: value} for key, value in query_filter.items()]}
    return query_filter


class ChromaVectorStore(VectorStore):
    """ChromaDB wrapper with persistent storage."""

    provider = "chroma"

    def __init__(
        self,
        persist_dir: str = "data/chroma",
        index_name: str = "responses",
    ):
        super().__init__(index_name=index_name)
        self._persist_dir = persist_dir
        self._client = chromadb.PersistentClient(path=persist_dir)
        logger.info(f"Chroma client initialized at {persist_dir}")

    # ========================================================================
    # Collection helpers
    # ========================================================================

    def _collection_name(self, index_name: str | None, namespace: str | None) -> str:
        name = index_name or self.index_name
        return f"{name}{NAMESPACE_SEPARATOR}{namespace}" if namespace else name

    def _collection_names(self) -> list[str]:
        # chromadb 0.6 returns names, other releases return Collection objects
        return [c if isinstance(c, str) else c.name for c in self._client.list_collections()]

    def _existing_collection(self, name: str):
        if name not in self._collection_names():
            return None
        return self._client.get_collection(name)

    def _writable_collection(self, name: str):
        return self._client.get_or_create_collection(name=name, metadata=COLLECTION_METADATA)

    # ========================================================================
    # Index management
    # ========================================================================

    def list_indexes(self) -> list[str]:
        with self._translate_errors("list_indexes"):
            return [n for n in self._collection_names() if NAMESPACE_SEPARATOR not in n]

    def create_index(
        self,
        name: str,
        dimension: int,
        metric: str = "cosine",
        cloud: str = "aws",
        region: str = "us-east-1",
    ) -> None:
        with self._translate_errors("create_index"):
            self._client.get_or_create_collection(name=name, metadata={"hnsw:space": metric})

    def delete_all(self, index_name: str | None = None, namespace: str | None = None) -> None:
        name = self._collection_name(index_name, namespace)
        with self._translate_errors("delete_all"):
            if name not in self._collection_names():
                raise IndexNotFoundError(f"Collection {name!r} not found", operation="delete_all")
            self._client.delete_collection(name)
            if not namespace:
                self._writable_collection(name)

    # ========================================================================
    # Records
    # ========================================================================

    def upsert(self, records: list[VectorRecord], namespace: str | None = None) -> None:
        if not records:
            return
        with self._translate_errors("upsert"):
            collection = self._writable_collection(self._collection_name(None, namespace))
            collection.upsert(
                ids=[r.id for r in records],
                embeddings=[r.values for r in records],
                metadatas=[_encode_metadata(r.metadata) for r in records],
            )
        logger.debug(f"Upserted {len(records)} records to {collection.name}")

    def fetch(self, ids: list[str], namespace: str | None = None) -> dict[str, VectorRecord]:
        with self._translate_errors("fetch"):
            collection = self._existing_collection(self._collection_name(None, namespace))
            if collection is None:
                return {}
            result = collection.get(ids=ids, include=["embeddings", "metadatas"])

        embeddings = result.get("embeddings")
        metadatas = result.get("metadatas")
        records: dict[str, VectorRecord] = {}
        for i, record_id in enumerate(result.get("ids") or []):
            values = embeddings[i] if embeddings is not None else []
            records[record_id] = VectorRecord(
                id=record_id,
                values=[float(v) for v in values],
                metadata=_decode_metadata(metadatas[i] if metadatas is not None else None),
            )
        return records

    def query(
        self,
        vector: list[float],
        top_k: int,
        filter: QueryFilter | None = None,
        namespace: str | None = None,
        include_metadata: bool = False,
        include_values: bool = False,
    ) -> list[QueryMatch]:
        include = ["distances", "metadatas"]
        if include_values:
            include.append("embeddings")

        with self._translate_errors("query"):
            collection = self._existing_collection(self._collection_name(None, namespace))
            if collection is None:
                return []
            n_results = min(top_k, collection.count())
            if n_results == 0:
                return []
            results = collection.query(
                query_embeddings=[vector],
                n_results=n_results,
                where=_to_chroma_where(filter),
                include=include,
            )

        if not results or not results["ids"] or not results["ids"][0]:
            return []

        ids = results["ids"][0]
        distances = results["distances"][0] if results.get("distances") is not None else [None] * len(ids)
        metadatas = results["metadatas"][0] if results.get("metadatas") is not None else [None] * len(ids)
        embeddings = results["embeddings"][0] if results.get("embeddings") is not None else [None] * len(ids)

        matches = []
        for record_id, distance, meta, values in zip(ids, distances, metadatas, embeddings):
            # Chroma cosine distance = 1 - cosine similarity
            score = None if distance is None else round(1.0 - float(distance), 6)
            matches.append(QueryMatch(
                id=record_id,
                score=score,
                values=[float(v) for v in values] if include_values and values is not None else None,
                metadata=_decode_metadata(meta) if include_metadata else None,
            ))
        return matches
