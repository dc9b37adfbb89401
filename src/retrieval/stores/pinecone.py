"""Pinecone serverless vector store."""

import logging
from typing import Any

from pinecone import Pinecone, ServerlessSpec
from pinecone.exceptions import NotFoundException

from src.errors import ConfigError

from .base import QueryFilter, QueryMatch, VectorRecord, VectorStore

logger = logging.getLogger(__name__)


class PineconeVectorStore(VectorStore):
    """Pinecone client wrapper bound to one index."""

    provider = "pinecone"
    not_found_errors = (NotFoundException,)

    def __init__(self, api_key: str | None = None, index_name: str = "responses"):
        super().__init__(index_name=index_name)
        if not api_key:
            logger.error("PINECONE_API_KEY is not set.")
            raise ConfigError("PINECONE_API_KEY environment variable is not set")
        self._client = Pinecone(api_key=api_key)
        self._indexes: dict[str, Any] = {}
        logger.info("Pinecone client initialized.")

    def _index(self, name: str | None = None):
        name = name or self.index_name
        if name not in self._indexes:
            self._indexes[name] = self._client.Index(name)
        return self._indexes[name]

    @staticmethod
    def _namespace_kwargs(namespace: str | None) -> dict:
        return {"namespace": namespace} if namespace else {}

    # ========================================================================
    # Index management
    # ========================================================================

    def list_indexes(self) -> list[str]:
        with self._translate_errors("list_indexes"):
            return list(self._client.list_indexes().names())

    def create_index(
        self,
        name: str,
        dimension: int,
        metric: str = "cosine",
        cloud: str = "aws",
        region: str = "us-east-1",
    ) -> None:
        with self._translate_errors("create_index"):
            self._client.create_index(
                name=name,
                dimension=dimension,
                metric=metric,
                spec=ServerlessSpec(cloud=cloud, region=region),
            )

    def delete_all(self, index_name: str | None = None, namespace: str | None = None) -> None:
        with self._translate_errors("delete_all"):
            self._index(index_name).delete(delete_all=True, **self._namespace_kwargs(namespace))

    # ========================================================================
    # Records
    # ========================================================================

    def upsert(self, records: list[VectorRecord], namespace: str | None = None) -> None:
        if not records:
            return
        vectors = [
            {"id": r.id, "values": r.values, "metadata": r.metadata}
            for r in records
        ]
        with self._translate_errors("upsert"):
            self._index().upsert(vectors=vectors, **self._namespace_kwargs(namespace))
        logger.debug(f"Upserted {len(vectors)} records to {self.index_name}")

    def fetch(self, ids: list[str], namespace: str | None = None) -> dict[str, VectorRecord]:
        with self._translate_errors("fetch"):
            response = self._index().fetch(ids=ids, **self._namespace_kwargs(namespace))

        records: dict[str, VectorRecord] = {}
        for record_id, vector in (response.vectors or {}).items():
            records[record_id] = VectorRecord(
                id=record_id,
                values=list(vector.values or []),
                metadata=dict(vector.metadata or {}),
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
        kwargs: dict[str, Any] = {
            "vector": vector,
            "top_k": top_k,
            "include_metadata": include_metadata,
            "include_values": include_values,
            **self._namespace_kwargs(namespace),
        }
        if filter:
            kwargs["filter"] = filter

        with self._translate_errors("query"):
            response = self._index().query(**kwargs)

        return [
            QueryMatch(
                id=match.id,
                score=match.score,
                values=list(match.values) if include_values and match.values else None,
                metadata=dict(match.metadata) if include_metadata and match.metadata else None,
            )
            for match in (response.matches or [])
        ]
