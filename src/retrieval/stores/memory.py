"""In-memory vector store for tests and offline demos.

Linear scan with cosine ranking; supports the Pinecone metadata filter
operators used by the application.
"""

import copy
import logging
from typing import Any

from src.errors import IndexNotFoundError, InvalidArgumentError
from src.retrieval.similarity import cosine_similarity

from .base import Metadata, QueryFilter, QueryMatch, VectorRecord, VectorStore

logger = logging.getLogger(__name__)


def _compare(op: str, actual: Any, expected: Any) -> bool:
    if op == "$eq":
        return actual == expected
    if op == "$ne":
        return actual != expected
    if op == "$in":
        if isinstance(actual, list):
            return any(a in expected for a in actual)
        return actual in expected
    if op == "$nin":
        if isinstance(actual, list):
            return not any(a in expected for a in actual)
        return actual not in expected
    if actual is None or isinstance(actual, (str, list)):
        return False
    if op == "$gt":
        return actual > expected
    if op == "$gte":
        return actual >= expected
    if op == "$lt":
        return actual < expected
    if op == "$lte":
        return actual <= expected
    raise InvalidArgumentError(f"Unsupported filter operator: {op}")


def matches_filter(metadata: Metadata, query_filter: QueryFilter | None) -> bool:
    """Evaluate a Pinecone-style metadata filter against one record."""
    if not query_filter:
        return True
    for key, condition in query_filter.items():
        if key == "$and":
            if not all(matches_filter(metadata, sub) for sub in condition):
                return False
        elif key == "$or":
            if not any(matches_filter(metadata, sub) for sub in condition):
                return False
        elif isinstance(condition, dict):
            actual = metadata.get(key)
            if not all(_compare(op, actual, expected) for op, expected in condition.items()):
                return False
        else:
            actual = metadata.get(key)
            if isinstance(actual, list):
                if condition not in actual:
                    return False
            elif actual != condition:
                return False
    return True


class MemoryVectorStore(VectorStore):
    """Dict-backed store: index name -> namespace -> id -> record."""

    provider = "memory"

    def __init__(self, index_name: str = "responses"):
        super().__init__(index_name=index_name)
        self._indexes: dict[str, dict[str, dict[str, VectorRecord]]] = {}
        self._dimensions: dict[str, int] = {}

    def _namespace(self, namespace: str | None, create: bool = False) -> dict[str, VectorRecord]:
        index = self._indexes.get(self.index_name)
        if index is None:
            if not create:
                return {}
            index = self._indexes.setdefault(self.index_name, {})
        if create:
            return index.setdefault(namespace or "", {})
        return index.get(namespace or "", {})

    def _check_dimension(self, values: list[float]) -> None:
        expected = self._dimensions.get(self.index_name)
        if expected is not None and len(values) != expected:
            raise InvalidArgumentError(
                f"Vector dimension {len(values)} does not match index dimension {expected}"
            )

    # ========================================================================
    # Index management
    # ========================================================================

    def list_indexes(self) -> list[str]:
        return sorted(self._indexes)

    def create_index(
        self,
        name: str,
        dimension: int,
        metric: str = "cosine",
        cloud: str = "aws",
        region: str = "us-east-1",
    ) -> None:
        self._indexes.setdefault(name, {})
        self._dimensions[name] = dimension

    def delete_all(self, index_name: str | None = None, namespace: str | None = None) -> None:
        name = index_name or self.index_name
        index = self._indexes.get(name)
        if index is None:
            raise IndexNotFoundError(f"Index {name!r} not found", operation="delete_all")
        if namespace and namespace not in index:
            raise IndexNotFoundError(f"Namespace {namespace!r} not found", operation="delete_all")
        # like Pinecone, no namespace means the default one only
        index.get(namespace or "", {}).clear()

    # ========================================================================
    # Records
    # ========================================================================

    def upsert(self, records: list[VectorRecord], namespace: str | None = None) -> None:
        with self._translate_errors("upsert"):
            for record in records:
                self._check_dimension(record.values)
            target = self._namespace(namespace, create=True)
            for record in records:
                target[record.id] = copy.deepcopy(record)

    def fetch(self, ids: list[str], namespace: str | None = None) -> dict[str, VectorRecord]:
        records = self._namespace(namespace)
        return {i: copy.deepcopy(records[i]) for i in ids if i in records}

    def query(
        self,
        vector: list[float],
        top_k: int,
        filter: QueryFilter | None = None,
        namespace: str | None = None,
        include_metadata: bool = False,
        include_values: bool = False,
    ) -> list[QueryMatch]:
        with self._translate_errors("query"):
            self._check_dimension(vector)
            scored = [
                (cosine_similarity(vector, record.values), record)
                for record in self._namespace(namespace).values()
                if matches_filter(record.metadata, filter)
            ]
        scored.sort(key=lambda t: t[0], reverse=True)

        return [
            QueryMatch(
                id=record.id,
                score=score,
                values=list(record.values) if include_values else None,
                metadata=copy.deepcopy(record.metadata) if include_metadata else None,
            )
            for score, record in scored[:top_k]
        ]

    @property
    def count(self) -> int:
        """Number of records across all namespaces of the bound index."""
        return sum(len(ns) for ns in self._indexes.get(self.index_name, {}).values())
