"""Vector store interface and record types."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Union

from src.errors import IndexNotFoundError, StoreError

logger = logging.getLogger(__name__)

MetadataValue = Union[str, bool, int, float, list[str]]
Metadata = dict[str, MetadataValue]
QueryFilter = dict[str, Any]


@dataclass
class VectorRecord:
    """A stored vector with its metadata."""

    id: str
    values: list[float]
    metadata: Metadata = field(default_factory=dict)


@dataclass
class QueryMatch:
    """A single match returned by VectorStore.query.

    `values` and `metadata` are only populated when requested.
    """

    id: str
    score: Optional[float] = None
    values: Optional[list[float]] = None
    metadata: Optional[Metadata] = None


class VectorStore(ABC):
    """Minimal interface for a namespaced vector index.

    All backends must implement this interface.
    Backends can be swapped via VECTOR_STORE_PROVIDER env var.

    Filters passed to `query` are forwarded as-is; their matching semantics
    belong to the backend.
    """

    provider: str
    # Exception types the backend SDK raises for a missing index/namespace.
    not_found_errors: tuple[type[BaseException], ...] = ()

    def __init__(self, index_name: str = "responses"):
        self.index_name = index_name

    # ========================================================================
    # Index management
    # ========================================================================

    @abstractmethod
    def list_indexes(self) -> list[str]:
        """Return the names of all indexes."""
        raise NotImplementedError

    @abstractmethod
    def create_index(
        self,
        name: str,
        dimension: int,
        metric: str = "cosine",
        cloud: str = "aws",
        region: str = "us-east-1",
    ) -> None:
        """Create an index. Callers check `list_indexes` first."""
        raise NotImplementedError

    def ensure_index(
        self,
        dimension: int,
        metric: str = "cosine",
        cloud: str = "aws",
        region: str = "us-east-1",
    ) -> bool:
        """Create the configured index if it does not exist.

        Returns:
            True if the index was created, False if it already existed.
        """
        if self.index_name in self.list_indexes():
            logger.info(f"Index {self.index_name!r} already exists")
            return False
        logger.info(f"Index {self.index_name!r} does not exist. Creating now...")
        self.create_index(self.index_name, dimension, metric=metric, cloud=cloud, region=region)
        logger.info(f"Index {self.index_name!r} created. It may take moments to be ready.")
        return True

    @abstractmethod
    def delete_all(self, index_name: str | None = None, namespace: str | None = None) -> None:
        """Delete every record in an index (optionally one namespace)."""
        raise NotImplementedError

    # ========================================================================
    # Records
    # ========================================================================

    @abstractmethod
    def upsert(self, records: list[VectorRecord], namespace: str | None = None) -> None:
        """Insert or overwrite records by id."""
        raise NotImplementedError

    @abstractmethod
    def fetch(self, ids: list[str], namespace: str | None = None) -> dict[str, VectorRecord]:
        """Fetch records by id. Missing ids are absent from the result."""
        raise NotImplementedError

    @abstractmethod
    def query(
        self,
        vector: list[float],
        top_k: int,
        filter: QueryFilter | None = None,
        namespace: str | None = None,
        include_metadata: bool = False,
        include_values: bool = False,
    ) -> list[QueryMatch]:
        """Nearest-neighbour search, best match first."""
        raise NotImplementedError

    # ========================================================================
    # Error translation
    # ========================================================================

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Re-raise backend SDK failures as StoreError / IndexNotFoundError."""
        try:
            yield
        except StoreError:
            raise
        except self.not_found_errors as e:
            raise IndexNotFoundError(
                f"{self.provider} {operation} failed, index not found: {e}",
                operation=operation,
            ) from e
        except Exception as e:
            raise StoreError(f"{self.provider} {operation} failed: {e}", operation=operation) from e
