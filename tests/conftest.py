"""
Shared test fixtures and configuration for pytest.
"""

import hashlib
import math

import pytest

from src.bootstrap import ResponseServices
from src.responses import ConnectionGenerator, ResponseIndexer, ResponseSearch
from src.retrieval.embedder import Embedder
from src.retrieval.providers.base import EmbeddingProvider
from src.retrieval.stores.memory import MemoryVectorStore

DIMENSION = 8


class FakeEmbeddingProvider(EmbeddingProvider):
    """Deterministic embeddings: fixed vectors for known texts, hashed otherwise."""

    model = "fake-embedding"

    def __init__(self, dimension: int = DIMENSION, vectors: dict | None = None):
        self.dimension = dimension
        self.vectors = vectors or {}
        self.calls: list[str] = []
        self.fail_with: Exception | None = None

    def embed(self, text: str) -> list[float]:
        self.calls.append(text)
        if self.fail_with is not None:
            raise self.fail_with
        return self.vectors.get(text) or self._hash_vector(text)

    def _hash_vector(self, text: str) -> list[float]:
        digest = hashlib.sha256(text.encode()).digest()
        values = [digest[i] / 255.0 + 0.01 for i in range(self.dimension)]
        norm = math.sqrt(sum(v * v for v in values))
        return [v / norm for v in values]


class RecordingStore(MemoryVectorStore):
    """Memory store that remembers which operations were called."""

    def __init__(self, index_name: str = "responses"):
        super().__init__(index_name=index_name)
        self.calls: list[str] = []

    def upsert(self, records, namespace=None):
        self.calls.append("upsert")
        return super().upsert(records, namespace=namespace)

    def fetch(self, ids, namespace=None):
        self.calls.append("fetch")
        return super().fetch(ids, namespace=namespace)

    def query(self, vector, top_k, filter=None, namespace=None, include_metadata=False, include_values=False):
        self.calls.append("query")
        return super().query(
            vector,
            top_k,
            filter=filter,
            namespace=namespace,
            include_metadata=include_metadata,
            include_values=include_values,
        )


def unit(*values: float) -> list[float]:
    """Pad to DIMENSION with zeros."""
    return list(values) + [0.0] * (DIMENSION - len(values))


@pytest.fixture
def provider() -> FakeEmbeddingProvider:
    return FakeEmbeddingProvider()


@pytest.fixture
def embedder(provider) -> Embedder:
    return Embedder(provider, dimension=DIMENSION)


@pytest.fixture
def store() -> RecordingStore:
    store = RecordingStore()
    store.create_index("responses", DIMENSION)
    return store


@pytest.fixture
def indexer(store, embedder) -> ResponseIndexer:
    return ResponseIndexer(store, embedder, connections_namespace="ns1")


@pytest.fixture
def search(store, embedder) -> ResponseSearch:
    return ResponseSearch(store, embedder)


@pytest.fixture
def connections(store) -> ConnectionGenerator:
    return ConnectionGenerator(store, dimension=DIMENSION, namespace="ns1")


@pytest.fixture
def services(store, embedder, indexer, search, connections) -> ResponseServices:
    return ResponseServices(
        store=store,
        embedder=embedder,
        indexer=indexer,
        search=search,
        connections=connections,
    )
