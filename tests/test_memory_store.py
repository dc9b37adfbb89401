"""
Unit tests for the in-memory vector store and its filter evaluation.
"""

import pytest

from src.errors import IndexNotFoundError, StoreError
from src.retrieval.stores.base import VectorRecord
from src.retrieval.stores.memory import MemoryVectorStore, matches_filter


@pytest.fixture
def memory_store():
    store = MemoryVectorStore(index_name="responses")
    store.create_index("responses", 3)
    return store


class TestMatchesFilter:
    """Tests for Pinecone-style metadata filters."""

    META = {"form_id": "f1", "score": 7, "tags": ["a", "b"], "active": True}

    def test_empty_filter_matches(self):
        assert matches_filter(self.META, None)
        assert matches_filter(self.META, {})

    def test_implicit_equality(self):
        assert matches_filter(self.META, {"form_id": "f1"})
        assert not matches_filter(self.META, {"form_id": "f2"})

    def test_eq_operator(self):
        assert matches_filter(self.META, {"form_id": {"$eq": "f1"}})
        assert not matches_filter(self.META, {"form_id": {"$eq": "f2"}})

    def test_ne_in_nin(self):
        assert matches_filter(self.META, {"form_id": {"$ne": "f2"}})
        assert matches_filter(self.META, {"form_id": {"$in": ["f1", "f3"]}})
        assert not matches_filter(self.META, {"form_id": {"$nin": ["f1"]}})

    def test_list_field_membership(self):
        assert matches_filter(self.META, {"tags": "a"})
        assert matches_filter(self.META, {"tags": {"$in": ["b", "z"]}})
        assert not matches_filter(self.META, {"tags": {"$nin": ["b"]}})

    def test_numeric_comparisons(self):
        assert matches_filter(self.META, {"score": {"$gt": 5, "$lte": 7}})
        assert not matches_filter(self.META, {"score": {"$lt": 7}})

    def test_comparison_on_missing_field_is_false(self):
        assert not matches_filter(self.META, {"missing": {"$gt": 1}})

    def test_and_or(self):
        assert matches_filter(self.META, {"$and": [{"form_id": "f1"}, {"active": True}]})
        assert matches_filter(self.META, {"$or": [{"form_id": "x"}, {"score": 7}]})
        assert not matches_filter(self.META, {"$or": [{"form_id": "x"}, {"score": 8}]})


class TestMemoryVectorStore:
    """Tests for MemoryVectorStore."""

    def test_ensure_index_creates_once(self):
        store = MemoryVectorStore(index_name="responses")
        assert store.ensure_index(dimension=3) is True
        assert store.ensure_index(dimension=3) is False
        assert store.list_indexes() == ["responses"]

    def test_upsert_overwrites_by_id(self, memory_store):
        memory_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0], {"v": 1})])
        memory_store.upsert([VectorRecord("a", [0.0, 1.0, 0.0], {"v": 2})])

        fetched = memory_store.fetch(["a"])
        assert fetched["a"].values == [0.0, 1.0, 0.0]
        assert fetched["a"].metadata == {"v": 2}
        assert memory_store.count == 1

    def test_fetch_omits_missing_ids(self, memory_store):
        memory_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0])])
        assert set(memory_store.fetch(["a", "b"])) == {"a"}

    def test_query_ranks_by_similarity(self, memory_store):
        memory_store.upsert([
            VectorRecord("far", [0.0, 1.0, 0.0]),
            VectorRecord("near", [1.0, 0.1, 0.0]),
        ])
        matches = memory_store.query([1.0, 0.0, 0.0], top_k=2)
        assert [m.id for m in matches] == ["near", "far"]
        assert matches[0].score > matches[1].score
        assert matches[0].values is None
        assert matches[0].metadata is None

    def test_query_includes_values_and_metadata(self, memory_store):
        memory_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0], {"k": "v"})])
        match = memory_store.query([1.0, 0.0, 0.0], top_k=1, include_metadata=True, include_values=True)[0]
        assert match.values == [1.0, 0.0, 0.0]
        assert match.metadata == {"k": "v"}

    def test_query_respects_top_k_and_filter(self, memory_store):
        memory_store.upsert([
            VectorRecord(f"r{i}", [1.0, float(i), 0.0], {"form_id": "f1" if i % 2 else "f2"})
            for i in range(6)
        ])
        matches = memory_store.query([1.0, 0.0, 0.0], top_k=2, filter={"form_id": {"$eq": "f1"}},
                                     include_metadata=True)
        assert len(matches) == 2
        assert all(m.metadata["form_id"] == "f1" for m in matches)

    def test_namespaces_are_isolated(self, memory_store):
        memory_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0])], namespace="ns1")
        memory_store.upsert([VectorRecord("b", [1.0, 0.0, 0.0])])

        assert [m.id for m in memory_store.query([1.0, 0.0, 0.0], top_k=10, namespace="ns1")] == ["a"]
        assert [m.id for m in memory_store.query([1.0, 0.0, 0.0], top_k=10)] == ["b"]
        assert memory_store.fetch(["a"]) == {}

    def test_dimension_mismatch_is_store_error(self, memory_store):
        with pytest.raises(StoreError):
            memory_store.upsert([VectorRecord("a", [1.0, 0.0])])
        with pytest.raises(StoreError):
            memory_store.query([1.0, 0.0], top_k=1)

    def test_delete_all_namespace(self, memory_store):
        memory_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0])], namespace="ns1")
        memory_store.upsert([VectorRecord("b", [1.0, 0.0, 0.0])])

        memory_store.delete_all(namespace="ns1")

        assert memory_store.fetch(["a"], namespace="ns1") == {}
        assert set(memory_store.fetch(["b"])) == {"b"}

    def test_delete_all_default_namespace_only(self, memory_store):
        memory_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0])], namespace="ns1")
        memory_store.upsert([VectorRecord("b", [1.0, 0.0, 0.0])])

        memory_store.delete_all()

        assert memory_store.fetch(["b"]) == {}
        assert set(memory_store.fetch(["a"], namespace="ns1")) == {"a"}

    def test_delete_all_empty_default_namespace(self, memory_store):
        memory_store.delete_all()
        assert memory_store.count == 0

    def test_delete_all_missing_index(self, memory_store):
        with pytest.raises(IndexNotFoundError):
            memory_store.delete_all(index_name="nope")

    def test_delete_all_missing_namespace(self, memory_store):
        with pytest.raises(IndexNotFoundError):
            memory_store.delete_all(namespace="never-used")
