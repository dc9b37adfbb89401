"""
Integration tests for the Chroma backend against a temporary persistent store.
"""

import pytest

pytest.importorskip("chromadb")

from src.errors import IndexNotFoundError
from src.retrieval.stores.base import VectorRecord
from src.retrieval.stores.chroma import ChromaVectorStore, _decode_metadata, _encode_metadata, _to_chroma_where


@pytest.fixture
def chroma_store(tmp_path):
    store = ChromaVectorStore(persist_dir=str(tmp_path / "chroma"), index_name="responses")
    store.ensure_index(dimension=3)
    return store


class TestMetadataEncoding:
    """Tests for list-valued metadata encoding."""

    def test_list_values_roundtrip(self):
        metadata = {"tags": ["a", "b"], "name": "n", "count": 2}
        encoded = _encode_metadata(metadata)
        assert encoded["tags"] == '["a", "b"]'
        assert _decode_metadata(encoded) == metadata

    def test_empty_metadata(self):
        assert _encode_metadata({}) == {"_list_fields": ""}
        assert _decode_metadata({"_list_fields": ""}) == {}
        assert _decode_metadata(None) == {}

    def test_multi_field_filter_gets_and(self):
        assert _to_chroma_where({"a": 1, "b": 2}) == {"$and": [{"a": 1}, {"b": 2}]}
        assert _to_chroma_where({"a": {"$eq": 1}}) == {"a": {"$eq": 1}}
        assert _to_chroma_where(None) is None


class TestChromaVectorStore:
    """Tests for ChromaVectorStore."""

    def test_ensure_index(self, chroma_store):
        assert chroma_store.list_indexes() == ["responses"]
        assert chroma_store.ensure_index(dimension=3) is False

    def test_upsert_fetch(self, chroma_store):
        chroma_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0], {"name": "A", "tags": ["x"]})])

        fetched = chroma_store.fetch(["a", "missing"])
        assert set(fetched) == {"a"}
        assert fetched["a"].values == pytest.approx([1.0, 0.0, 0.0])
        assert fetched["a"].metadata == {"name": "A", "tags": ["x"]}

    def test_query_with_filter_and_namespace(self, chroma_store):
        chroma_store.upsert([
            VectorRecord("a", [1.0, 0.0, 0.0], {"form_id": "f1"}),
            VectorRecord("b", [0.9, 0.1, 0.0], {"form_id": "f2"}),
            VectorRecord("c", [0.0, 1.0, 0.0], {"form_id": "f1"}),
        ], namespace="ns1")

        matches = chroma_store.query(
            [1.0, 0.0, 0.0],
            top_k=10,
            filter={"form_id": {"$eq": "f1"}},
            namespace="ns1",
            include_metadata=True,
            include_values=True,
        )

        assert [m.id for m in matches] == ["a", "c"]
        assert matches[0].score == pytest.approx(1.0, abs=1e-4)
        assert matches[0].values == pytest.approx([1.0, 0.0, 0.0])
        assert chroma_store.query([1.0, 0.0, 0.0], top_k=10) == []

    def test_delete_all_namespace(self, chroma_store):
        chroma_store.upsert([VectorRecord("a", [1.0, 0.0, 0.0])], namespace="ns1")
        chroma_store.delete_all(namespace="ns1")
        assert chroma_store.fetch(["a"], namespace="ns1") == {}

    def test_delete_all_missing(self, chroma_store):
        with pytest.raises(IndexNotFoundError):
            chroma_store.delete_all(index_name="nope")
