"""Similarity search over stored responses."""

import json
import logging

from src.errors import EmbeddingError, InvalidArgumentError, NotFoundError, StoreError
from src.retrieval.embedder import Embedder
from src.retrieval.similarity import cosine_similarity
from src.retrieval.stores.base import QueryFilter, QueryMatch, VectorStore

logger = logging.getLogger(__name__)


class ResponseSearch:
    """Query-by-text and direct similarity between stored responses."""

    def __init__(self, store: VectorStore, embedder: Embedder):
        self._store = store
        self._embedder = embedder

    def find_similar(
        self,
        query_text: str,
        limit: int = 5,
        filter: QueryFilter | None = None,
        namespace: str | None = None,
    ) -> list[QueryMatch]:
        """Return the stored responses closest to `query_text`.

        Empty query text returns an empty list without calling any service.
        Matches carry metadata but not vectors.
        """
        logger.info(f"[find_similar] Searching for query: {query_text[:60]!r}..., top_k: {limit}")
        if filter:
            logger.info(f"[find_similar]   Applying filter: {json.dumps(filter)}")

        if not query_text or not query_text.strip():
            logger.warning("[find_similar] Empty query text. Returning empty list.")
            return []

        try:
            query_embedding = self._embedder.embed(query_text)
        except EmbeddingError as e:
            logger.error(f"[find_similar] Failed to create embedding for query: {e}")
            raise

        try:
            return self._store.query(
                vector=query_embedding,
                top_k=limit,
                filter=filter,
                namespace=namespace,
                include_metadata=True,
                include_values=False,
            )
        except StoreError as e:
            logger.error(f"[find_similar] Failed to query vector store: {e}")
            raise

    def get_similarity(self, id1: str, id2: str, namespace: str | None = None) -> float:
        """Cosine similarity between two stored records.

        Raises:
            NotFoundError: If either id has no stored vector.
            StoreError: If the fetch fails.
        """
        logger.info(f"[get_similarity] Calculating similarity between: {id1!r} and {id2!r}")
        try:
            records = self._store.fetch([id1, id2], namespace=namespace)

            record1 = records.get(id1)
            record2 = records.get(id2)
            if record1 is None or not record1.values or record2 is None or not record2.values:
                missing = id1 if record1 is None or not record1.values else id2
                raise NotFoundError(f"Failed to retrieve vector for point: {missing}")

            return cosine_similarity(record1.values, record2.values)
        except (StoreError, NotFoundError, InvalidArgumentError) as e:
            logger.error(f"[get_similarity] Error for {id1!r} vs {id2!r}: {e}")
            raise
