"""Pairwise connections between the responses to one form."""

import logging
import math
from itertools import combinations

from src.errors import StoreError
from src.retrieval.similarity import cosine_similarity
from src.retrieval.stores.base import QueryMatch, VectorStore

from .models import Connection

logger = logging.getLogger(__name__)

# Maximum number of responses compared per form (at most 4,950 pairs).
CONNECTIONS_TOP_K = 100


def _probe_vector(dimension: int) -> list[float]:
    """Uniform unit vector; cosine indexes reject all-zero queries."""
    return [1.0 / math.sqrt(dimension)] * dimension


def _is_complete(point: QueryMatch) -> bool:
    return bool(
        point.metadata
        and point.values
        and point.metadata.get("response_id")
        and point.metadata.get("respondent_name")
    )


class ConnectionGenerator:
    """Ranks every pair of responses to a form by cosine similarity."""

    def __init__(self, store: VectorStore, dimension: int = 1536, namespace: str = "ns1"):
        self._store = store
        self._dimension = dimension
        self._namespace = namespace

    def generate_connections(self, form_id: str) -> list[Connection]:
        """Return all response pairs for `form_id`, highest similarity first.

        Pairs where either response lacks metadata or a vector are skipped.

        Raises:
            StoreError: If the query fails. No partial result is returned.
        """
        logger.info(
            f"[generate_connections] Generating for form_id: {form_id!r} in namespace {self._namespace!r}"
        )
        try:
            points = self._store.query(
                vector=_probe_vector(self._dimension),
                top_k=CONNECTIONS_TOP_K,
                filter={"form_id": {"$eq": form_id}},
                namespace=self._namespace,
                include_metadata=True,
                include_values=True,
            )
        except StoreError as e:
            logger.error(f"[generate_connections] Error for form_id {form_id!r}: {e}")
            raise
        logger.info(f"[generate_connections] Found {len(points)} points.")

        connections: list[Connection] = []
        for p1, p2 in combinations(points, 2):
            if not _is_complete(p1) or not _is_complete(p2):
                logger.warning(f"[generate_connections] Skipping pair due to missing data: {p1.id}, {p2.id}")
                continue
            connections.append(Connection(
                response1_id=p1.metadata["response_id"],
                response2_id=p2.metadata["response_id"],
                response1_name=p1.metadata["respondent_name"],
                response2_name=p2.metadata["respondent_name"],
                similarity_score=cosine_similarity(p1.values, p2.values),
            ))

        logger.info(f"[generate_connections] Generated {len(connections)} connections.")
        return sorted(connections, key=lambda c: c.similarity_score, reverse=True)
