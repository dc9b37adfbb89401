"""Embedding storage and index management for responses."""

import logging
from typing import Union

from src.errors import EmbeddingError, IndexNotFoundError, StoreError
from src.retrieval.embedder import Embedder
from src.retrieval.stores.base import VectorRecord, VectorStore

from .models import FORM_RESPONSE_TYPE, FormResponseMetadata, ResponseMetadata

logger = logging.getLogger(__name__)


class ResponseIndexer:
    """Embeds response text and upserts it into the vector store."""

    def __init__(
        self,
        store: VectorStore,
        embedder: Embedder,
        connections_namespace: str = "ns1",
        cloud: str = "aws",
        region: str = "us-east-1",
    ):
        self._store = store
        self._embedder = embedder
        self._connections_namespace = connections_namespace
        self._cloud = cloud
        self._region = region

    # ========================================================================
    # Index management
    # ========================================================================

    def ensure_index(self) -> bool:
        """Create the responses index if it does not exist yet."""
        logger.info(f"[initialize_index] Checking for index {self._store.index_name!r}")
        try:
            return self._store.ensure_index(
                dimension=self._embedder.dimension,
                metric="cosine",
                cloud=self._cloud,
                region=self._region,
            )
        except StoreError as e:
            logger.error(f"[initialize_index] Error initializing index {self._store.index_name!r}: {e}")
            raise

    def clear_index(self, index_name: str | None = None, namespace: str | None = None) -> None:
        """Delete all records. A missing index is only a warning."""
        index_name = index_name or self._store.index_name
        logger.info(f"[clear_index] Clearing index {index_name!r} namespace={namespace!r}")
        try:
            self._store.delete_all(index_name=index_name, namespace=namespace)
        except IndexNotFoundError:
            logger.warning(f"[clear_index] Index {index_name!r} not found.")
            return
        except StoreError as e:
            logger.error(f"[clear_index] Error clearing index {index_name!r}: {e}")
            raise
        logger.info(f"[clear_index] Successfully cleared index {index_name!r}.")

    # ========================================================================
    # Storage
    # ========================================================================

    def store_embedding(
        self,
        text: str,
        metadata: Union[ResponseMetadata, dict],
        namespace: str | None = None,
    ) -> str | None:
        """Embed `text` and upsert it under an id derived from type and name.

        Args:
            text: Response text. Empty or whitespace-only text is skipped.
            metadata: ResponseMetadata, or a flat mapping with 'type' and 'name'.
            namespace: Optional store namespace.

        Returns:
            The record id, or None when the text was empty.

        Raises:
            InvalidArgumentError: If type/name are missing or extras are invalid.
            EmbeddingError: If embedding fails or has the wrong dimension.
            StoreError: If the upsert fails.
        """
        if isinstance(metadata, dict):
            metadata = ResponseMetadata.from_mapping(metadata)

        logger.info(f"[store_embedding] Storing embedding for {metadata.type}: {metadata.name!r}")
        if not text or not text.strip():
            logger.warning(f"[store_embedding] Empty text for {metadata.name!r}, skipping.")
            return None

        record_id = metadata.record_id

        try:
            embedding = self._embedder.embed(text)
        except EmbeddingError as e:
            logger.error(f"[store_embedding] Failed to create embedding for {metadata.name!r}: {e}")
            raise

        record = VectorRecord(
            id=record_id,
            values=embedding,
            metadata=metadata.to_store_metadata(text),
        )

        try:
            self._store.upsert([record], namespace=namespace)
        except StoreError as e:
            logger.error(
                f"[store_embedding] Failed to upsert data for {metadata.name!r} (ID: {record_id!r}): {e}"
            )
            raise
        logger.info(f"[store_embedding] Upserted ID {record_id!r} for {metadata.name!r}.")
        return record_id

    def index_form_response(
        self,
        form_id: str,
        response_id: str,
        respondent_name: str,
        text: str,
        **extra,
    ) -> str | None:
        """Store one form response where generate_connections will find it."""
        metadata = FormResponseMetadata(
            type=FORM_RESPONSE_TYPE,
            name=response_id,
            extra=extra,
            form_id=form_id,
            response_id=response_id,
            respondent_name=respondent_name,
        )
        return self.store_embedding(text, metadata, namespace=self._connections_namespace)
