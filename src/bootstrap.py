"""Composition root: builds the store client and embedder once and wires the services."""

import logging
from dataclasses import dataclass
from typing import Optional

from config.settings import Settings, get_settings
from src.errors import ConfigError
from src.responses import ConnectionGenerator, ResponseIndexer, ResponseSearch
from src.retrieval.embedder import Embedder
from src.retrieval.providers.base import EmbeddingProvider
from src.retrieval.providers.router import get_embedding_provider
from src.retrieval.stores.base import VectorStore
from src.retrieval.stores.router import get_vector_store

logger = logging.getLogger(__name__)


@dataclass
class ResponseServices:
    """Everything that talks to the embedding API and the vector store."""

    store: VectorStore
    embedder: Embedder
    indexer: ResponseIndexer
    search: ResponseSearch
    connections: ConnectionGenerator


def build_response_services(
    settings: Optional[Settings] = None,
    store: Optional[VectorStore] = None,
    provider: Optional[EmbeddingProvider] = None,
) -> ResponseServices:
    """Wire the response services.

    `store` and `provider` override the configured backends (used by tests).

    Raises:
        ConfigError: If no embedding provider or vector store can be built.
    """
    settings = settings or get_settings()

    if provider is None:
        provider = get_embedding_provider(settings.embedding_provider, settings.embedding_model)
        if provider is None:
            raise ConfigError(
                f"No embedding provider available for {settings.embedding_provider!r} "
                "(check the API key environment variable)"
            )
    if store is None:
        store = get_vector_store(settings)

    embedder = Embedder(provider, dimension=settings.embedding_dimension)
    logger.info(
        f"Response services ready: store={store.provider} index={store.index_name} "
        f"model={embedder.model} dimension={embedder.dimension}"
    )
    return ResponseServices(
        store=store,
        embedder=embedder,
        indexer=ResponseIndexer(
            store,
            embedder,
            connections_namespace=settings.connections_namespace,
            cloud=settings.pinecone_cloud,
            region=settings.pinecone_region,
        ),
        search=ResponseSearch(store, embedder),
        connections=ConnectionGenerator(
            store,
            dimension=settings.embedding_dimension,
            namespace=settings.connections_namespace,
        ),
    )
