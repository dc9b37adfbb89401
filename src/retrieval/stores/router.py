"""Vector store router, YAML-driven like the embedding provider router."""

import logging
import os
from typing import Any

from config.settings import Settings, get_settings
from src.errors import ConfigError

from ..registry import load_registry, resolve_class
from .base import VectorStore

logger = logging.getLogger(__name__)


def get_vector_store(settings: Settings | None = None) -> VectorStore:
    """Build the vector store selected by VECTOR_STORE_PROVIDER.

    Raises:
        ConfigError: If the provider is unknown or its API key is missing.
    """
    settings = settings or get_settings()
    registry = load_registry("vector_store_providers")

    provider_name = settings.vector_store_provider
    entry = registry.get(provider_name)
    if entry is None:
        raise ConfigError(f"Vector store provider {provider_name!r} not in config/providers.yaml")

    kwargs: dict[str, Any] = {"index_name": settings.responses_index}
    api_key_env = entry.get("api_key_env")
    if api_key_env:
        kwargs["api_key"] = os.getenv(api_key_env) or getattr(settings, api_key_env.lower(), None)
    if provider_name == "chroma":
        kwargs["persist_dir"] = settings.chroma_persist_dir

    cls = resolve_class(entry)
    store = cls(**kwargs)
    logger.info(f"Vector store provider={provider_name!r} index={settings.responses_index!r}")
    return store
