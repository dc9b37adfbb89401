"""Embedding provider router, YAML-driven."""

import logging
import os
from typing import Any, Optional

from ..registry import build_ssl_client, load_registry, resolve_class
from .base import EmbeddingProvider

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_embedding_provider(
    provider_name: str | None = None,
    model: str | None = None,
) -> Optional[EmbeddingProvider]:
    """Return an embedding provider instance based on env vars.

    Provider selection: provider_name argument, else EMBEDDING_PROVIDER env
    var (default: 'openai').

    Returns:
        EmbeddingProvider instance or None if unavailable.
    """
    registry = load_registry("embedding_providers")

    provider_name = (provider_name or os.getenv("EMBEDDING_PROVIDER", "openai")).lower()
    provider = _build_provider(provider_name, registry, model)
    if provider is not None:
        logger.info(f"Embedding provider={provider_name!r} model={provider.model!r}")
        return provider

    logger.warning("No embedding provider available (missing API key or bad config)")
    return None


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _build_provider(
    provider_name: str,
    registry: dict,
    model: str | None = None,
) -> Optional[EmbeddingProvider]:
    """Build an embedding provider instance from registry config."""
    entry = registry.get(provider_name)
    if entry is None:
        logger.warning(f"Embedding provider {provider_name!r} not in config/providers.yaml")
        return None

    # API key
    api_key = os.getenv(entry["api_key_env"], "")
    if not api_key:
        logger.warning(f"Missing API key env: {entry['api_key_env']}")
        return None

    # Model: argument → env override → YAML default
    model = model or os.getenv("EMBEDDING_MODEL") or entry.get("default_model")
    if not model:
        logger.warning(f"No model resolved for embedding provider={provider_name!r}")
        return None

    ssl_obj = build_ssl_client(entry.get("ssl_client_type"))
    cls = resolve_class(entry)

    kwargs: dict[str, Any] = {"api_key": api_key, "model": model}
    ssl_kwarg = entry.get("constructor_ssl_kwarg")
    if ssl_kwarg and ssl_obj is not None:
        kwargs[ssl_kwarg] = ssl_obj

    return cls(**kwargs)
