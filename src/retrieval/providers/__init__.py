"""Text embedding providers (OpenAI by default, chosen via config/providers.yaml)."""

from .base import EmbeddingProvider
from .router import get_embedding_provider

__all__ = ["EmbeddingProvider", "get_embedding_provider"]
