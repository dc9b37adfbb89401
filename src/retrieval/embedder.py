"""Dimension-checked embedding client used by the response services."""

import logging

from src.errors import EmbeddingError

from .providers.base import EmbeddingProvider

logger = logging.getLogger(__name__)


class Embedder:
    """Wrapper around an EmbeddingProvider that enforces the index dimension."""

    def __init__(self, provider: EmbeddingProvider, dimension: int = 1536):
        self._provider = provider
        self.dimension = dimension

    @property
    def model(self) -> str:
        return getattr(self._provider, "model", "unknown")

    def embed(self, text: str) -> list[float]:
        """Embed a single text string.

        Args:
            text: String to embed.

        Returns:
            Embedding vector of exactly `dimension` floats.

        Raises:
            EmbeddingError: If the provider call fails or the vector has the
                wrong length.
        """
        try:
            vector = self._provider.embed(text)
        except Exception as e:
            raise EmbeddingError(f"Embedding provider call failed: {e}") from e

        if len(vector) != self.dimension:
            raise EmbeddingError(
                f"Embedding dimension mismatch. Expected {self.dimension}, got {len(vector)}.",
                expected=self.dimension,
                actual=len(vector),
            )
        return [float(v) for v in vector]
