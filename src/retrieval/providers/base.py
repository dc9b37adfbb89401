"""Embedding provider interface."""

from abc import ABC, abstractmethod


class EmbeddingProvider(ABC):
    """One text in, one vector out. Selected via EMBEDDING_PROVIDER."""

    model: str

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Return the raw embedding for `text`; the caller checks its length."""
        raise NotImplementedError
