"""OpenAI embedding provider."""

from openai import OpenAI

from .base import EmbeddingProvider


class OpenAIEmbeddingProvider(EmbeddingProvider):
    """Calls the embeddings endpoint once per response text."""

    def __init__(self, api_key: str, model: str = "text-embedding-3-small", http_client=None):
        # http_client carries the SSL_CERT_FILE bundle when one is configured
        kwargs = {"api_key": api_key}
        if http_client is not None:
            kwargs["http_client"] = http_client
        self._client = OpenAI(**kwargs)
        self.model = model

    def embed(self, text: str) -> list[float]:
        response = self._client.embeddings.create(input=text, model=self.model)
        return response.data[0].embedding
