"""Application configuration using dotenv."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from src.errors import ConfigError

# Load environment variables from .env
load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError as e:
        raise ConfigError(f"Setting {name} must be an integer, got {value!r}") from e


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    # Credentials
    openai_api_key: str | None = None
    pinecone_api_key: str | None = None

    # Embeddings
    embedding_provider: str = "openai"
    embedding_model: str | None = None
    embedding_dimension: int = 1536

    # Vector store
    vector_store_provider: str = "pinecone"
    responses_index: str = "responses"
    pinecone_cloud: str = "aws"
    pinecone_region: str = "us-east-1"
    chroma_persist_dir: str = "data/chroma"
    connections_namespace: str = "ns1"

    # Application
    log_level: str | None = "INFO"
    environment: str | None = "development"

    def __init__(self):
        self.openai_api_key = os.getenv("OPENAI_API_KEY")
        self.pinecone_api_key = os.getenv("PINECONE_API_KEY")

        self.embedding_provider = os.getenv("EMBEDDING_PROVIDER", "openai").lower()
        self.embedding_model = os.getenv("EMBEDDING_MODEL")
        self.embedding_dimension = _env_int("EMBEDDING_DIMENSION", 1536)

        self.vector_store_provider = os.getenv("VECTOR_STORE_PROVIDER", "pinecone").lower()
        self.responses_index = os.getenv("RESPONSES_INDEX", "responses")
        self.pinecone_cloud = os.getenv("PINECONE_CLOUD", "aws")
        self.pinecone_region = os.getenv("PINECONE_REGION", "us-east-1")
        self.chroma_persist_dir = os.getenv("CHROMA_PERSIST_DIR", "data/chroma")
        self.connections_namespace = os.getenv("CONNECTIONS_NAMESPACE", "ns1")

        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.environment = os.getenv("ENVIRONMENT", "development")

        if self.embedding_dimension <= 0:
            raise ConfigError(
                f"EMBEDDING_DIMENSION must be positive, got {self.embedding_dimension}"
            )


_cached_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance."""
    global _cached_settings
    if _cached_settings is None:
        _cached_settings = Settings()
    return _cached_settings


def reset_settings() -> None:
    """Clear cached settings. Useful for testing or CLI overrides."""
    global _cached_settings
    _cached_settings = None


def configure_logging(settings: Settings | None = None) -> None:
    """Apply LOG_LEVEL to the root logger."""
    settings = settings or get_settings()
    level = getattr(logging, (settings.log_level or "INFO").upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Print application settings.")
    parser.add_argument("--vector-store", "-s", default=None)
    args = parser.parse_args()
    settings = get_settings()
    if args.vector_store:
        settings.vector_store_provider = args.vector_store
    print("Loaded settings:")
    print(f"  EMBEDDING_PROVIDER: {settings.embedding_provider}")
    print(f"  EMBEDDING_MODEL: {settings.embedding_model}")
    print(f"  EMBEDDING_DIMENSION: {settings.embedding_dimension}")
    print(f"  VECTOR_STORE_PROVIDER: {settings.vector_store_provider}")
    print(f"  RESPONSES_INDEX: {settings.responses_index}")
    print(f"  CONNECTIONS_NAMESPACE: {settings.connections_namespace}")
