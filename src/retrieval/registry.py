"""Provider registry loaded from config/providers.yaml."""

import importlib
import os
from pathlib import Path
from typing import Any

import yaml

from src.errors import ConfigError


# ---------------------------------------------------------------------------
# Registry (loaded once from config/providers.yaml)
# ---------------------------------------------------------------------------

_registry: dict | None = None

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "providers.yaml"


def load_registry(section: str) -> dict:
    """Return one section of config/providers.yaml (e.g. 'embedding_providers')."""
    global _registry
    if _registry is None:
        with open(CONFIG_PATH) as f:
            _registry = yaml.safe_load(f) or {}
    return _registry.get(section, {})


def reset_registry() -> None:
    """Forget the cached registry so the YAML is re-read on next use."""
    global _registry
    _registry = None


def resolve_class(entry: dict) -> type:
    """Import the class named by a registry entry."""
    try:
        module = importlib.import_module(entry["module"])
        return getattr(module, entry["class"])
    except (KeyError, ImportError, AttributeError) as e:
        raise ConfigError(f"Bad provider entry {entry!r}: {e}") from e


# ---------------------------------------------------------------------------
# SSL / HTTP client builder
# ---------------------------------------------------------------------------

def build_ssl_client(ssl_client_type: str | None) -> Any:
    """Build an SSL-aware HTTP client based on provider's declared type."""
    if not ssl_client_type:
        return None

    cafile = os.getenv("SSL_CERT_FILE")

    if ssl_client_type == "httpx_openai":
        from openai import DefaultHttpxClient
        if cafile and os.path.isfile(cafile):
            return DefaultHttpxClient(verify=cafile)
        return DefaultHttpxClient()

    return None
