from __future__ import annotations

import os
from pathlib import Path

DEFAULT_REGION_TREE_PATH = Path(__file__).parent / "data" / "regions.json"

MEMORY_BACKEND = "memory"
POSTGRES_BACKEND = "postgres"
STORE_BACKENDS = (MEMORY_BACKEND, POSTGRES_BACKEND)


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def store_backend() -> str:
    backend = os.getenv("OFFER_STORE_BACKEND", MEMORY_BACKEND).strip().lower()

    if backend not in STORE_BACKENDS:
        raise RuntimeError(
            f"OFFER_STORE_BACKEND must be one of {list(STORE_BACKENDS)}, got {backend!r}"
        )

    return backend


def region_tree_path() -> Path:
    path = os.getenv("REGION_TREE_PATH")
    return Path(path) if path else DEFAULT_REGION_TREE_PATH


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()


def http_host() -> str:
    return os.getenv("HTTP_HOST", "0.0.0.0")


def http_port() -> int:
    port = os.getenv("HTTP_PORT", "80")

    try:
        return int(port)
    except ValueError:
        raise RuntimeError(f"HTTP_PORT must be an integer, got {port!r}") from None
