"""Settings loaded from environment variables (+ optional .env)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

ENV_PREFIX = "PRIORITIZER"

TRANSPORTS = ("stdio", "sse", "streamable-http")

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_optional(name: str) -> str | None:
    v = os.getenv(name)
    if v is None or v.strip() == "":
        return None
    return v.strip()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    # Only "true" enables a flag; DEMO_MODE switches off token verification
    return raw.strip().lower() == "true"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Auth ----
    demo_mode: bool = False
    google_client_id: str | None = None

    # ---- Document store ----
    mongodb_connection_string: str | None = None
    database_name: str = "prioritizer"
    collection_name: str = "tasks"
    mongodb_timeout_ms: int = 5000

    # ---- Server / logging ----
    log_level: str = "INFO"
    transport: str = "stdio"
    host: str = "127.0.0.1"
    port: int = 8000

    @staticmethod
    def from_env() -> "Settings":
        # DEMO_MODE, GOOGLE_CLIENT_ID and MONGODB_CONNECTION_STRING keep the
        # unprefixed names the deployed functions were configured with.
        transport = _env(_k("TRANSPORT"), "stdio").strip().lower()
        if transport not in TRANSPORTS:
            transport = "stdio"

        return Settings(
            demo_mode=_env_bool("DEMO_MODE", False),
            google_client_id=_env_optional("GOOGLE_CLIENT_ID"),
            mongodb_connection_string=_env_optional("MONGODB_CONNECTION_STRING"),
            database_name=_env(_k("DB_NAME"), "prioritizer").strip() or "prioritizer",
            collection_name=_env(_k("COLLECTION"), "tasks").strip() or "tasks",
            mongodb_timeout_ms=_env_int(_k("MONGO_TIMEOUT_MS"), 5000),
            log_level=_env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO",
            transport=transport,
            host=_env(_k("HOST"), "127.0.0.1").strip() or "127.0.0.1",
            port=_env_int(_k("PORT"), 8000),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
