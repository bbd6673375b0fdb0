from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Env vars:
    - HOST: interface to bind. Default '0.0.0.0'
    - PORT: TCP port to listen on. Default 8080
    - LOG_LEVEL: standard logging level name. Default 'INFO'
    - CORS_ALLOW_ORIGINS: comma-separated list of allowed origins; '*' by default
    """

    host: str
    port: int
    log_level: str
    cors_allow_origins: List[str]


DEFAULT_PORT = 8080


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name, default)
    if value is None or value == "":
        return default
    return value


def _parse_port(value: str, default: int = DEFAULT_PORT) -> int:
    try:
        port = int(value.strip())
    except ValueError:
        return default
    if not (0 < port < 65536):
        return default
    return port


_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _parse_log_level(value: str) -> str:
    level = value.strip().upper()
    return level if level in _LOG_LEVELS else "INFO"


def _parse_origins(origins_value: str) -> List[str]:
    """
    Parse CORS origins from env. Supports:
    - '*' to allow all origins
    - Comma-separated list of origins
    """
    value = origins_value.strip()
    if value == "*":
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


# PUBLIC_INTERFACE
def get_settings() -> Settings:
    """Return application settings loaded from environment variables."""
    return Settings(
        host=_get_env("HOST", "0.0.0.0").strip(),
        port=_parse_port(_get_env("PORT", str(DEFAULT_PORT))),
        log_level=_parse_log_level(_get_env("LOG_LEVEL", "INFO")),
        cors_allow_origins=_parse_origins(_get_env("CORS_ALLOW_ORIGINS", "*")),
    )
