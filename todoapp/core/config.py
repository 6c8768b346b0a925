# todoapp/core/config.py

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

from dotenv import load_dotenv

from todoapp.core.exceptions import ConfigurationError

DEFAULT_PORT        = 5000
DEFAULT_HOST        = "0.0.0.0"
DEFAULT_CORS_ORIGIN = "http://localhost:3000"
DEFAULT_API_URL     = "http://localhost:5000"


@dataclass(frozen=True)
class Settings:
    database_url: str
    host:         str = DEFAULT_HOST
    port:         int = DEFAULT_PORT
    cors_origins: Tuple[str, ...] = field(default=(DEFAULT_CORS_ORIGIN,))
    log_level:    str = "INFO"
    log_file:     Optional[str] = None


def _parse_origins(raw: Optional[str]) -> Tuple[str, ...]:
    if raw is None:
        return (DEFAULT_CORS_ORIGIN,)
    return tuple(o.strip() for o in raw.split(",") if o.strip())


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except ValueError:
        raise ConfigurationError(f"PORT must be an integer, got {raw!r}")
    if not 0 < port < 65536:
        raise ConfigurationError(f"PORT out of range: {port}")
    return port


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    When `environ` is omitted, a local .env file is loaded into os.environ
    first. DATABASE_URL is required (DB is accepted as a fallback name);
    its absence raises ConfigurationError so the process fails fast.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    database_url = environ.get("DATABASE_URL") or environ.get("DB")
    if not database_url:
        raise ConfigurationError(
            "Environment variable DATABASE_URL is not set. "
            "Please add a .env file with:\n"
            "    DATABASE_URL=sqlite:///./todos.db"
        )

    return Settings(
        database_url = database_url,
        host         = environ.get("HOST", DEFAULT_HOST),
        port         = _parse_port(environ.get("PORT")),
        cors_origins = _parse_origins(environ.get("CORS_ORIGINS")),
        log_level    = environ.get("LOG_LEVEL", "INFO").upper(),
        log_file     = environ.get("LOG_FILE") or None,
    )
