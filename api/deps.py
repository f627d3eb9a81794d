"""
Dependency injection for the TMDb client and runtime settings.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, Iterator

from fastapi import Depends

from cine_backend.integrations.tmdb.client import (
    DEFAULT_LANGUAGE,
    DEFAULT_TIMEOUT_SECONDS,
    TmdbClient,
    require_api_key,
)
from cine_backend.utils.env import env_float, env_int, env_str, load_env

load_env()

logger = logging.getLogger(__name__)


@lru_cache
def get_tmdb_api_key() -> str:
    return require_api_key()


@lru_cache
def get_tmdb_language() -> str:
    return env_str("TMDB_LANGUAGE", DEFAULT_LANGUAGE)


@lru_cache
def get_tmdb_timeout_seconds() -> float:
    return env_float("TMDB_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)


@lru_cache
def get_tmdb_max_attempts() -> int:
    return max(1, env_int("TMDB_MAX_ATTEMPTS", 1))


def clear_settings_cache() -> None:
    """Forget cached settings so the next call re-reads the environment."""
    for getter in (get_tmdb_api_key, get_tmdb_language, get_tmdb_timeout_seconds, get_tmdb_max_attempts):
        getter.cache_clear()


def get_tmdb_client() -> Iterator[TmdbClient]:
    """
    Yields a TMDb client for one request; its HTTP session is closed afterwards.
    """
    client = TmdbClient(
        api_key=get_tmdb_api_key(),
        language=get_tmdb_language(),
        timeout_seconds=get_tmdb_timeout_seconds(),
        max_attempts=get_tmdb_max_attempts(),
    )
    logger.debug(f"Opened TMDb client (language={get_tmdb_language()})")
    try:
        yield client
    finally:
        client.close()


# Type alias for dependency injection
TmdbApi = Annotated[TmdbClient, Depends(get_tmdb_client)]
