"""
TMDb integration clients.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cine_backend.integrations.tmdb.client import TmdbClient, TmdbClientError, resolve_api_key
    from cine_backend.integrations.tmdb.endpoints import ENDPOINTS, UnknownEndpointError, forward

__all__ = [
    "ENDPOINTS",
    "TmdbClient",
    "TmdbClientError",
    "UnknownEndpointError",
    "forward",
    "resolve_api_key",
]

_ENDPOINT_NAMES = {"ENDPOINTS", "UnknownEndpointError", "forward"}


def __getattr__(name: str):
    if name in _ENDPOINT_NAMES:
        from cine_backend.integrations.tmdb import endpoints

        return getattr(endpoints, name)
    if name in __all__:
        from cine_backend.integrations.tmdb import client

        return getattr(client, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
