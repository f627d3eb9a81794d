"""
GraphQL endpoint backed by the TMDb forwarding schema.
"""
from __future__ import annotations

from typing import Any

from strawberry.fastapi import GraphQLRouter

from api.deps import TmdbApi
from api.schema.schema import schema


async def get_context(tmdb: TmdbApi) -> dict[str, Any]:
    return {"tmdb": tmdb}


router = GraphQLRouter(schema, context_getter=get_context)
