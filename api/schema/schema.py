from __future__ import annotations

from typing import Any, Mapping

import strawberry
from strawberry.schema.config import StrawberryConfig

from api.schema.query import Query


def resolve_field(source: Any, name: str) -> Any:
    """
    Default field resolver: read dict keys for raw TMDb objects, attributes otherwise.

    Missing keys resolve to None so absent upstream fields become GraphQL nulls.
    """
    if isinstance(source, Mapping):
        return source.get(name)
    return getattr(source, name, None)


schema = strawberry.Schema(
    query=Query,
    config=StrawberryConfig(auto_camel_case=False, default_resolver=resolve_field),
)
