"""
Shared cine-backend library code.

This package holds the TMDb integration and the image/logo helpers used by
the GraphQL API in `api/`.

App entrypoints (FastAPI app, GraphQL schema) should live outside this package and
import from `cine_backend` rather than the other way around.
"""
