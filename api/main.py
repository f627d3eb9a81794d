"""
cine-backend API - FastAPI application.

Provides:
- A GraphQL endpoint (`/graphql`) that forwards queries to the TMDb REST API
  in Spanish (es-ES) and picks localized movie logos
- Health check endpoints
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from api.deps import get_tmdb_api_key, get_tmdb_language
from api.routers import movies
from cine_backend.utils.env import env_int, env_list, env_str, load_env

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ["http://localhost:5173"]
DEFAULT_PORT = 4000
DEFAULT_HOST = "0.0.0.0"


def get_cors_origins() -> list[str]:
    """
    Get CORS allowed origins from environment.
    Set CORS_ALLOW_ORIGINS as comma-separated list of origins.
    Example: CORS_ALLOW_ORIGINS=http://localhost:5173,https://cine.example.com
    Defaults to the local Vite dev server.
    """
    return env_list("CORS_ALLOW_ORIGINS", DEFAULT_CORS_ORIGINS)


def get_port() -> int:
    return env_int("PORT", DEFAULT_PORT)


def get_host() -> str:
    return env_str("HOST", DEFAULT_HOST)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    # Startup: refuse to serve without a TMDb key
    get_tmdb_api_key()
    logger.info(f"Starting up cine-backend API (TMDb language {get_tmdb_language()})...")
    yield
    # Shutdown
    logger.info("Shutting down cine-backend API...")


class HealthStatus(BaseModel):
    status: str
    service: str | None = None


app = FastAPI(
    title="cine-backend",
    description="GraphQL façade over The Movie Database (TMDb) API",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
# Credentials are allowed because origins are always an explicit allow-list
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(movies.router, prefix="/graphql")


@app.get("/", response_model=HealthStatus)
def root():
    """Health check endpoint."""
    return HealthStatus(status="ok", service="cine-backend")


@app.get("/health", response_model=HealthStatus, response_model_exclude_none=True)
def health():
    """Health check endpoint."""
    return HealthStatus(status="healthy")


def run() -> None:
    """Console entrypoint: serve the API with uvicorn on $HOST:$PORT (default 0.0.0.0:4000)."""
    load_env()
    logging.basicConfig(
        level=env_str("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(app, host=get_host(), port=get_port())


if __name__ == "__main__":
    run()
