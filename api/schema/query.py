"""
GraphQL query resolvers.

Every field forwards to one TMDb endpoint through `forward()`; the blocking
HTTP call runs in a worker thread so the event loop stays free.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Annotated, Any, Mapping

import strawberry
from strawberry.types import Info

from api.schema.types import (
    Genre,
    Movie,
    MovieCredits,
    MovieDetails,
    MovieImage,
    MovieImages,
    MovieVideo,
)
from cine_backend.integrations.tmdb.endpoints import forward
from cine_backend.media.logos import filter_logos_with_fallback, select_best_logo
from cine_backend.models.images import parse_images

logger = logging.getLogger(__name__)


async def _forward(info: Info, name: str, **arguments: Any) -> Any:
    client = info.context["tmdb"]
    return await asyncio.to_thread(forward, client, name, **arguments)


def _images_view(payload: Mapping[str, Any]) -> dict[str, Any]:
    logos = parse_images(payload.get("logos"))
    return {
        "id": payload.get("id"),
        "backdrops": parse_images(payload.get("backdrops")),
        "posters": parse_images(payload.get("posters")),
        "logos": logos,
        "best_logo": select_best_logo(logos),
        "localized_logos": filter_logos_with_fallback(logos),
    }


@strawberry.type
class Query:
    @strawberry.field(name="popularMovies")
    async def popular_movies(self, info: Info, page: int | None = None) -> list[Movie]:
        return await _forward(info, "popularMovies", page=page)

    @strawberry.field(name="nowPlayingMovies")
    async def now_playing_movies(self, info: Info, page: int | None = None) -> list[Movie]:
        return await _forward(info, "nowPlayingMovies", page=page)

    @strawberry.field(name="topRatedMovies")
    async def top_rated_movies(self, info: Info, page: int | None = None) -> list[Movie]:
        return await _forward(info, "topRatedMovies", page=page)

    @strawberry.field(name="upcomingMovies")
    async def upcoming_movies(self, info: Info, page: int | None = None) -> list[Movie]:
        return await _forward(info, "upcomingMovies", page=page)

    @strawberry.field(name="searchMovies")
    async def search_movies(self, info: Info, query: str, page: int | None = None) -> list[Movie]:
        return await _forward(info, "searchMovies", query=query, page=page)

    @strawberry.field(name="movieGenres")
    async def movie_genres(self, info: Info) -> list[Genre]:
        return await _forward(info, "movieGenres")

    @strawberry.field(name="movieById")
    async def movie_by_id(self, info: Info, id: strawberry.ID) -> MovieDetails | None:
        """
        Movie details (with credits and videos) plus the preferred logo.

        Details and images are fetched concurrently; if either call fails the field fails.
        """
        details, images = await asyncio.gather(
            _forward(info, "movieById", id=id),
            _forward(info, "movieImages", id=id),
        )
        logos = parse_images(images.get("logos"))
        logger.debug(f"movieById {id}: {len(logos)} logo candidates")
        return {
            **details,
            "logo": select_best_logo(logos),
            "localized_logos": filter_logos_with_fallback(logos),
        }

    @strawberry.field(name="getMovieVideos")
    async def get_movie_videos(
        self,
        info: Info,
        movie_id: Annotated[strawberry.ID, strawberry.argument(name="movieId")],
    ) -> list[MovieVideo]:
        return await _forward(info, "getMovieVideos", movieId=movie_id)

    @strawberry.field(name="movieCredits")
    async def movie_credits(self, info: Info, id: strawberry.ID) -> MovieCredits | None:
        return await _forward(info, "movieCredits", id=id)

    @strawberry.field(name="movieImages")
    async def movie_images(self, info: Info, id: strawberry.ID) -> MovieImages:
        payload = await _forward(info, "movieImages", id=id)
        return _images_view(payload)

    @strawberry.field(name="movieLogo")
    async def movie_logo(self, info: Info, id: strawberry.ID) -> MovieImage | None:
        payload = await _forward(info, "movieImages", id=id)
        return select_best_logo(parse_images(payload.get("logos")))

    @strawberry.field(name="movieLogos")
    async def movie_logos(self, info: Info, id: strawberry.ID) -> list[MovieImage]:
        payload = await _forward(info, "movieImages", id=id)
        return filter_logos_with_fallback(parse_images(payload.get("logos")))
