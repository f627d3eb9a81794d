"""
Table of GraphQL fields forwarded 1:1 to TMDb.

Each entry names the upstream path template, which part of the JSON body is
returned, whether the request is localized, and which caller arguments travel
in the query string. `forward()` is the single routine that consumes the table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol
from urllib.parse import quote

DEFAULT_INCLUDE_IMAGE_LANGUAGE = "es,en,null"


class UnknownEndpointError(KeyError):
    pass


class JsonGetter(Protocol):
    def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        localized: bool = True,
    ) -> dict[str, Any]: ...


@dataclass(frozen=True)
class Endpoint:
    path_template: str
    extract: str | None = None
    localized: bool = True
    params: Mapping[str, str] = field(default_factory=dict)
    query_args: tuple[str, ...] = ()

    def build_path(self, arguments: Mapping[str, Any]) -> str:
        path_args = {
            key: quote(str(value), safe="")
            for key, value in arguments.items()
            if key not in self.query_args and value is not None
        }
        try:
            return self.path_template.format(**path_args)
        except KeyError as exc:
            raise ValueError(f"Missing path argument {exc.args[0]!r} for {self.path_template}") from exc

    def build_params(self, arguments: Mapping[str, Any]) -> dict[str, Any]:
        params: dict[str, Any] = dict(self.params)
        for key in self.query_args:
            value = arguments.get(key)
            if value is not None:
                params[key] = value
        return params

    def extract_from(self, payload: Mapping[str, Any]) -> Any:
        if self.extract is None:
            return payload
        value = payload.get(self.extract)
        return value if isinstance(value, list) else []


_MOVIE_LIST_ARGS = ("page",)

ENDPOINTS: dict[str, Endpoint] = {
    "popularMovies": Endpoint("/movie/popular", extract="results", query_args=_MOVIE_LIST_ARGS),
    "nowPlayingMovies": Endpoint("/movie/now_playing", extract="results", query_args=_MOVIE_LIST_ARGS),
    "topRatedMovies": Endpoint("/movie/top_rated", extract="results", query_args=_MOVIE_LIST_ARGS),
    "upcomingMovies": Endpoint("/movie/upcoming", extract="results", query_args=_MOVIE_LIST_ARGS),
    "searchMovies": Endpoint("/search/movie", extract="results", query_args=("query", "page")),
    "movieById": Endpoint("/movie/{id}", params={"append_to_response": "credits,videos"}),
    "movieGenres": Endpoint("/genre/movie/list", extract="genres"),
    "getMovieVideos": Endpoint("/movie/{movieId}/videos", extract="results", localized=False),
    "movieCredits": Endpoint("/movie/{id}/credits"),
    "movieImages": Endpoint(
        "/movie/{id}/images",
        localized=False,
        params={"include_image_language": DEFAULT_INCLUDE_IMAGE_LANGUAGE},
    ),
}


def get_endpoint(name: str) -> Endpoint:
    try:
        return ENDPOINTS[name]
    except KeyError:
        raise UnknownEndpointError(f"No TMDb endpoint registered for field {name!r}") from None


def forward(client: JsonGetter, name: str, **arguments: Any) -> Any:
    """
    Issue the single upstream GET registered for `name` and return the extracted JSON.

    List extractions (`results`, `genres`) fall back to an empty list when the key is missing.
    """
    endpoint = get_endpoint(name)
    payload = client.get_json(
        endpoint.build_path(arguments),
        params=endpoint.build_params(arguments),
        localized=endpoint.localized,
    )
    return endpoint.extract_from(payload)
