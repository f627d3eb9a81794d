"""
GraphQL object types.

Field names follow TMDb's JSON keys so upstream objects resolve directly
(see `resolve_field` in `api/schema/schema.py`). Keys TMDb returns that are not
declared here are simply not exposed.
"""
from __future__ import annotations

import strawberry


@strawberry.type
class Genre:
    id: int | None
    name: str | None


@strawberry.type
class Movie:
    id: strawberry.ID
    title: str | None
    original_title: str | None
    original_language: str | None
    overview: str | None
    release_date: str | None
    poster_path: str | None
    backdrop_path: str | None
    genre_ids: list[int] | None
    vote_average: float | None
    vote_count: int | None
    popularity: float | None
    adult: bool | None
    video: bool | None


@strawberry.type
class CastMember:
    id: strawberry.ID | None
    name: str | None
    character: str | None
    profile_path: str | None
    order: int | None


@strawberry.type
class CrewMember:
    id: strawberry.ID | None
    name: str | None
    job: str | None
    department: str | None
    profile_path: str | None


@strawberry.type
class MovieCredits:
    id: strawberry.ID | None
    cast: list[CastMember] | None
    crew: list[CrewMember] | None


@strawberry.type
class MovieVideo:
    key: str | None
    name: str | None
    site: str | None
    type: str | None
    official: bool | None
    iso_639_1: str | None


@strawberry.type
class MovieVideos:
    results: list[MovieVideo] | None


@strawberry.type
class ProductionCompany:
    id: int | None
    name: str | None
    logo_path: str | None
    origin_country: str | None


@strawberry.type
class ProductionCountry:
    iso_3166_1: str | None
    name: str | None


@strawberry.type
class SpokenLanguage:
    iso_639_1: str | None
    name: str | None


@strawberry.type
class MovieImage:
    file_path: str | None
    iso_639_1: str | None
    vote_average: float | None
    vote_count: int | None
    width: int | None
    height: int | None
    aspect_ratio: float | None
    url: str | None


@strawberry.type
class MovieImages:
    id: strawberry.ID | None
    backdrops: list[MovieImage]
    posters: list[MovieImage]
    logos: list[MovieImage]
    best_logo: MovieImage | None
    localized_logos: list[MovieImage]


@strawberry.type
class MovieDetails:
    id: strawberry.ID
    imdb_id: str | None
    title: str | None
    original_title: str | None
    original_language: str | None
    overview: str | None
    release_date: str | None
    runtime: int | None
    # Float: revenues above 2^31 overflow GraphQL Int.
    budget: float | None
    revenue: float | None
    status: str | None
    tagline: str | None
    poster_path: str | None
    backdrop_path: str | None
    genres: list[Genre] | None
    vote_average: float | None
    vote_count: int | None
    popularity: float | None
    homepage: str | None
    production_companies: list[ProductionCompany] | None
    production_countries: list[ProductionCountry] | None
    spoken_languages: list[SpokenLanguage] | None
    credits: MovieCredits | None
    videos: MovieVideos | None
    logo: MovieImage | None
    localized_logos: list[MovieImage] | None
