from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/original"


def build_tmdb_image_url(file_path: str) -> str:
    """Build full TMDb image URL from file_path."""
    return f"{TMDB_IMAGE_BASE_URL}{file_path}"


def _coerce_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        raw = value.strip()
        if raw.isdigit():
            return int(raw)
    return None


def _coerce_float(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        try:
            result = float(raw)
        except ValueError:
            return None
    else:
        return None
    # NaN (JSON `NaN` or "nan") is treated as missing.
    return None if math.isnan(result) else result


def _coerce_language(value: Any) -> str | None:
    # Language codes are kept verbatim: "ES" and "es-MX" are not "es".
    if isinstance(value, str):
        return value
    return None


@dataclass(frozen=True)
class ImageMetadata:
    """
    One entry of a TMDb `/movie/{id}/images` payload (logo, poster or backdrop).

    Built fresh per request; equality is by value.
    """

    file_path: str
    iso_639_1: str | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    width: int | None = None
    height: int | None = None
    aspect_ratio: float | None = None

    @property
    def url(self) -> str | None:
        if not self.file_path:
            return None
        return build_tmdb_image_url(self.file_path)

    @classmethod
    def from_tmdb(cls, payload: Mapping[str, Any]) -> ImageMetadata:
        file_path = payload.get("file_path")
        return cls(
            file_path=file_path if isinstance(file_path, str) else "",
            iso_639_1=_coerce_language(payload.get("iso_639_1")),
            vote_average=_coerce_float(payload.get("vote_average")),
            vote_count=_coerce_int(payload.get("vote_count")),
            width=_coerce_int(payload.get("width")),
            height=_coerce_int(payload.get("height")),
            aspect_ratio=_coerce_float(payload.get("aspect_ratio")),
        )


def parse_images(entries: Iterable[Any] | None) -> list[ImageMetadata]:
    """
    Convert a TMDb image array (`logos`, `posters` or `backdrops`) into ImageMetadata.

    Non-object entries are skipped; input order is preserved.
    """
    if entries is None or isinstance(entries, (str, bytes, Mapping)):
        return []
    return [ImageMetadata.from_tmdb(entry) for entry in entries if isinstance(entry, Mapping)]
