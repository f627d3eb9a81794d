"""
Pick localized movie logos out of a TMDb images payload.

The best-logo choice is an ordered chain of stages. Each stage either returns a
candidate or None, and the first stage that returns a candidate wins:

1. first logo in the target language ("es")
2. first logo in the fallback language ("en")
3. highest `vote_average` (missing scores rank lowest, ties keep input order)

Language always outranks score. Language codes are compared verbatim.
"""

from __future__ import annotations

import math
from typing import Callable, Iterable, Sequence

from cine_backend.models.images import ImageMetadata

TARGET_LOCALE = "es"
FALLBACK_LOCALE = "en"

LogoStage = Callable[[Sequence[ImageMetadata]], ImageMetadata | None]


def first_with_language(code: str) -> LogoStage:
    def stage(candidates: Sequence[ImageMetadata]) -> ImageMetadata | None:
        return next((c for c in candidates if c.iso_639_1 == code), None)

    stage.__name__ = f"first_with_language_{code}"
    return stage


def _score(candidate: ImageMetadata) -> float:
    # NaN would make max() depend on position.
    if candidate.vote_average is None or math.isnan(candidate.vote_average):
        return float("-inf")
    return candidate.vote_average


def highest_score(candidates: Sequence[ImageMetadata]) -> ImageMetadata | None:
    if not candidates:
        return None
    # max() keeps the first of equal maxima.
    return max(candidates, key=_score)


def logo_stages(
    *,
    target: str = TARGET_LOCALE,
    fallback: str = FALLBACK_LOCALE,
) -> tuple[LogoStage, ...]:
    return (
        first_with_language(target),
        first_with_language(fallback),
        highest_score,
    )


def select_best_logo(
    candidates: Iterable[ImageMetadata] | None,
    *,
    target: str = TARGET_LOCALE,
    fallback: str = FALLBACK_LOCALE,
) -> ImageMetadata | None:
    """
    Return the single preferred logo, or None when there are no candidates.

    Never raises on entries with a missing language or score.
    """
    if candidates is None:
        return None
    items = list(candidates)
    if not items:
        return None

    for stage in logo_stages(target=target, fallback=fallback):
        chosen = stage(items)
        if chosen is not None:
            return chosen
    return None


def filter_logos_with_fallback(
    candidates: Iterable[ImageMetadata] | None,
    *,
    target: str = TARGET_LOCALE,
) -> list[ImageMetadata]:
    """
    Keep only the logos in the target language; if there are none, return every logo.
    """
    if candidates is None:
        return []
    items = list(candidates)
    localized = [c for c in items if c.iso_639_1 == target]
    return localized if localized else items
