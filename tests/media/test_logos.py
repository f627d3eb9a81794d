from __future__ import annotations

import json
from pathlib import Path

import pytest

from cine_backend.media.logos import (
    filter_logos_with_fallback,
    highest_score,
    logo_stages,
    select_best_logo,
)
from cine_backend.models.images import ImageMetadata, parse_images


def _logo(path: str, lang: str | None, score: float | None) -> ImageMetadata:
    return ImageMetadata(file_path=path, iso_639_1=lang, vote_average=score)


def test_select_best_logo_prefers_spanish_despite_lower_score() -> None:
    logos = [_logo("/a", "fr", 8.0), _logo("/b", "es", 1.0), _logo("/c", "en", 9.0)]
    assert select_best_logo(logos).file_path == "/b"


def test_select_best_logo_falls_back_to_english() -> None:
    logos = [_logo("/a", "fr", 8.0), _logo("/c", "en", 9.0)]
    assert select_best_logo(logos).file_path == "/c"


def test_select_best_logo_uses_highest_score_without_es_or_en() -> None:
    logos = [_logo("/a", "fr", 8.0), _logo("/d", "de", 9.5)]
    assert select_best_logo(logos).file_path == "/d"


@pytest.mark.parametrize("candidates", [[], None, iter(())])
def test_select_best_logo_returns_none_for_no_candidates(candidates) -> None:
    assert select_best_logo(candidates) is None


def test_select_best_logo_first_spanish_entry_wins() -> None:
    logos = [_logo("/en", "en", 9.0), _logo("/es1", "es", 2.0), _logo("/es2", "es", 9.9)]
    assert select_best_logo(logos).file_path == "/es1"


def test_select_best_logo_first_english_entry_wins() -> None:
    logos = [_logo("/x", None, 9.9), _logo("/en1", "en", 1.0), _logo("/en2", "en", 8.0)]
    assert select_best_logo(logos).file_path == "/en1"


def test_select_best_logo_does_not_normalize_language_codes() -> None:
    logos = [_logo("/upper", "ES", 9.0), _logo("/region", "es-MX", 8.0), _logo("/fr", "fr", 9.5)]
    assert select_best_logo(logos).file_path == "/fr"


def test_select_best_logo_missing_score_ranks_lowest() -> None:
    logos = [_logo("/none", "fr", None), _logo("/low", "de", 0.0)]
    assert select_best_logo(logos).file_path == "/low"


@pytest.mark.parametrize("order", ["nan_first", "nan_last"])
def test_select_best_logo_nan_score_ranks_lowest(order: str) -> None:
    logos = [_logo("/nan", "fr", float("nan")), _logo("/high", "de", 9.0), _logo("/low", "it", 1.0)]
    if order == "nan_last":
        logos = logos[1:] + logos[:1]
    assert select_best_logo(logos).file_path == "/high"


def test_select_best_logo_nan_does_not_beat_missing_score() -> None:
    logos = [_logo("/none", "fr", None), _logo("/nan", "de", float("nan"))]
    assert select_best_logo(logos).file_path == "/none"


def test_select_best_logo_all_scores_missing_returns_first() -> None:
    logos = [_logo("/first", None, None), _logo("/second", "it", None)]
    assert select_best_logo(logos).file_path == "/first"


def test_select_best_logo_score_tie_keeps_input_order() -> None:
    logos = [_logo("/a", "fr", 5.0), _logo("/b", "de", 7.0), _logo("/c", "it", 7.0)]
    assert select_best_logo(logos).file_path == "/b"


def test_select_best_logo_accepts_custom_locales() -> None:
    logos = [_logo("/es", "es", 1.0), _logo("/fr", "fr", 2.0)]
    assert select_best_logo(logos, target="fr", fallback="de").file_path == "/fr"


def test_select_best_logo_tolerates_malformed_upstream_entries() -> None:
    logos = parse_images(
        [
            {"file_path": "/bad_score.png", "vote_average": "n/a"},
            "not-an-object",
            {"iso_639_1": "pt", "vote_average": 4.0},
        ]
    )
    chosen = select_best_logo(logos)
    assert chosen is not None
    assert chosen.iso_639_1 == "pt"
    assert chosen.file_path == ""


def test_logo_stages_order_is_language_then_score() -> None:
    stages = logo_stages()
    assert [s.__name__ for s in stages] == [
        "first_with_language_es",
        "first_with_language_en",
        "highest_score",
    ]
    assert highest_score([]) is None


def test_select_best_logo_on_sample_payload() -> None:
    repo_root = Path(__file__).resolve().parents[2]
    payload = json.loads((repo_root / "tests" / "fixtures" / "tmdb" / "movie_images_sample.json").read_text(encoding="utf-8"))
    chosen = select_best_logo(parse_images(payload["logos"]))
    assert chosen == ImageMetadata(
        file_path="/logo_es.png",
        iso_639_1="es",
        vote_average=3.2,
        vote_count=2,
        width=500,
        height=200,
        aspect_ratio=2.5,
    )


def test_filter_logos_with_fallback_keeps_only_spanish() -> None:
    logos = [_logo("/en", "en", 9.0), _logo("/es1", "es", 1.0), _logo("/fr", "fr", 3.0), _logo("/es2", "es", 2.0)]
    assert [l.file_path for l in filter_logos_with_fallback(logos)] == ["/es1", "/es2"]


def test_filter_logos_with_fallback_returns_everything_without_spanish() -> None:
    logos = [_logo("/en", "en", 9.0), _logo("/x", None, None), _logo("/fr", "fr", 3.0)]
    result = filter_logos_with_fallback(logos)
    assert result == logos


def test_filter_logos_with_fallback_handles_empty_input() -> None:
    assert filter_logos_with_fallback([]) == []
    assert filter_logos_with_fallback(None) == []
