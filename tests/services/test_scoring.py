from __future__ import annotations

import pytest

from hippoo.models.enums import Rating
from hippoo.services.scoring import (
    MAX_SCORE,
    calculate_score,
    dependency_points,
    download_points,
    module_points,
    rating_for,
    score_package,
    size_points,
)
from tests.factories import huge, make_metrics, tiny


class TestSizePoints:
    @pytest.mark.parametrize(
        ("gzip", "points"),
        [
            (0, 3),
            (5 * 1024 - 1, 3),
            (5 * 1024, 2),
            (50 * 1024 - 1, 2),
            (50 * 1024, 1),
            (500 * 1024 - 1, 1),
            (500 * 1024, 0),
        ],
    )
    def test_bands_are_strict(self, gzip: int, points: int) -> None:
        assert size_points(gzip) == points


class TestDownloadPoints:
    def test_small_package(self) -> None:
        assert download_points(3000) == 2

    def test_just_below_five_ms(self) -> None:
        # 640 KB -> 5.12ms; 620 KB -> 4.96ms
        assert download_points(620 * 1024) == 2
        assert download_points(640 * 1024) == 1

    def test_exactly_five_ms(self) -> None:
        assert download_points(625 * 1024) == 1

    def test_exactly_twenty_ms(self) -> None:
        assert download_points(2500 * 1024) == 0

    def test_uses_unrounded_estimate(self) -> None:
        # 4.5ms would ceil to 5ms, but still earns the top band
        assert download_points(int(562.5 * 1024)) == 2


class TestDependencyPoints:
    @pytest.mark.parametrize(
        ("count", "points"),
        [(0, 3), (1, 2), (5, 2), (6, 1), (15, 1), (16, 0), (200, 0)],
    )
    def test_bands_are_inclusive(self, count: int, points: int) -> None:
        assert dependency_points(count) == points


class TestModulePoints:
    def test_esm_without_side_effects(self) -> None:
        assert module_points(True, False) == 2

    def test_esm_with_side_effects(self) -> None:
        assert module_points(True, True) == 1

    def test_no_esm_without_side_effects(self) -> None:
        assert module_points(False, False) == 1

    def test_neither(self) -> None:
        assert module_points(False, True) == 0


class TestRating:
    @pytest.mark.parametrize(
        ("score", "rating"),
        [
            (10, Rating.EXCELLENT),
            (8, Rating.EXCELLENT),
            (7, Rating.GOOD),
            (6, Rating.GOOD),
            (5, Rating.FAIR),
            (4, Rating.FAIR),
            (3, Rating.POOR),
            (0, Rating.POOR),
        ],
    )
    def test_bands(self, score: int, rating: Rating) -> None:
        assert rating_for(score) is rating

    def test_rating_is_monotonic_in_score(self) -> None:
        ranks = [rating_for(s).rank for s in range(MAX_SCORE + 1)]
        assert ranks == sorted(ranks)

    def test_labels(self) -> None:
        assert Rating.EXCELLENT.label == "Excellent 🎉"
        assert Rating.POOR.label == "Poor 😕"


class TestCalculateScore:
    def test_best_possible_package(self) -> None:
        result = calculate_score(tiny())
        assert result.score == 10
        assert result.rating is Rating.EXCELLENT

    def test_heavy_package(self) -> None:
        # 700 KB minified still downloads in ~5.5ms on the fast profile.
        result = calculate_score(huge())
        assert result.breakdown is not None
        assert result.breakdown.size == 0
        assert result.breakdown.download == 1
        assert result.breakdown.dependencies == 0
        assert result.breakdown.modules == 0
        assert result.score == 1
        assert result.rating is Rating.POOR

    def test_worst_possible_package(self) -> None:
        metrics = make_metrics(size=10 * 1024 * 1024, gzip=2 * 1024 * 1024, deps=50)
        result = calculate_score(metrics)
        assert result.score == 0
        assert result.rating is Rating.POOR

    def test_exactly_five_kb_gzip(self) -> None:
        result = calculate_score(make_metrics(size=0, gzip=5 * 1024, deps=0, esm=True, side_effects=False))
        assert result.breakdown is not None
        assert result.breakdown.size == 2
        assert result.score == 9

    def test_score_within_bounds(self) -> None:
        for size in (0, 10_000, 1_000_000, 50_000_000):
            for deps in (0, 3, 10, 40):
                for esm in (True, False):
                    for side_effects in (True, False):
                        m = make_metrics(size=size, gzip=size // 3, deps=deps, esm=esm, side_effects=side_effects)
                        s = calculate_score(m)
                        assert 0 <= s.score <= MAX_SCORE
                        assert s.rating is rating_for(s.score)

    def test_idempotent(self) -> None:
        m = make_metrics(size=80_000, gzip=25_000, deps=4, esm=True)
        assert calculate_score(m) == calculate_score(m)

    def test_score_package_keeps_metrics(self) -> None:
        m = tiny("preact")
        scored = score_package(m)
        assert scored.metrics is m
        assert scored.name == "preact"
        assert scored.score == 10
