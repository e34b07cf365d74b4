"""Package score: four bounded sub-scores summed into a 0-10 total.

Size and download thresholds are strict upper bounds; dependency
thresholds are inclusive, so exactly 5 dependencies still earns 2 points.
"""

from __future__ import annotations

from hippoo.models.enums import Rating
from hippoo.models.package import PackageMetrics, PackageScore, ScoreBreakdown, ScoredPackage
from hippoo.services.formatting import FAST_KBPS, transfer_ms

MAX_SCORE = 10

# (upper bound exclusive, points), checked in order.
_SIZE_BANDS_KB: tuple[tuple[float, int], ...] = ((5, 3), (50, 2), (500, 1))
_DOWNLOAD_BANDS_MS: tuple[tuple[float, int], ...] = ((5, 2), (20, 1))
# (upper bound inclusive, points), checked in order.
_DEPENDENCY_BANDS: tuple[tuple[int, int], ...] = ((0, 3), (5, 2), (15, 1))
# (minimum score, rating), highest band first.
_RATING_BANDS: tuple[tuple[int, Rating], ...] = (
    (8, Rating.EXCELLENT),
    (6, Rating.GOOD),
    (4, Rating.FAIR),
)


def _below(value: float, bands: tuple[tuple[float, int], ...]) -> int:
    for bound, points in bands:
        if value < bound:
            return points
    return 0


def size_points(gzip: int) -> int:
    return _below(gzip / 1024, _SIZE_BANDS_KB)


def download_points(size: int) -> int:
    # Uses the unrounded fast-profile estimate of the minified size.
    return _below(transfer_ms(size, FAST_KBPS), _DOWNLOAD_BANDS_MS)


def dependency_points(count: int) -> int:
    for bound, points in _DEPENDENCY_BANDS:
        if count <= bound:
            return points
    return 0


def module_points(has_js_module: bool, has_side_effects: bool) -> int:
    if has_js_module and not has_side_effects:
        return 2
    if has_js_module or not has_side_effects:
        return 1
    return 0


def rating_for(score: int) -> Rating:
    for minimum, rating in _RATING_BANDS:
        if score >= minimum:
            return rating
    return Rating.POOR


def score_breakdown(metrics: PackageMetrics) -> ScoreBreakdown:
    return ScoreBreakdown(
        size=size_points(metrics.gzip),
        download=download_points(metrics.size),
        dependencies=dependency_points(metrics.dependency_count),
        modules=module_points(metrics.has_js_module, metrics.has_side_effects),
    )


def calculate_score(metrics: PackageMetrics) -> PackageScore:
    breakdown = score_breakdown(metrics)
    total = breakdown.total
    return PackageScore(score=total, rating=rating_for(total), breakdown=breakdown)


def score_package(metrics: PackageMetrics) -> ScoredPackage:
    return ScoredPackage(metrics=metrics, package_score=calculate_score(metrics))
