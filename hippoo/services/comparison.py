from __future__ import annotations

from collections.abc import Sequence

from hippoo.models.comparison import ComparisonResult, ComparisonView
from hippoo.models.errors import InsufficientInputError
from hippoo.models.package import ScoredPackage
from hippoo.services.insights import MIN_COMPARE, generate_insights


def build_comparison_view(packages: Sequence[ScoredPackage]) -> ComparisonView:
    """Rank *packages* three ways.

    ``sorted`` is stable, including with ``reverse=True``, so ties keep the
    caller's order in every view.
    """
    if not packages:
        raise InsufficientInputError("comparison", 1, 0)
    return ComparisonView(
        by_size_desc=tuple(sorted(packages, key=lambda p: p.gzip, reverse=True)),
        by_score_desc=tuple(sorted(packages, key=lambda p: p.score, reverse=True)),
        by_speed_asc=tuple(sorted(packages, key=lambda p: p.size)),
    )


def compare_scored(packages: Sequence[ScoredPackage]) -> ComparisonResult:
    if len(packages) < MIN_COMPARE:
        raise InsufficientInputError("comparison", MIN_COMPARE, len(packages))
    view = build_comparison_view(packages)
    return ComparisonResult(
        packages=tuple(packages),
        view=view,
        insights=generate_insights(view),
    )
