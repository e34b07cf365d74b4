from __future__ import annotations

from hippoo.models.comparison import ComparisonInsights, ComparisonView
from hippoo.models.errors import InsufficientInputError
from hippoo.models.package import ScoredPackage
from hippoo.services.formatting import display_name, format_bytes

# The balanced pick is the runner-up by score, so two packages are required.
MIN_COMPARE = 2


def size_ratio(largest: ScoredPackage, smallest: ScoredPackage) -> float | None:
    if smallest.gzip == 0:
        return None
    return largest.gzip / smallest.gzip


def _size_insight(largest: ScoredPackage, smallest: ScoredPackage, ratio: float | None) -> str:
    big = f"{display_name(largest.name)} ({format_bytes(largest.gzip)})"
    small = f"{display_name(smallest.name)} ({format_bytes(smallest.gzip)})"
    if ratio is None:
        if largest.gzip == 0:
            return f"{big} and {small} are the same size"
        return f"{big} is larger than {small}"
    return f"{big} is {ratio:.1f}x larger than {small}"


def generate_insights(view: ComparisonView) -> ComparisonInsights:
    if len(view) < MIN_COMPARE:
        raise InsufficientInputError("insights", MIN_COMPARE, len(view))

    largest = view.by_size_desc[0]
    smallest = view.by_size_desc[-1]
    ratio = size_ratio(largest, smallest)
    return ComparisonInsights(
        largest=largest,
        smallest=smallest,
        size_ratio=ratio,
        size_insight=_size_insight(largest, smallest, ratio),
        performance_pick=view.by_speed_asc[0],
        balanced_pick=view.by_score_desc[1],
        feature_rich_pick=view.by_score_desc[0],
    )
