from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hippoo.models.package import ScoredPackage


@dataclass(slots=True, frozen=True)
class ComparisonView:
    by_size_desc: tuple[ScoredPackage, ...]
    by_score_desc: tuple[ScoredPackage, ...]
    by_speed_asc: tuple[ScoredPackage, ...]

    def __len__(self) -> int:
        return len(self.by_size_desc)

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "bySizeDesc": [p.name for p in self.by_size_desc],
            "byScoreDesc": [p.name for p in self.by_score_desc],
            "bySpeedAsc": [p.name for p in self.by_speed_asc],
        }


@dataclass(slots=True, frozen=True)
class ComparisonInsights:
    largest: ScoredPackage
    smallest: ScoredPackage
    # None when the smallest package gzips to zero bytes.
    size_ratio: float | None
    size_insight: str
    performance_pick: ScoredPackage
    balanced_pick: ScoredPackage
    feature_rich_pick: ScoredPackage

    def to_dict(self) -> dict[str, Any]:
        return {
            "largest": self.largest.name,
            "smallest": self.smallest.name,
            "sizeRatio": None if self.size_ratio is None else round(self.size_ratio, 1),
            "sizeInsight": self.size_insight,
            "bestFor": {
                "performance": self.performance_pick.name,
                "balanced": self.balanced_pick.name,
                "featureRich": self.feature_rich_pick.name,
            },
        }


@dataclass(slots=True, frozen=True)
class ComparisonResult:
    packages: tuple[ScoredPackage, ...]
    view: ComparisonView
    insights: ComparisonInsights

    def to_dict(self) -> dict[str, Any]:
        return {
            "packages": [p.to_dict() for p in self.packages],
            "rankings": self.view.to_dict(),
            "summary": self.insights.to_dict(),
        }
