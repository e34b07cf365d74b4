from __future__ import annotations

from enum import Enum


class Rating(str, Enum):
    POOR = "poor"
    FAIR = "fair"
    GOOD = "good"
    EXCELLENT = "excellent"

    # Tiers are ordered; compare ranks, not values.
    @property
    def rank(self) -> int:
        return _RATING_RANK[self]

    @property
    def display(self) -> str:
        return self.value.title()

    @property
    def emoji(self) -> str:
        return _RATING_EMOJI[self]

    @property
    def label(self) -> str:
        return f"{self.display} {self.emoji}"


_RATING_RANK: dict[Rating, int] = {
    Rating.POOR: 0,
    Rating.FAIR: 1,
    Rating.GOOD: 2,
    Rating.EXCELLENT: 3,
}

_RATING_EMOJI: dict[Rating, str] = {
    Rating.POOR: "😕",
    Rating.FAIR: "🤔",
    Rating.GOOD: "👍",
    Rating.EXCELLENT: "🎉",
}


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    PROVIDER_FAILURE = "provider_failure"
    INSUFFICIENT_INPUT = "insufficient_input"
