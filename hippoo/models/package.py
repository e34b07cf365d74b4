from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from hippoo.models.enums import Rating

# (json_key, attr_name) for the integer fields of a size payload.
_INT_FIELDS: tuple[tuple[str, str], ...] = (
    ("size", "size"),
    ("gzip", "gzip"),
    ("dependencyCount", "dependency_count"),
)


@dataclass(slots=True, frozen=True)
class PackageMetrics:
    name: str
    size: int
    gzip: int
    dependency_count: int = 0
    has_js_module: bool = False
    has_side_effects: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")
        for _, attr in _INT_FIELDS:
            if getattr(self, attr) < 0:
                raise ValueError(f"{attr} must be non-negative")

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size,
            "gzip": self.gzip,
            "dependencyCount": self.dependency_count,
            "hasJSModule": self.has_js_module,
            "hasSideEffects": self.has_side_effects,
        }

    @classmethod
    def from_payload(cls, name: str, payload: dict[str, Any]) -> PackageMetrics:
        """Build metrics from a size API response.

        ``hasJSModule`` comes back as the module entry path (or ``false``) and
        ``hasSideEffects`` as a boolean or a list of globs, so both are read
        for truthiness.  Raises ``KeyError``/``ValueError``/``TypeError`` on a
        malformed payload.
        """
        ints = {attr: int(payload[key]) for key, attr in _INT_FIELDS}
        return cls(
            name=name,
            has_js_module=bool(payload.get("hasJSModule", False)),
            has_side_effects=bool(payload.get("hasSideEffects", True)),
            **ints,
        )


@dataclass(slots=True, frozen=True)
class ScoreBreakdown:
    size: int
    download: int
    dependencies: int
    modules: int

    @property
    def total(self) -> int:
        return self.size + self.download + self.dependencies + self.modules

    def to_dict(self) -> dict[str, int]:
        return {
            "size": self.size,
            "download": self.download,
            "dependencies": self.dependencies,
            "modules": self.modules,
        }


@dataclass(slots=True, frozen=True)
class PackageScore:
    score: int
    rating: Rating
    breakdown: ScoreBreakdown | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"score": self.score, "rating": self.rating.display}
        if self.breakdown is not None:
            data["breakdown"] = self.breakdown.to_dict()
        return data


@dataclass(slots=True, frozen=True)
class ScoredPackage:
    metrics: PackageMetrics
    package_score: PackageScore

    @property
    def name(self) -> str:
        return self.metrics.name

    @property
    def size(self) -> int:
        return self.metrics.size

    @property
    def gzip(self) -> int:
        return self.metrics.gzip

    @property
    def score(self) -> int:
        return self.package_score.score

    @property
    def rating(self) -> Rating:
        return self.package_score.rating

    def to_dict(self) -> dict[str, Any]:
        return {**self.metrics.to_dict(), **self.package_score.to_dict()}


@dataclass(slots=True, frozen=True)
class TransferTime:
    slow_ms: int
    fast_ms: int

    def to_dict(self) -> dict[str, int]:
        return {"slowMs": self.slow_ms, "fastMs": self.fast_ms}


@dataclass(slots=True, frozen=True)
class PackageReport:
    package: ScoredPackage
    size_text: str
    gzip_text: str
    transfer: TransferTime

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.package.to_dict(),
            "sizeText": self.size_text,
            "gzipText": self.gzip_text,
            "transfer": self.transfer.to_dict(),
        }


@dataclass(slots=True, frozen=True)
class InstalledSizeReport:
    packages: tuple[ScoredPackage, ...]

    @property
    def total_size(self) -> int:
        return sum(p.size for p in self.packages)

    @property
    def total_gzip(self) -> int:
        return sum(p.gzip for p in self.packages)

    def to_dict(self) -> dict[str, Any]:
        return {
            "packages": [p.to_dict() for p in self.packages],
            "totals": {"size": self.total_size, "gzip": self.total_gzip, "count": len(self.packages)},
        }
