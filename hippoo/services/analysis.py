"""Fetch-then-score pipelines behind the CLI commands.

These glue the size provider to the pure scoring and comparison services.
Fetch failures come back as ``Err(FetchError)``; too few packages for a
comparison raises ``InsufficientInputError`` before anything is fetched.
"""

from __future__ import annotations

from collections.abc import Sequence

from result import Err, Ok, Result

from hippoo.models.comparison import ComparisonResult
from hippoo.models.errors import FetchError, InsufficientInputError
from hippoo.models.package import InstalledSizeReport, PackageReport, ScoredPackage
from hippoo.provider import SizeProvider, fetch_all
from hippoo.services.comparison import compare_scored
from hippoo.services.formatting import format_bytes, format_transfer_time
from hippoo.services.insights import MIN_COMPARE
from hippoo.services.scoring import score_package


def build_report(package: ScoredPackage) -> PackageReport:
    return PackageReport(
        package=package,
        size_text=format_bytes(package.size),
        gzip_text=format_bytes(package.gzip),
        transfer=format_transfer_time(package.size),
    )


def analyze_package(provider: SizeProvider, name: str) -> Result[PackageReport, FetchError]:
    fetched = provider.fetch(name)
    if isinstance(fetched, Err):
        return fetched
    return Ok(build_report(score_package(fetched.ok_value)))


def _fetch_scored(
    provider: SizeProvider, names: Sequence[str], workers: int
) -> Result[list[ScoredPackage], FetchError]:
    fetched = fetch_all(provider.fetch, names, workers=workers)
    if isinstance(fetched, Err):
        return fetched
    return Ok([score_package(metrics) for metrics in fetched.ok_value])


def compare_packages(
    provider: SizeProvider, names: Sequence[str], workers: int = 4
) -> Result[ComparisonResult, FetchError]:
    if len(names) < MIN_COMPARE:
        raise InsufficientInputError("comparison", MIN_COMPARE, len(names))
    scored = _fetch_scored(provider, names, workers)
    if isinstance(scored, Err):
        return scored
    return Ok(compare_scored(scored.ok_value))


def installed_size(
    provider: SizeProvider, names: Sequence[str], workers: int = 4
) -> Result[InstalledSizeReport, FetchError]:
    scored = _fetch_scored(provider, names, workers)
    if isinstance(scored, Err):
        return scored
    return Ok(InstalledSizeReport(packages=tuple(scored.ok_value)))
