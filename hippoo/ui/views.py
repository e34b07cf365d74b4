from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from hippoo.models.package import InstalledSizeReport, PackageReport, ScoredPackage
from hippoo.services.formatting import display_name, format_bytes, format_ms, format_transfer_time
from hippoo.services.scoring import MAX_SCORE


@dataclass(slots=True)
class MetricRow:
    label: str
    values: list[str] = field(default_factory=list)


@dataclass(slots=True)
class ReportSection:
    title: str
    values: list[str]
    captions: list[str]


def tree_shakeable(package: ScoredPackage) -> bool:
    return package.metrics.has_js_module and not package.metrics.has_side_effects


def report_sections(report: PackageReport) -> list[ReportSection]:
    score = report.package.package_score
    return [
        ReportSection(
            title="Download Time 💨",
            values=[format_ms(report.transfer.slow_ms), format_ms(report.transfer.fast_ms)],
            captions=["Slow 3G", "Emerging 4G"],
        ),
        ReportSection(
            title="Bundle Size 📦",
            values=[report.size_text, report.gzip_text],
            captions=["Minified", "Minified + Gzipped"],
        ),
        ReportSection(
            title="Hippo Score 🎖️",
            values=[f"{score.score}/{MAX_SCORE}", score.rating.label],
            captions=["Score", "Rating"],
        ),
    ]


def comparison_headers(packages: Sequence[ScoredPackage]) -> list[str]:
    return ["Metric 📊", *(display_name(p.name) for p in packages)]


def comparison_rows(packages: Sequence[ScoredPackage]) -> list[MetricRow]:
    return [
        MetricRow("Size", [format_bytes(p.size) for p in packages]),
        MetricRow("Gzipped", [format_bytes(p.gzip) for p in packages]),
        MetricRow("Download", [format_ms(format_transfer_time(p.size).fast_ms) for p in packages]),
        MetricRow("Dependencies", [str(p.metrics.dependency_count) for p in packages]),
        MetricRow("Tree-Shake", ["Yes" if tree_shakeable(p) else "No" for p in packages]),
        MetricRow("Score", [f"{p.score}/{MAX_SCORE} {p.rating.emoji}" for p in packages]),
    ]


def installed_rows(report: InstalledSizeReport) -> list[MetricRow]:
    rows = [
        MetricRow(
            p.name,
            [format_bytes(p.size), format_bytes(p.gzip), str(p.metrics.dependency_count), f"{p.score}/{MAX_SCORE}"],
        )
        for p in sorted(report.packages, key=lambda p: p.gzip, reverse=True)
    ]
    rows.append(
        MetricRow(
            f"Total ({len(report.packages)})",
            [format_bytes(report.total_size), format_bytes(report.total_gzip), "", ""],
        )
    )
    return rows
