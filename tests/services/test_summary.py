from __future__ import annotations

from io import StringIO

from rich.console import Console

from hippoo.models.comparison import ComparisonResult
from hippoo.models.enums import ErrorKind
from hippoo.models.errors import FetchError, InsufficientInputError
from hippoo.models.package import InstalledSizeReport
from hippoo.services.analysis import build_report
from hippoo.services.comparison import compare_scored
from hippoo.services.scoring import score_package
from hippoo.services.summary import (
    _comparison_table,
    _installed_table,
    render_compare_hint,
    render_comparison,
    render_fetch_error,
    render_input_error,
    render_installed,
    render_package,
    render_usage_hint,
)
from tests.factories import huge, tiny


def _console() -> Console:
    return Console(file=StringIO(), width=200)


def _output(c: Console) -> str:
    f = c.file
    assert isinstance(f, StringIO)
    return f.getvalue()


class TestRenderPackage:
    def test_sections(self) -> None:
        c = _console()
        render_package(c, build_report(score_package(tiny("react"))))
        out = _output(c)
        assert "REACT Size" in out
        assert "Download Time" in out
        assert "Bundle Size" in out
        assert "10/10" in out
        assert "Excellent" in out
        assert "Emerging 4G" in out


class TestComparison:
    def _result(self) -> ComparisonResult:
        return compare_scored([score_package(tiny("preact")), score_package(huge("react"))])

    def test_table_shape(self) -> None:
        table = _comparison_table(self._result())
        assert len(table.columns) == 3
        assert table.row_count == 6

    def test_render_summary(self) -> None:
        c = _console()
        render_comparison(c, self._result())
        out = _output(c)
        assert "Comparison Summary" in out
        assert "React (585.9 kB) is 300.0x larger than Preact (2.0 kB)" in out
        assert "Performance-Critical Apps" in out
        assert "Balanced Development" in out


class TestInstalled:
    def test_table_has_total_row(self) -> None:
        report = InstalledSizeReport(packages=(score_package(tiny("a")), score_package(huge("b"))))
        table = _installed_table(report)
        assert table.row_count == 3

    def test_empty_report(self) -> None:
        c = _console()
        render_installed(c, InstalledSizeReport(packages=()))
        assert "No dependencies" in _output(c)

    def test_render(self) -> None:
        c = _console()
        render_installed(c, InstalledSizeReport(packages=(score_package(tiny("a")),)))
        assert "Total (1)" in _output(c)


class TestErrors:
    def test_not_found_has_suggestions(self) -> None:
        c = _console()
        render_fetch_error(c, FetchError(ErrorKind.NOT_FOUND, "reakt", "not found"))
        out = _output(c)
        assert "couldn't find package" in out
        assert "reakt" in out
        assert "Check for typos" in out

    def test_provider_failure_shows_message(self) -> None:
        c = _console()
        render_fetch_error(c, FetchError(ErrorKind.PROVIDER_FAILURE, "react", "Connection reset"))
        out = _output(c)
        assert "Something Went Wrong" in out
        assert "Connection reset" in out

    def test_input_error(self) -> None:
        c = _console()
        render_input_error(c, InsufficientInputError("comparison", 2, 1))
        assert "needs at least 2" in _output(c)


class TestHints:
    def test_usage_hint(self) -> None:
        c = _console()
        render_usage_hint(c)
        assert "hippoo compare react vue" in _output(c)
        assert "hippoo check size" in _output(c)

    def test_compare_hint(self) -> None:
        c = _console()
        render_compare_hint(c, ["react", "vue"])
        assert "hippoo compare react vue" in _output(c)
