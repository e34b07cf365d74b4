from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from hippoo.models.comparison import ComparisonResult
from hippoo.models.errors import FetchError, InsufficientInputError
from hippoo.models.package import InstalledSizeReport, PackageReport
from hippoo.services.formatting import display_name
from hippoo.ui.views import comparison_headers, comparison_rows, installed_rows, report_sections

_NOT_FOUND_TIPS = (
    "Check for typos in the package name",
    "Make sure the package is published to npm",
    "Try searching on npmjs.com",
)


def render_usage_hint(console: Console) -> None:
    body = (
        "Seems you forgot to add a package name.\n\n"
        "To check size of a package: [bold]hippoo react[/bold]\n"
        "To compare packages: [bold]hippoo compare react vue[/bold]\n"
        "For a package named like a command: [bold]hippoo check size[/bold]"
    )
    console.print(Panel(body, title="👋 Hey there", border_style="red"))


def render_compare_hint(console: Console, names: list[str]) -> None:
    console.print("[yellow]📦 To compare multiple packages, use the compare command:[/yellow]")
    console.print(f"[green]$ hippoo compare {escape(' '.join(names))}[/green]")


def _report_table(report: PackageReport) -> Table:
    table = Table(
        title=f"{escape(report.package.name.upper())} Size",
        header_style="bold red",
        show_header=False,
        box=None,
    )
    table.add_column("Metric", style="bold red")
    table.add_column("Value", justify="right")
    table.add_column("Value", justify="right")
    for section in report_sections(report):
        table.add_row(section.title, *section.values)
        table.add_row("", *(f"[dim]{caption}[/dim]" for caption in section.captions))
    return table


def render_package(console: Console, report: PackageReport) -> None:
    console.print(_report_table(report))


def _comparison_table(result: ComparisonResult) -> Table:
    table = Table(header_style="bold cyan")
    for index, header in enumerate(comparison_headers(result.packages)):
        table.add_column(escape(header), justify="left" if index == 0 else "right")
    for row in comparison_rows(result.packages):
        table.add_row(row.label, *row.values)
    return table


def _summary_panel(result: ComparisonResult) -> Panel:
    insights = result.insights
    body = (
        "[yellow]Size Impact:[/yellow]\n"
        f"{escape(insights.size_insight)}\n\n"
        "[yellow]🎯 Best Choice For:[/yellow]\n"
        f"• Performance-Critical Apps: [green]{escape(display_name(insights.performance_pick.name))}[/green]\n"
        f"• Balanced Development: [green]{escape(display_name(insights.balanced_pick.name))}[/green]\n"
        f"• Feature-Rich Projects: [green]{escape(display_name(insights.feature_rich_pick.name))}[/green]"
    )
    return Panel(body, title="📊 Comparison Summary", border_style="cyan")


def render_comparison(console: Console, result: ComparisonResult) -> None:
    console.print(_comparison_table(result))
    console.print(_summary_panel(result))


def _installed_table(report: InstalledSizeReport) -> Table:
    table = Table(title="Installed Package Size", header_style="bold magenta")
    table.add_column("Package")
    table.add_column("Size", justify="right")
    table.add_column("Gzipped", justify="right")
    table.add_column("Dependencies", justify="right")
    table.add_column("Score", justify="right")
    rows = installed_rows(report)
    for row in rows[:-1]:
        table.add_row(escape(row.label), *row.values)
    table.add_section()
    total = rows[-1]
    table.add_row(f"[bold]{total.label}[/bold]", *total.values)
    return table


def render_installed(console: Console, report: InstalledSizeReport) -> None:
    if not report.packages:
        console.print("[yellow]No dependencies found in package.json.[/yellow]")
        return
    console.print(_installed_table(report))


def render_fetch_error(console: Console, error: FetchError) -> None:
    if error.is_not_found:
        console.print(
            Panel(
                f"🦛 Hippoo couldn't find package: [bold]{escape(error.package)}[/bold]",
                border_style="yellow",
                style="red",
            )
        )
        console.print("[bright_green]Suggestions:[/bright_green]")
        for tip in _NOT_FOUND_TIPS:
            console.print(f"[dim][bright_green]->[/bright_green] {tip}[/dim]")
        return

    console.print(Panel("🦛 Something Went Wrong", border_style="yellow", style="bold red"))
    console.print(f"Failed to fetch package information for [bold]{escape(error.package)}[/bold]:")
    console.print(f"[red]{escape(error.message)}[/red]")


def render_input_error(console: Console, exc: InsufficientInputError) -> None:
    console.print(Panel(escape(str(exc)), title="Not enough packages", border_style="yellow", style="red"))
    console.print("[dim]Try: hippoo compare react vue[/dim]")
