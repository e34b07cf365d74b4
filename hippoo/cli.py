"""hippoo command line.

Usage:
    hippoo react
    hippoo compare react vue preact
    hippoo size --dev
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any

import click
from result import Err
from rich.console import Console
from rich.markup import escape

from hippoo import __version__
from hippoo.config.loader import load_config, sample_config_json
from hippoo.config.schema import AppConfig, clamp_field
from hippoo.logging_config import setup_logging
from hippoo.models.errors import FetchError, InsufficientInputError
from hippoo.provider import create_provider
from hippoo.services import analysis
from hippoo.services.manifest import read_dependencies
from hippoo.services.summary import (
    render_compare_hint,
    render_comparison,
    render_fetch_error,
    render_input_error,
    render_installed,
    render_package,
    render_usage_hint,
)

logger = logging.getLogger(__name__)

_DEFAULT_COMMAND = "check"
_EXIT_FAILURE = 1
_EXIT_CONFIG = 2


class _DefaultGroup(click.Group):
    """Group that routes unknown first arguments to the ``check`` command.

    Lets ``hippoo react`` work alongside ``hippoo compare react vue``.
    """

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None and not args[0].startswith("-"):
            return _DEFAULT_COMMAND, self.get_command(ctx, _DEFAULT_COMMAND), args
        return super().resolve_command(ctx, args)


def _emit_json(payload: dict[str, Any]) -> None:
    click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _want_json(ctx: click.Context, as_json: bool) -> bool:
    return as_json or bool(ctx.obj.get("json"))


def _fail_fetch(ctx: click.Context, error: FetchError, as_json: bool) -> None:
    logger.info("fetch failed: %s (%s)", error.package, error.kind.value)
    if as_json:
        _emit_json({"error": error.to_dict()})
    else:
        render_fetch_error(ctx.obj["console"], error)
    ctx.exit(_EXIT_FAILURE)


def _fail_input(ctx: click.Context, exc: InsufficientInputError, as_json: bool) -> None:
    if as_json:
        _emit_json({"error": exc.to_dict()})
    else:
        render_input_error(ctx.obj["console"], exc)
    ctx.exit(_EXIT_FAILURE)


@click.group(cls=_DefaultGroup, invoke_without_command=True)
@click.version_option(__version__, "-v", "--version", prog_name="hippoo")
@click.option("--verbose", is_flag=True, help="Enable verbose logging.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to config.json (default: ~/.config/hippoo/config.json).",
)
@click.option("--workers", type=int, default=None, help="Concurrent size requests.")
@click.option("--json", "-j", "as_json", is_flag=True, help="Output in JSON format.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    debug: bool,
    config_path: str | None,
    workers: int | None,
    as_json: bool,
) -> None:
    """🦛 Check and compare the download footprint of npm packages."""
    ctx.ensure_object(dict)
    console = Console()
    ctx.obj["console"] = console
    ctx.obj["json"] = as_json

    loaded = load_config(config_path)
    if isinstance(loaded, Err):
        console.print(f"[red]{escape(loaded.err_value)}[/red]")
        ctx.exit(_EXIT_CONFIG)
    config: AppConfig = loaded.ok_value
    if workers is not None:
        config.fetch_workers = clamp_field(workers, "fetch_workers")
    ctx.obj["config"] = config

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = os.environ.get("HIPPOO_LOG_LEVEL", config.log_level)
    setup_logging(level=level, quiet_third_party=not debug)

    ctx.obj["provider"] = create_provider(config)

    if ctx.invoked_subcommand is None:
        render_usage_hint(console)


@cli.command(_DEFAULT_COMMAND)
@click.argument("package", required=False)
@click.argument("packages", nargs=-1)
@click.option("--json", "-j", "as_json", is_flag=True, help="Output in JSON format.")
@click.pass_context
def check(ctx: click.Context, package: str | None, packages: tuple[str, ...], as_json: bool) -> None:
    """📦 Check the size and score of a single package."""
    console: Console = ctx.obj["console"]
    as_json = _want_json(ctx, as_json)
    if not package:
        render_usage_hint(console)
        return
    if packages:
        render_compare_hint(console, [package, *packages])
        return

    if as_json:
        result = analysis.analyze_package(ctx.obj["provider"], package)
    else:
        with console.status(f"[blue]Fetching size for [bold]{escape(package)}[/bold]...[/blue]"):
            result = analysis.analyze_package(ctx.obj["provider"], package)

    if isinstance(result, Err):
        _fail_fetch(ctx, result.err_value, as_json)
        return
    if as_json:
        _emit_json(result.ok_value.to_dict())
    else:
        render_package(console, result.ok_value)


@cli.command()
@click.argument("packages", nargs=-1, required=True)
@click.option("--json", "-j", "as_json", is_flag=True, help="Output in JSON format.")
@click.pass_context
def compare(ctx: click.Context, packages: tuple[str, ...], as_json: bool) -> None:
    """🔄 Compare two or more packages."""
    console: Console = ctx.obj["console"]
    as_json = _want_json(ctx, as_json)
    workers = ctx.obj["config"].fetch_workers
    names = list(packages)

    try:
        if as_json:
            result = analysis.compare_packages(ctx.obj["provider"], names, workers=workers)
        else:
            with console.status(f"[blue]Comparing packages: {escape(', '.join(names))}...[/blue]"):
                result = analysis.compare_packages(ctx.obj["provider"], names, workers=workers)
    except InsufficientInputError as exc:
        _fail_input(ctx, exc, as_json)
        return

    if isinstance(result, Err):
        _fail_fetch(ctx, result.err_value, as_json)
        return
    if as_json:
        _emit_json(result.ok_value.to_dict())
    else:
        render_comparison(console, result.ok_value)


@cli.command()
@click.option("--dev", "-d", "include_dev", is_flag=True, help="Include devDependencies.")
@click.option(
    "--manifest",
    "-m",
    type=click.Path(dir_okay=False),
    default="package.json",
    show_default=True,
    help="Path to package.json.",
)
@click.option("--json", "-j", "as_json", is_flag=True, help="Output in JSON format.")
@click.pass_context
def size(ctx: click.Context, include_dev: bool, manifest: str, as_json: bool) -> None:
    """📏 Calculate total size of installed packages."""
    console: Console = ctx.obj["console"]
    as_json = _want_json(ctx, as_json)

    names = read_dependencies(manifest, include_dev=include_dev)
    if isinstance(names, Err):
        if as_json:
            _emit_json({"error": {"kind": "manifest", "message": names.err_value}})
        else:
            console.print(f"[red]{escape(names.err_value)}[/red]")
        ctx.exit(_EXIT_FAILURE)
        return

    workers = ctx.obj["config"].fetch_workers
    if as_json:
        result = analysis.installed_size(ctx.obj["provider"], names.ok_value, workers=workers)
    else:
        with console.status("[green]Calculating total installed package size...[/green]"):
            result = analysis.installed_size(ctx.obj["provider"], names.ok_value, workers=workers)

    if isinstance(result, Err):
        _fail_fetch(ctx, result.err_value, as_json)
        return
    if as_json:
        _emit_json(result.ok_value.to_dict())
    else:
        render_installed(console, result.ok_value)


@cli.command("config-sample")
def config_sample() -> None:
    """Print the default configuration as JSON."""
    click.echo(sample_config_json())


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
