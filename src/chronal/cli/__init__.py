"""Command line entry points for chronal.

Commands:
    chronal parse "call me next wednesday at 2:25pm" --base 2024-01-05T10:00:00Z
    chronal cases cases.txt --base 2024-01-05T10:00:00Z
    chronal config show
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer
from dateutil.parser import isoparse
from rich.console import Console
from rich.table import Table

from chronal.configuration.cli import config_app
from chronal.configuration.settings import DEFAULT_CONFIG_PATH, build_parser, resolve_settings
from chronal.errors import ChronalError, format_error_for_cli

logger = logging.getLogger(__name__)

console = Console()

cli = typer.Typer(help="Resolve natural-language date and time expressions")
cli.add_typer(config_app, name="config")


def setup_logging(debug: bool = False) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )


@cli.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Log parser decisions to stderr"),
) -> None:
    """chronal command line tools."""
    setup_logging(debug)


def _reference(base: Optional[str]) -> datetime:
    if base is None:
        return datetime.now().astimezone()
    try:
        return isoparse(base)
    except ValueError as e:
        raise typer.BadParameter(f"Not an RFC3339 timestamp: {base} ({e})", param_hint="--base") from e


@cli.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Text to search for a date or time"),
    base: Optional[str] = typer.Option(None, "--base", "-b", help="Reference instant (RFC3339), default now"),
    distance: Optional[int] = typer.Option(None, "--distance", "-d", min=0, help="Clustering distance"),
    match_by_order: Optional[bool] = typer.Option(
        None, "--match-by-order/--match-by-position", help="Apply rules by definition or textual order"
    ),
    languages: Optional[List[str]] = typer.Option(None, "--lang", "-l", help="Rule catalog (repeatable)"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
) -> None:
    """Find the first temporal expression in TEXT and resolve it."""
    reference = _reference(base)

    overrides: dict = {}
    if distance is not None:
        overrides.setdefault("options", {})["distance"] = distance
    if match_by_order is not None:
        overrides.setdefault("options", {})["match_by_order"] = match_by_order
    if languages:
        overrides["languages"] = languages

    try:
        parser = build_parser(resolve_settings(config_path, overrides))
        result = parser.parse(text, reference)
    except ChronalError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=2)

    if result is None:
        if output_json:
            print(json.dumps({"result": None}))
        else:
            typer.echo("No date or time found", err=True)
        raise typer.Exit(code=1)

    if output_json:
        print(json.dumps({"result": result.to_dict()}))
    else:
        typer.echo(result.time.isoformat())
        typer.echo(f"text:  {result.text}")
        typer.echo(f"index: {result.index}")


@cli.command("cases")
def cases_command(
    cases_file: Optional[Path] = typer.Argument(None, help="File with one input per line"),
    base: Optional[str] = typer.Option(None, "--base", "-b", help="Reference instant (RFC3339), default now"),
    inputs: Optional[List[str]] = typer.Option(None, "--input", "-i", help="Input text (repeatable, replaces FILE)"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
) -> None:
    """Resolve a batch of inputs and print a table of results.

    Lines that are blank or start with '#' are skipped. Inputs that resolve
    to nothing are shown as X.
    """
    reference = _reference(base)

    if inputs:
        lines = list(inputs)
    elif cases_file is not None:
        lines = _read_cases(cases_file)
    else:
        lines = []

    if not lines:
        typer.echo("No inputs to resolve", err=True)
        raise typer.Exit(code=1)

    try:
        parser = build_parser(resolve_settings(config_path))
    except ChronalError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=2)

    table = Table(title=f"Reference {reference.isoformat()}", show_header=True, header_style="bold")
    table.add_column("Input", style="cyan")
    table.add_column("Result")

    for line in lines:
        try:
            result = parser.parse(line, reference)
        except ChronalError as e:
            logger.debug(f"Case '{line}' failed: {e}")
            table.add_row(line, f"[red]X[/red] [dim]{e.code}[/dim]")
            continue
        if result is None:
            table.add_row(line, "[yellow]X[/yellow]")
        else:
            table.add_row(line, result.time.isoformat())

    console.print(table)


def _read_cases(path: Path) -> List[str]:
    if not path.exists():
        raise typer.BadParameter(f"File not found: {path}", param_hint="FILE")
    lines = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if line and not line.startswith("#"):
            lines.append(line)
    return lines


__all__ = ["cli", "config_app"]
