"""CLI commands for managing chronal parser settings."""

from __future__ import annotations

import json
from pathlib import Path

import typer
from pydantic import ValidationError

from chronal.configuration.settings import (
    DEFAULT_CONFIG_PATH,
    ParserSettings,
    build_parser,
    load_settings,
    resolve_settings,
    save_settings,
)
from chronal.errors import ChronalError, format_error_for_cli


config_app = typer.Typer(help="Manage chronal configuration")


@config_app.command("init")
def init_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
) -> None:
    """Write a settings file with the defaults."""

    if config_path.exists() and not force:
        typer.echo(f"Configuration already exists at {config_path} (use --force to overwrite)", err=True)
        raise typer.Exit(code=1)

    settings = ParserSettings()
    save_settings(settings, config_path)
    typer.echo(f"Configuration initialized at {config_path}")
    typer.echo(_summarize_settings(settings))


@config_app.command("show")
def show_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config"),
) -> None:
    """Display the effective configuration, environment overrides included."""

    try:
        settings = resolve_settings(config_path)
    except ChronalError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=2)
    typer.echo(_summarize_settings(settings))


@config_app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Configuration key, e.g. options.distance"),
    value: str = typer.Argument(..., help="New value (comma separated for languages)"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config"),
) -> None:
    """Update a configuration value."""

    try:
        settings = load_settings(config_path) if config_path.exists() else ParserSettings()
    except ChronalError as e:
        typer.echo(format_error_for_cli(e), err=True)
        raise typer.Exit(code=2)
    payload = settings.model_dump(mode="python")
    parsed = [code for code in value.split(",") if code.strip()] if key == "languages" else value
    _assign(payload, key.split("."), parsed)

    try:
        updated = ParserSettings.model_validate(payload)
    except ValidationError as e:
        typer.echo(f"❌ Invalid value for {key}: {e}", err=True)
        raise typer.Exit(code=1)

    save_settings(updated, config_path)
    typer.echo(f"Updated {key}")


@config_app.command("validate")
def validate_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
) -> None:
    """Validate configuration file for correctness."""

    try:
        settings = load_settings(config_path)
        build_parser(settings)
    except (FileNotFoundError, ChronalError) as e:
        typer.echo(f"❌ Configuration invalid: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"✅ Configuration valid at {config_path}")
    typer.echo(f"   Languages: {', '.join(settings.languages)}")
    typer.echo(f"   Distance: {settings.options.distance}")
    typer.echo(f"   Match by order: {settings.options.match_by_order}")


def _summarize_settings(settings: ParserSettings) -> str:
    data = settings.model_dump(mode="json")
    return json.dumps(data, indent=2)


def _assign(payload: dict, keys: list[str], value: object) -> None:
    current = payload
    for key in keys[:-1]:
        current = current.setdefault(key, {})
    current[keys[-1]] = value
