"""`config` command group: inspect and persist settings."""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from cli.ui_components import build_settings_table
from core.config import ENV_PREFIX, get_user_env_file, load_settings, write_user_env_vars
from core.domain.direction import ConversionDirection

app = typer.Typer(no_args_is_help=True, help="Show or store converter settings.")

_console = Console()


@app.command()
def show() -> None:
    """Show the effective settings and where user settings are stored."""

    try:
        settings = load_settings()
    except ValidationError as exc:
        _console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2)

    _console.print(build_settings_table(settings))
    _console.print(f"[dim]User config file: {get_user_env_file()}[/dim]")


@app.command(name="set")
def set_values(
    direction: Optional[ConversionDirection] = typer.Option(
        None, "--direction", "-d", case_sensitive=False, help="Default conversion direction."
    ),
    debounce: Optional[float] = typer.Option(
        None, "--debounce", help="Debounce interval in seconds."
    ),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level name."),
    banner: Optional[bool] = typer.Option(
        None, "--banner/--no-banner", help="Show the banner in interactive modes."
    ),
) -> None:
    """Store settings in the user config .env."""

    overrides: dict[str, object] = {}
    if direction is not None:
        overrides["default_direction"] = direction
    if debounce is not None:
        overrides["debounce_seconds"] = debounce
    if log_level is not None:
        overrides["log_level"] = log_level
    if banner is not None:
        overrides["show_banner"] = banner

    if not overrides:
        raise typer.BadParameter("nothing to set; pass at least one option")

    try:
        validated = load_settings(**overrides)
    except ValidationError as exc:
        raise typer.BadParameter(str(exc)) from exc

    values: dict[str, str | None] = {}
    for key in overrides:
        value = getattr(validated, key)
        if isinstance(value, ConversionDirection):
            text = value.value
        elif isinstance(value, bool):
            text = str(value).lower()
        else:
            text = str(value)
        values[f"{ENV_PREFIX}{key.upper()}"] = text

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved settings to:[/green] {env_path}")
