"""Command-line front-end of the distance converter.

Commands:
- ``convert``: one-shot conversion of one or more values.
- ``interactive``: line-based converter screen.
- ``stream``: debounced conversion of input changes read from stdin.
- ``formulas``: reference formulas.
- ``config``: show/store settings.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import IO, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.json_exporter import dumps_results, export_results_json
from cli import config_cmd
from cli.ui_components import (
    ConsoleRenderer,
    build_formulas_table,
    build_result_panel,
    build_results_table,
    print_banner,
)
from core.config import AppSettings, load_settings
from core.domain.direction import ConversionDirection
from core.domain.models import ResultView
from core.services.conversion_engine import ConversionEngine
from core.services.converter_session import ConverterSession

app = typer.Typer(
    no_args_is_help=True,
    help="Convert distances between kilometers and miles.",
)
app.add_typer(config_cmd.app, name="config")

_console = Console()
_err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

_QUIT_COMMANDS = {":q", ":quit", ":exit"}


@dataclass
class CliState:
    settings: AppSettings
    show_banner: bool


def configure_logging(level: int) -> None:
    """Route stdlib logging to stderr through Rich."""

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)


def _state(ctx: typer.Context) -> CliState:
    return ctx.obj


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    """Distance converter: kilometers <-> miles."""

    overrides = {"log_level": log_level} if log_level else {}
    try:
        settings = load_settings(**overrides)
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {exc}")
        raise typer.Exit(code=2)

    configure_logging(settings.log_level_number)
    ctx.obj = CliState(settings=settings, show_banner=settings.show_banner and not no_banner)


@app.command(context_settings={"ignore_unknown_options": True})
def convert(
    ctx: typer.Context,
    values: List[str] = typer.Argument(..., help="Distances to convert (negative values are reported as invalid)."),
    direction: Optional[ConversionDirection] = typer.Option(
        None, "--direction", "-d", case_sensitive=False, help="Conversion direction."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
    export: Optional[Path] = typer.Option(None, "--export", "-o", help="Also write results to a JSON file."),
) -> None:
    """Convert one or more distances. Exits with code 1 if any value is invalid."""

    state = _state(ctx)
    engine = ConversionEngine(direction or state.settings.default_direction)
    results = engine.convert_many(values)

    if as_json:
        typer.echo(dumps_results(results))
    elif len(results) == 1:
        _console.print(build_result_panel(ResultView.from_result(results[0])))
    else:
        _console.print(build_results_table(values, results))

    if export is not None:
        try:
            path = export_results_json(results=results, output_path=export)
        except OSError as exc:
            _err_console.print(f"[red]Could not write {export}:[/red] {exc}")
            raise typer.Exit(code=1)
        if not as_json:
            _console.print(f"[green]Exported to:[/green] {path}")

    failed = sum(1 for r in results if not r.ok)
    if failed:
        logger.info("%d of %d values were rejected", failed, len(results))
        raise typer.Exit(code=1)


@app.command()
def interactive(
    ctx: typer.Context,
    direction: Optional[ConversionDirection] = typer.Option(
        None, "--direction", "-d", case_sensitive=False, help="Initial conversion direction."
    ),
) -> None:
    """Converter screen: type a distance and press Enter.

    `:swap` flips the direction, `:km` / `:miles` pick the input unit,
    an empty line clears the result, `:q` quits.
    """

    state = _state(ctx)
    session = ConverterSession(
        ConsoleRenderer(_console),
        direction=direction or state.settings.default_direction,
        debounce_seconds=state.settings.debounce_seconds,
    )

    if state.show_banner:
        print_banner(_console)
    _console.print(build_result_panel(session.view))

    while True:
        try:
            line = typer.prompt(session.direction.label(), default="", show_default=False)
        except typer.Abort:
            break

        text = line.strip()
        if text in _QUIT_COMMANDS:
            break
        if text == ":swap":
            session.swap_direction(immediate=True)
        elif text == ":km":
            session.select_direction(ConversionDirection.KM_TO_MILES, immediate=True)
        elif text == ":miles":
            session.select_direction(ConversionDirection.MILES_TO_KM, immediate=True)
        elif text == "":
            session.update_input("", immediate=True)
        else:
            session.submit(text)

    session.close()
    history = session.history
    _console.print(f"[dim]{history.successes()} converted, {history.failures()} rejected.[/dim]")


def _start_line_reader(
    loop: asyncio.AbstractEventLoop, stream: IO[str], lines: asyncio.Queue[str]
) -> threading.Thread:
    """Read ``stream`` in a daemon thread, handing each line to ``lines``.

    ``""`` marks end of input. The thread never blocks interpreter exit.
    """

    def read() -> None:
        while True:
            line = stream.readline()
            try:
                loop.call_soon_threadsafe(lines.put_nowait, line)
            except RuntimeError:
                # Loop already closed (interrupted); nobody is listening.
                return
            if line == "":
                return

    thread = threading.Thread(target=read, name="stdin-reader", daemon=True)
    thread.start()
    return thread


async def _pump_lines(session: ConverterSession, stream: IO[str]) -> None:
    loop = asyncio.get_running_loop()
    lines: asyncio.Queue[str] = asyncio.Queue()
    _start_line_reader(loop, stream, lines)
    try:
        while True:
            line = await lines.get()
            if line == "":
                break
            session.update_input(line.rstrip("\r\n").strip())
        session.flush()
    finally:
        session.close()


@app.command()
def stream(
    ctx: typer.Context,
    direction: Optional[ConversionDirection] = typer.Option(
        None, "--direction", "-d", case_sensitive=False, help="Conversion direction."
    ),
    debounce: Optional[float] = typer.Option(
        None, "--debounce", min=0, help="Quiet period in seconds (default from settings)."
    ),
) -> None:
    """Read input changes from stdin, one per line, and print settled results."""

    state = _state(ctx)
    renderer = ConsoleRenderer(_console, compact=True)
    session = ConverterSession(
        renderer,
        direction=direction or state.settings.default_direction,
        debounce_seconds=state.settings.debounce_seconds if debounce is None else debounce,
    )
    try:
        asyncio.run(_pump_lines(session, typer.get_text_stream("stdin")))
    except KeyboardInterrupt:
        _err_console.print("[yellow]Interrupted.[/yellow]")
        raise typer.Exit(code=130)
    logger.debug("Stream finished after %d renders", renderer.rendered)


@app.command()
def formulas() -> None:
    """Show the conversion formulas."""

    _console.print(build_formulas_table())


def run() -> None:
    app()
