"""UI components for the CLI (Rich).

Kept apart from the commands so the same panels and tables serve the
one-shot, interactive and streaming modes.
"""

from __future__ import annotations

from typing import Sequence

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings
from core.domain.direction import ConversionDirection
from core.domain.models import ConversionResult, ResultView


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in non-interactive/JSON modes)."""

    title = Text("Distance Converter", style="bold cyan")
    subtitle = Text("Convert between kilometers and miles instantly", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_result_panel(view: ResultView) -> Panel:
    """Panel for the current result slot: placeholder, success or error."""

    if view.state == "error":
        body = Align.center(Text(view.display, style="bold red"))
        return Panel(body, border_style="red", title="Result")

    if view.state == "success":
        lines = [Align.center(Text(view.display, style="bold"))]
        if view.formula:
            lines.append(Align.center(Text(view.formula, style="italic dim")))
        return Panel(Group(*lines), border_style="cyan", title="Result")

    return Panel(Align.center(Text(view.display, style="dim")), border_style="dim", title="Result")


def format_view_line(view: ResultView) -> Text:
    """One-line rendering of a view, for streaming output."""

    if view.state == "error":
        return Text(view.display, style="red")
    if view.state == "success":
        line = Text(view.display, style="bold")
        if view.formula:
            line.append(f"  ({view.formula})", style="dim")
        return line
    return Text(view.display, style="dim")


def build_results_table(raw_inputs: Sequence[str], results: Sequence[ConversionResult]) -> Table:
    """Table with one row per converted value."""

    table = Table(title="Conversions")
    table.add_column("Input", style="cyan", no_wrap=True)
    table.add_column("Result", style="white")
    table.add_column("Formula", style="dim")

    for raw, result in zip(raw_inputs, results):
        if result.ok:
            table.add_row(Text(raw), Text(result.display), Text(result.formula))
        else:
            table.add_row(Text(raw), Text(result.message, style="red"), Text(""))
    return table


def build_formulas_table() -> Table:
    """Reference table of both conversion formulas."""

    table = Table(title="Conversion Formulas")
    table.add_column("Conversion", style="bright_green", no_wrap=True)
    table.add_column("Formula", style="white")
    for direction in ConversionDirection:
        table.add_row(
            direction.label(),
            f"{direction.from_unit} × {direction.factor_text} = {direction.to_unit}",
        )
    return table


def build_settings_table(settings: AppSettings) -> Table:
    table = Table(title="Distance Converter Settings")
    table.add_column("Setting", style="bright_green", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_row("default_direction", settings.default_direction.value)
    table.add_row("debounce_seconds", f"{settings.debounce_seconds:g}")
    table.add_row("log_level", settings.log_level)
    table.add_row("show_banner", str(settings.show_banner).lower())
    return table


class ConsoleRenderer:
    """``ResultRenderer`` printing to a Rich console.

    ``compact`` prints one line per view instead of a panel.
    """

    def __init__(self, console: Console, *, compact: bool = False) -> None:
        self._console = console
        self._compact = compact
        self.rendered = 0

    def render(self, view: ResultView) -> None:
        self.rendered += 1
        if self._compact:
            self._console.print(format_view_line(view))
        else:
            self._console.print(build_result_panel(view))
