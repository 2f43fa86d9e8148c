"""Presentation-shell state for the converter.

The session stands for the converter's single-screen form. It keeps the text
being typed, the selected direction and the one result slot, and decides when
to run the engine.

- Typing or switching direction schedules a debounced refresh.
- An explicit submit (Enter / Convert button) converts right away.
- A refresh with empty input shows the placeholder instead of an error.

Front-ends plug in through ``ResultRenderer``; the session never prints.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.config import AppSettings, load_settings
from core.domain.direction import ConversionDirection
from core.domain.models import ConversionRequest, ConversionResult, ResultView
from core.interfaces.renderer import ResultRenderer
from core.services.conversion_engine import convert_request
from core.services.debounce import Debouncer

logger = logging.getLogger(__name__)


@dataclass
class SessionHistory:
    """Results produced by the session, oldest first."""

    results: list[ConversionResult] = field(default_factory=list)

    def record(self, result: ConversionResult) -> None:
        self.results.append(result)

    def successes(self) -> int:
        return sum(1 for r in self.results if r.ok)

    def failures(self) -> int:
        return sum(1 for r in self.results if not r.ok)


class ConverterSession:
    """UI state of one converter screen."""

    def __init__(
        self,
        renderer: ResultRenderer | None = None,
        *,
        direction: ConversionDirection | None = None,
        debounce_seconds: float | None = None,
        settings: AppSettings | None = None,
    ) -> None:
        if direction is None or debounce_seconds is None:
            settings = settings or load_settings()
        if direction is None:
            direction = settings.default_direction
        if debounce_seconds is None:
            debounce_seconds = settings.debounce_seconds

        self._renderer = renderer
        self._debouncer = Debouncer(debounce_seconds)
        self.raw_input = ""
        self.direction = direction
        self.view = ResultView.placeholder()
        self.history = SessionHistory()

    @property
    def pending(self) -> bool:
        """Whether a debounced refresh is waiting to run."""

        return self._debouncer.pending

    def update_input(self, text: str, *, immediate: bool = False) -> None:
        """Store new input text and refresh.

        The refresh is debounced (needs a running event loop) unless
        ``immediate`` is set, in which case it runs now.
        """

        self.raw_input = text
        self._request_refresh(immediate)

    def select_direction(self, direction: ConversionDirection, *, immediate: bool = False) -> None:
        """Switch direction and refresh, debounced like ``update_input``."""

        self.direction = direction
        self._request_refresh(immediate)

    def swap_direction(self, *, immediate: bool = False) -> None:
        self.select_direction(self.direction.reverse(), immediate=immediate)

    def submit(self, text: str | None = None) -> ResultView:
        """Convert right away (Enter / Convert button), cancelling any pending refresh.

        ``text`` replaces the current input first. Empty input is an error here,
        unlike in ``refresh``.
        """

        if text is not None:
            self.raw_input = text
        self._debouncer.cancel()
        return self._run_conversion()

    def refresh(self) -> ResultView:
        """Debounced callback: placeholder for empty input, conversion otherwise."""

        if self.raw_input == "":
            return self._show(ResultView.placeholder())
        return self._run_conversion()

    def flush(self) -> bool:
        """Run the pending refresh now, if any."""

        return self._debouncer.flush()

    def close(self) -> None:
        self._debouncer.cancel()

    def _request_refresh(self, immediate: bool) -> None:
        if immediate:
            self._debouncer.cancel()
            self.refresh()
        else:
            self._debouncer.schedule(self.refresh)

    def _run_conversion(self) -> ResultView:
        request = ConversionRequest(raw_input=self.raw_input, direction=self.direction)
        result = convert_request(request)
        self.history.record(result)
        return self._show(ResultView.from_result(result))

    def _show(self, view: ResultView) -> ResultView:
        self.view = view
        logger.debug("Result slot now %s: %s", view.state, view.display)
        if self._renderer is not None:
            self._renderer.render(view)
        return view
