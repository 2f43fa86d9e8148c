"""Debounced scheduling on the asyncio event loop.

Each ``schedule`` call cancels the pending timer and arms a new one, so only
the most recent callback runs once the quiet period elapses. A generation
counter backs up the cancellation: a timer that fires after being superseded
finds a newer generation and does nothing.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class Debouncer:
    """Run the latest scheduled callback after ``delay`` seconds of quiet."""

    def __init__(self, delay: float) -> None:
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.delay = delay
        self.generation = 0
        self._handle: asyncio.TimerHandle | None = None
        self._callback: Callable[[], None] | None = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self, callback: Callable[[], None]) -> int:
        """Replace any pending callback with ``callback``.

        Must be called from a running event loop. Returns the generation
        assigned to this callback.
        """

        loop = asyncio.get_running_loop()
        self._cancel_handle()
        self.generation += 1
        generation = self.generation
        self._callback = callback
        self._handle = loop.call_later(self.delay, self._fire, generation)
        logger.debug("Scheduled generation %d in %.3fs", generation, self.delay)
        return generation

    def cancel(self) -> None:
        """Drop the pending callback without running it."""

        if self._handle is None:
            return
        self._cancel_handle()
        self.generation += 1
        self._callback = None

    def flush(self) -> bool:
        """Run the pending callback immediately. Returns whether one ran."""

        if self._handle is None:
            return False
        return self._fire(self.generation)

    def _fire(self, generation: int) -> bool:
        if generation != self.generation or self._callback is None:
            logger.debug("Discarded stale generation %d", generation)
            return False
        callback = self._callback
        self._cancel_handle()
        self._callback = None
        callback()
        return True

    def _cancel_handle(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
