"""Contract between the converter session and whatever draws its result.

A Protocol keeps the session usable from the terminal, from tests (a list
collecting views) or from any other front-end, without inheritance.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ResultView


@runtime_checkable
class ResultRenderer(Protocol):
    """Receives every view the session puts in its result slot.

    Rules:
    - ``render`` is synchronous: it is called from the event loop right after
      the slot is overwritten.
    - It must not call back into the session.
    """

    def render(self, view: ResultView) -> None:
        """Show ``view`` to the user."""

        ...
