"""Ports between the converter core and its front-ends.

``ResultRenderer`` is the only one: the session pushes every ``ResultView``
it settles on through it, and the terminal (or a test) decides how to show it.
"""

from core.interfaces.renderer import ResultRenderer

__all__ = ["ResultRenderer"]
