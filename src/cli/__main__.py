"""``python -m cli``: run the converter without the ``distconv`` script."""

from __future__ import annotations

import sys

from cli.main import run

if __name__ == "__main__":
    # Windows consoles default to cp1252, which has no "→" for direction labels.
    if sys.platform == "win32":
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    run()
