"""JSON export of conversion results.

Lets scripts and other tools consume results without parsing the rich
terminal output.
"""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, Iterable

from core.domain.models import ConversionResult


def _finite_or_text(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    return value


def results_to_payload(results: Iterable[ConversionResult]) -> list[dict[str, Any]]:
    """Plain JSON-compatible dicts, including ``display``/``formula``/``message``."""

    payload = []
    for result in results:
        data = result.model_dump(mode="python")
        data = {k: _finite_or_text(v) for k, v in data.items()}
        if "direction" in data:
            data["direction"] = result.direction.value
        if "reason" in data:
            data["reason"] = result.reason.value
        payload.append(data)
    return payload


def dumps_results(results: Iterable[ConversionResult]) -> str:
    """Stable JSON text for ``results``."""

    return json.dumps(results_to_payload(results), ensure_ascii=False, indent=2, sort_keys=True)


def export_results_json(*, results: Iterable[ConversionResult], output_path: Path) -> Path:
    """Export results as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_results(results) + "\n", encoding="utf-8")
    return output_path

