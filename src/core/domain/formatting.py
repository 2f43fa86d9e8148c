"""Number-to-text rules for conversion results.

Results are compared as text by users and tests alike, so the rendering is
pinned down here:

- ``format_number`` gives the shortest round-trip text of a float, without a
  trailing ``.0`` for integral values and switching to exponent notation
  outside ``[1e-6, 1e21)``.
- ``format_fixed`` rounds half away from zero on the exact binary value and
  always shows the requested number of decimals.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

FIXED_PLACES = 4

# Magnitude from which fixed notation gives way to exponent notation.
_PLAIN_LIMIT = 21
_FIXED_LIMIT = 1e21


def _shortest_digits(value: float) -> tuple[str, int]:
    """Significant digits of ``value`` and the position of its decimal point.

    ``value`` must be positive and finite. ``("15", 1)`` stands for ``1.5``.
    """

    _, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + int(exponent)
    stripped = digits.rstrip("0")
    return stripped, point


def format_number(value: float) -> str:
    """Render ``value`` the way it appears in result lines (``10``, ``2.5``, ``1e+21``)."""

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    digits, point = _shortest_digits(abs(value))
    count = len(digits)

    if count <= point <= _PLAIN_LIMIT:
        return sign + digits + "0" * (point - count)
    if 0 < point <= _PLAIN_LIMIT:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    exponent = point - 1
    exponent_text = f"e+{exponent}" if exponent >= 0 else f"e-{-exponent}"
    mantissa = digits if count == 1 else digits[0] + "." + digits[1:]
    return sign + mantissa + exponent_text


def format_fixed(value: float, places: int = FIXED_PLACES) -> str:
    """Render ``value`` with exactly ``places`` decimals."""

    if not math.isfinite(value) or abs(value) >= _FIXED_LIMIT:
        return format_number(value)
    if value == 0:
        value = 0.0

    with localcontext() as ctx:
        ctx.prec = 64
        quantized = Decimal(value).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
    return f"{quantized:f}"


def round_fixed(value: float, places: int = FIXED_PLACES) -> float:
    """Numeric counterpart of ``format_fixed``."""

    if not math.isfinite(value):
        return value
    return float(format_fixed(value, places))
