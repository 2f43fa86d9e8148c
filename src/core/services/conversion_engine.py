"""Distance conversion: parsing, validation and the multiplication itself.

Everything here is a pure function of its inputs. ``convert`` accepts any
text and always returns a ``ConversionResult``; validation problems are
values (``ConversionFailure``), never exceptions.
"""

from __future__ import annotations

import logging
import math
import re

from core.domain.direction import ConversionDirection
from core.domain.models import (
    ConversionFailure,
    ConversionRequest,
    ConversionResult,
    ConversionSuccess,
    ErrorKind,
)

logger = logging.getLogger(__name__)

# Longest numeric prefix: optional sign, then Infinity or a decimal literal
# with an optional exponent. Trailing text is ignored.
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def parse_distance(raw_input: str) -> float | None:
    """Parse the leading number of ``raw_input``.

    Returns ``None`` when the text does not start with a number (after
    leading whitespace). Literals beyond the float range come back as
    ``inf``.
    """

    match = _NUMERIC_PREFIX.match(raw_input.lstrip())
    if match is None:
        return None
    value = float(match.group(0))
    # -0 is zero, not a negative distance.
    return value + 0.0


def convert_value(value: float, direction: ConversionDirection) -> float:
    """Multiply ``value`` by the factor of ``direction``."""

    return value * direction.factor


def convert(raw_input: str, direction: ConversionDirection) -> ConversionResult:
    """Convert ``raw_input`` in the given direction.

    - No numeric prefix -> ``ConversionFailure(INVALID_NUMBER)``.
    - Negative number -> ``ConversionFailure(NEGATIVE_VALUE)``.
    - Otherwise ``ConversionSuccess`` with the unrounded output.
    """

    value = parse_distance(raw_input)
    if value is None:
        logger.debug("Rejected %r: not a number", raw_input)
        return ConversionFailure(reason=ErrorKind.INVALID_NUMBER)
    if value < 0:
        logger.debug("Rejected %r: negative distance", raw_input)
        return ConversionFailure(reason=ErrorKind.NEGATIVE_VALUE)

    output = convert_value(value, direction)
    if math.isinf(value):
        logger.debug("Input %r overflowed to infinity", raw_input)
    return ConversionSuccess(input_value=value, output_value=output, direction=direction)


def convert_request(request: ConversionRequest) -> ConversionResult:
    """Same as ``convert`` for a prepared ``ConversionRequest``."""

    return convert(request.raw_input, request.direction)


class ConversionEngine:
    """Engine bound to a direction.

    Thin convenience for callers that convert many values the same way
    (batch CLI, scripts). It holds no state besides the direction.
    """

    def __init__(self, direction: ConversionDirection | None = None) -> None:
        self.direction = direction or ConversionDirection.default()

    def convert(self, raw_input: str) -> ConversionResult:
        return convert(raw_input, self.direction)

    def convert_many(self, raw_inputs: list[str]) -> list[ConversionResult]:
        return [self.convert(raw) for raw in raw_inputs]
