"""Conversion directions supported by the converter.

The set is closed on purpose: two members, each carrying its own units and
factor so callers never compare raw strings to pick a branch.
"""

from __future__ import annotations

from enum import Enum

KM_TO_MILES = 0.621371
MILES_TO_KM = 1.60934

# Literal text of each factor, as shown in formulas.
_FACTOR_TEXT = {
    "km-to-miles": "0.621371",
    "miles-to-km": "1.60934",
}


class ConversionDirection(str, Enum):
    """Which way a distance is converted."""

    KM_TO_MILES = "km-to-miles"
    MILES_TO_KM = "miles-to-km"

    @classmethod
    def default(cls) -> "ConversionDirection":
        """Direction selected when the converter starts."""

        return cls.KM_TO_MILES

    @property
    def from_unit(self) -> str:
        return "km" if self is ConversionDirection.KM_TO_MILES else "miles"

    @property
    def to_unit(self) -> str:
        return "miles" if self is ConversionDirection.KM_TO_MILES else "km"

    @property
    def factor(self) -> float:
        return KM_TO_MILES if self is ConversionDirection.KM_TO_MILES else MILES_TO_KM

    @property
    def factor_text(self) -> str:
        return _FACTOR_TEXT[self.value]

    def reverse(self) -> "ConversionDirection":
        """The opposite direction."""

        if self is ConversionDirection.KM_TO_MILES:
            return ConversionDirection.MILES_TO_KM
        return ConversionDirection.KM_TO_MILES

    def label(self) -> str:
        """Human readable label for selectors and tables."""

        if self is ConversionDirection.KM_TO_MILES:
            return "Kilometers → Miles"
        return "Miles → Kilometers"
