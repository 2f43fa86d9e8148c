"""Domain types of the converter.

Pure data and formatting rules: no I/O, no CLI, no event loop.
"""

from core.domain.direction import KM_TO_MILES, MILES_TO_KM, ConversionDirection
from core.domain.models import (
    INVALID_INPUT_MESSAGE,
    PLACEHOLDER_MESSAGE,
    ConversionFailure,
    ConversionRequest,
    ConversionResult,
    ConversionSuccess,
    ErrorKind,
    ResultView,
)

__all__ = [
    "INVALID_INPUT_MESSAGE",
    "KM_TO_MILES",
    "MILES_TO_KM",
    "PLACEHOLDER_MESSAGE",
    "ConversionDirection",
    "ConversionFailure",
    "ConversionRequest",
    "ConversionResult",
    "ConversionSuccess",
    "ErrorKind",
    "ResultView",
]
