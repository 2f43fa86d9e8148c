"""Tests for the conversion engine (parsing, validation, conversion)."""

import math

import pytest

from core.domain.direction import ConversionDirection
from core.domain.models import (
    INVALID_INPUT_MESSAGE,
    ConversionFailure,
    ConversionRequest,
    ConversionSuccess,
    ErrorKind,
)
from core.services.conversion_engine import (
    ConversionEngine,
    convert,
    convert_request,
    parse_distance,
)

KM = ConversionDirection.KM_TO_MILES
MILES = ConversionDirection.MILES_TO_KM

SAMPLE_VALUES = [0.0, 0.5, 1.0, 2.5, 10.0, 42.195, 1234.5678, 1e6]


def test_ten_km_to_miles():
    result = convert("10", KM)

    assert isinstance(result, ConversionSuccess)
    assert result.rounded_output == 6.2137
    assert result.display == "10 km = 6.2137 miles"
    assert result.formula == "10 km × 0.621371 = 6.2137 miles"


def test_five_miles_to_km():
    result = convert("5", MILES)

    assert isinstance(result, ConversionSuccess)
    assert result.rounded_output == 8.0467
    assert result.display == "5 miles = 8.0467 km"
    assert result.formula == "5 miles × 1.60934 = 8.0467 km"


def test_negative_input_is_rejected_with_user_message():
    result = convert("-3", KM)

    assert isinstance(result, ConversionFailure)
    assert result.reason is ErrorKind.NEGATIVE_VALUE
    assert result.message == "Please enter a valid positive number"


def test_zero_is_a_valid_distance():
    result = convert("0", KM)

    assert isinstance(result, ConversionSuccess)
    assert result.output_value == 0.0
    assert result.display == "0 km = 0.0000 miles"


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_km_to_miles_multiplies_by_factor(value):
    result = convert(str(value), KM)

    assert result.ok
    assert result.output_value == pytest.approx(value * 0.621371, rel=1e-9)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_miles_to_km_multiplies_by_factor(value):
    result = convert(str(value), MILES)

    assert result.ok
    assert result.output_value == pytest.approx(value * 1.60934, rel=1e-9)


@pytest.mark.parametrize("value", SAMPLE_VALUES)
def test_round_trip_through_rounded_outputs(value):
    there = convert(str(value), KM)
    back = convert(str(there.rounded_output), MILES)

    assert back.ok
    assert back.output_value == pytest.approx(value, rel=1e-5, abs=2e-4)


@pytest.mark.parametrize("raw", ["-3", "-0.5", "-1e3", "  -7", "-Infinity"])
def test_negative_numbers(raw):
    result = convert(raw, MILES)

    assert isinstance(result, ConversionFailure)
    assert result.reason is ErrorKind.NEGATIVE_VALUE


@pytest.mark.parametrize("raw", ["", "abc", "-", ".", "nan", "e5", "   ", "km10", "１２"])
def test_non_numeric_input(raw):
    result = convert(raw, KM)

    assert isinstance(result, ConversionFailure)
    assert result.reason is ErrorKind.INVALID_NUMBER
    assert result.message == INVALID_INPUT_MESSAGE


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("10km", 10.0),
        ("  7", 7.0),
        ("1e", 1.0),
        ("1.5.3", 1.5),
        ("+4", 4.0),
        (".5", 0.5),
        ("2.", 2.0),
        ("3e2", 300.0),
        ("1E-2x", 0.01),
    ],
)
def test_longest_numeric_prefix_is_used(raw, expected):
    assert parse_distance(raw) == expected


def test_negative_zero_is_zero():
    result = convert("-0", KM)

    assert isinstance(result, ConversionSuccess)
    assert math.copysign(1.0, result.input_value) == 1.0
    assert result.display == "0 km = 0.0000 miles"


def test_overflow_is_an_infinite_success():
    result = convert("1e400", KM)

    assert isinstance(result, ConversionSuccess)
    assert math.isinf(result.input_value)
    assert math.isinf(result.output_value)
    assert result.display == "Infinity km = Infinity miles"


def test_finite_input_can_overflow_on_conversion():
    result = convert("1.7976931348623157e308", MILES)

    assert isinstance(result, ConversionSuccess)
    assert math.isfinite(result.input_value)
    assert math.isinf(result.output_value)
    assert result.display == "1.7976931348623157e+308 miles = Infinity km"


def test_formula_keeps_the_factor_literal():
    result = convert("1234.5678", KM)

    assert " × 0.621371 = " in result.formula
    assert result.formula.startswith("1234.5678 km")


def test_fractional_input_shows_shortest_text():
    result = convert("2.50", KM)

    assert result.display == "2.5 km = 1.5534 miles"


def test_convert_request_matches_convert():
    request = ConversionRequest(raw_input="10", direction=KM)

    assert convert_request(request) == convert("10", KM)


def test_engine_converts_many_values_in_one_direction():
    engine = ConversionEngine(MILES)

    results = engine.convert_many(["1", "-1", "x"])

    assert [r.ok for r in results] == [True, False, False]
    assert results[0].display == "1 miles = 1.6093 km"
    assert results[1].reason is ErrorKind.NEGATIVE_VALUE
    assert results[2].reason is ErrorKind.INVALID_NUMBER


def test_engine_defaults_to_km_to_miles():
    assert ConversionEngine().direction is KM
