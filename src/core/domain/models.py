"""Domain models (Pydantic v2).

- ``ConversionRequest`` is what the shell hands to the engine.
- ``ConversionResult`` is a discriminated union: ``ConversionSuccess`` or
  ``ConversionFailure``, tagged by ``kind``.
- ``ResultView`` is what the shell currently shows.

Every model is frozen: a result is built once per conversion and only read
afterwards.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict

from core.domain.direction import ConversionDirection
from core.domain.formatting import format_fixed, format_number, round_fixed

INVALID_INPUT_MESSAGE = "Please enter a valid positive number"
PLACEHOLDER_MESSAGE = "Enter a distance and click Convert"


class ErrorKind(str, Enum):
    """Why a raw input could not be converted."""

    INVALID_NUMBER = "invalid_number"
    NEGATIVE_VALUE = "negative_value"


class ConversionRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    raw_input: str = Field(
        default="",
        description="Text exactly as typed by the user.",
    )
    direction: ConversionDirection = Field(
        default_factory=ConversionDirection.default,
        description="Selected conversion direction.",
    )


class ConversionSuccess(BaseModel):
    """A converted distance.

    ``input_value`` and ``output_value`` are never negative. ``input_value`` is
    ``inf`` only when the text overflowed the float range while parsing.
    ``output_value`` can be ``inf`` for a finite input near the float maximum,
    since the factor pushes it past the range.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    input_value: float = Field(
        ...,
        ge=0,
        description="Parsed input distance, in the source unit.",
    )
    output_value: float = Field(
        ...,
        ge=0,
        description="Unrounded converted distance, in the target unit.",
    )
    direction: ConversionDirection = Field(
        ...,
        description="Direction used for the conversion.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def display(self) -> str:
        """``"10 km = 6.2137 miles"``."""

        return (
            f"{format_number(self.input_value)} {self.direction.from_unit} = "
            f"{format_fixed(self.output_value)} {self.direction.to_unit}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def formula(self) -> str:
        """``"10 km × 0.621371 = 6.2137 miles"``."""

        return (
            f"{format_number(self.input_value)} {self.direction.from_unit} × "
            f"{self.direction.factor_text} = "
            f"{format_fixed(self.output_value)} {self.direction.to_unit}"
        )

    @property
    def rounded_output(self) -> float:
        return round_fixed(self.output_value)

    @property
    def ok(self) -> bool:
        return True


class ConversionFailure(BaseModel):
    """Input rejected by validation. Both kinds share one user-facing message."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: ErrorKind = Field(
        ...,
        description="Which validation rule rejected the input.",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return INVALID_INPUT_MESSAGE

    @property
    def ok(self) -> bool:
        return False


ConversionResult = Annotated[
    Union[ConversionSuccess, ConversionFailure],
    Field(discriminator="kind"),
]


class ResultView(BaseModel):
    """Content of the shell's single result slot."""

    model_config = ConfigDict(frozen=True)

    state: Literal["placeholder", "success", "error"] = Field(
        default="placeholder",
        description="Which of the three panels the shell shows.",
    )
    display: str = Field(
        default=PLACEHOLDER_MESSAGE,
        description="Main line: result summary, error or placeholder text.",
    )
    formula: str | None = Field(
        default=None,
        description="Formula line, only for successful conversions.",
    )
    value: float | None = Field(
        default=None,
        description="Unrounded converted value, only for successful conversions.",
    )
    error: ErrorKind | None = Field(
        default=None,
        description="Validation failure, only in the error state.",
    )

    @classmethod
    def placeholder(cls) -> "ResultView":
        return cls()

    @classmethod
    def from_result(cls, result: ConversionSuccess | ConversionFailure) -> "ResultView":
        if isinstance(result, ConversionSuccess):
            return cls(
                state="success",
                display=result.display,
                formula=result.formula,
                value=result.output_value,
            )
        return cls(state="error", display=result.message, error=result.reason)
