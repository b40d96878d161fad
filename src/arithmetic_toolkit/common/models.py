"""Pydantic models for calculator requests, results and parsed tokens."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EquationRequest(BaseModel):
    """Represents one equation read from the calculator input stream."""

    model_config = ConfigDict(frozen=True)

    label: str = Field(default="", description="Equation label, accepted but never evaluated")
    first: float = Field(..., description="First operand")
    operator: str = Field(..., description="Operator symbol")
    second: float = Field(..., description="Second operand")


class ComputationResult(BaseModel):
    """
    Outcome of a single calculation.

    Exactly one of ``value`` or ``error`` is set.
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[float] = Field(default=None, description="Numeric result of the operation")
    error: Optional[str] = Field(default=None, description="User-visible error message")

    @model_validator(mode="after")
    def value_xor_error(self) -> "ComputationResult":
        """Ensure that a result carries either a value or an error, never both."""
        if (self.value is None) == (self.error is None):
            raise ValueError("ComputationResult needs exactly one of value or error")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """
        Render the result the way the calculator writes it to its output stream.

        :return: Default float text for a value, the literal message for an error
        :rtype: str
        """
        if self.error is not None:
            return self.error
        return str(self.value)


class ParseResult(BaseModel):
    """Result of parsing a single token: a value on success, a reason on failure."""

    model_config = ConfigDict(frozen=True)

    token: Optional[str] = Field(default=None, description="Raw token, None at end of input")
    value: Optional[float] = Field(default=None, description="Parsed value on success")
    reason: Optional[str] = Field(default=None, description="Why parsing failed")

    @property
    def ok(self) -> bool:
        return self.reason is None
