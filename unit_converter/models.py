"""Data models for the unit converter."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from unit_converter.config import RESULT_PREFIX


class ConversionKind(Enum):
    """The fixed set of conversions, valued by their dropdown label."""
    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class ConversionRequest:
    """A single conversion triggered by the user."""
    value: float
    kind: ConversionKind


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a conversion: a value on success, a message on bad input."""
    value: Optional[float] = None
    error: Optional[str] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("ConversionResult needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @staticmethod
    def success(value: float) -> "ConversionResult":
        return ConversionResult(value=float(value))

    @staticmethod
    def failure(message: str) -> "ConversionResult":
        return ConversionResult(error=message)

    def display_text(self) -> str:
        """Text shown in the result area."""
        if not self.ok:
            return self.error
        return f"{RESULT_PREFIX}{self.value}"
