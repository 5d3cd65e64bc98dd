"""Conversion strategies and the label dispatcher.

Each strategy is a stateless, one-way formula:
- Length:      meters -> kilometers     (value / 1000)
- Weight:      grams -> kilograms       (value / 1000)
- Temperature: Celsius -> Fahrenheit    (value * 9/5 + 32)

Strategies are module-level singletons keyed by ConversionKind. Resolving a
label never fails: anything that is not an exact label match gets the Length
strategy.
"""

from dataclasses import dataclass
from typing import Callable

from unit_converter.config import (
    CELSIUS_DEGREES,
    CONVERSION_LABELS,
    DEFAULT_CONVERSION_LABEL,
    FAHRENHEIT_DEGREES,
    FAHRENHEIT_FREEZING_POINT,
    GRAMS_PER_KILOGRAM,
    METERS_PER_KILOMETER,
)
from unit_converter.models import ConversionKind


@dataclass(frozen=True)
class ConversionStrategy:
    """A pure one-way unit conversion."""
    kind: ConversionKind
    source_unit: str
    target_unit: str
    formula: Callable[[float], float]

    def convert(self, value: float) -> float:
        """Apply the formula. No validation; callers pass a parsed number."""
        return self.formula(value)

    @property
    def description(self) -> str:
        return f"{self.source_unit} → {self.target_unit}"


def _meters_to_kilometers(meters: float) -> float:
    return meters / METERS_PER_KILOMETER


def _grams_to_kilograms(grams: float) -> float:
    return grams / GRAMS_PER_KILOGRAM


def _celsius_to_fahrenheit(celsius: float) -> float:
    # Multiply before dividing so results match value * 9 / 5 + 32 exactly
    return celsius * FAHRENHEIT_DEGREES / CELSIUS_DEGREES + FAHRENHEIT_FREEZING_POINT


LENGTH_CONVERSION = ConversionStrategy(
    kind=ConversionKind.LENGTH,
    source_unit="Meters (m)",
    target_unit="Kilometers (km)",
    formula=_meters_to_kilometers,
)

WEIGHT_CONVERSION = ConversionStrategy(
    kind=ConversionKind.WEIGHT,
    source_unit="Grams (g)",
    target_unit="Kilograms (kg)",
    formula=_grams_to_kilograms,
)

TEMPERATURE_CONVERSION = ConversionStrategy(
    kind=ConversionKind.TEMPERATURE,
    source_unit="Celsius (°C)",
    target_unit="Fahrenheit (°F)",
    formula=_celsius_to_fahrenheit,
)

STRATEGIES = {
    ConversionKind.LENGTH: LENGTH_CONVERSION,
    ConversionKind.WEIGHT: WEIGHT_CONVERSION,
    ConversionKind.TEMPERATURE: TEMPERATURE_CONVERSION,
}

_STRATEGIES_BY_LABEL = {kind.label: strategy for kind, strategy in STRATEGIES.items()}


def get_strategy(kind: ConversionKind) -> ConversionStrategy:
    """Return the strategy for a ConversionKind."""
    return STRATEGIES[kind]


def resolve_strategy(label: str) -> ConversionStrategy:
    """Map a dropdown label to its strategy.

    Matching is exact and case-sensitive. Unrecognized labels ("", "length",
    "Weightx", ...) fall back to the Length strategy without raising.
    """
    return _STRATEGIES_BY_LABEL.get(label, _STRATEGIES_BY_LABEL[DEFAULT_CONVERSION_LABEL])


def conversion_labels() -> list:
    """Dropdown choices in display order."""
    return list(CONVERSION_LABELS)
