"""Conversion pipeline run on each Convert action.

1. Parse the raw text (parse-or-null)
2. On failure, stop with the fixed invalid-input message
3. Resolve the strategy from the selected label
4. Convert and wrap the value in a ConversionResult
"""

import logging

from unit_converter.config import INVALID_INPUT_MESSAGE
from unit_converter.converters import get_strategy, resolve_strategy
from unit_converter.models import ConversionRequest, ConversionResult
from unit_converter.parsing import parse_value

logger = logging.getLogger("unit_converter.service")


def convert_value(value: float, label: str) -> float:
    """Convert an already-parsed value using the strategy for label."""
    return resolve_strategy(label).convert(value)


def convert_request(request: ConversionRequest) -> ConversionResult:
    """Convert a request whose kind is already known."""
    strategy = get_strategy(request.kind)
    result = strategy.convert(request.value)
    logger.debug("Converted %s %s -> %s %s",
                 request.value, strategy.source_unit, result, strategy.target_unit)
    return ConversionResult.success(result)


def run_conversion(raw_text: str, label: str) -> ConversionResult:
    """Parse raw_text and convert it with the strategy selected by label.

    Invalid input never reaches a strategy.
    """
    value = parse_value(raw_text)
    if value is None:
        logger.debug("Rejected input %r", raw_text)
        return ConversionResult.failure(INVALID_INPUT_MESSAGE)

    request = ConversionRequest(value=value, kind=resolve_strategy(label).kind)
    return convert_request(request)


def format_result(value: float) -> str:
    """Format a converted value for display, e.g. 'Converted Value: 2.0'."""
    return ConversionResult.success(value).display_text()
