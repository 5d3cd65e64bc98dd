"""Application configuration and constants."""

import os

# Logging
LOG_LEVEL = os.environ.get("UNIT_CONVERTER_LOG_LEVEL", "WARNING")

# Dropdown choices, in display order
CONVERSION_LABELS = ["Length", "Weight", "Temperature"]

# Unknown labels resolve to this one
DEFAULT_CONVERSION_LABEL = "Length"

# Conversion constants
METERS_PER_KILOMETER = 1000
GRAMS_PER_KILOGRAM = 1000
FAHRENHEIT_DEGREES = 9  # per 5 Celsius degrees
CELSIUS_DEGREES = 5
FAHRENHEIT_FREEZING_POINT = 32

# Display text
RESULT_PREFIX = "Converted Value: "
INVALID_INPUT_MESSAGE = "Please enter a valid number"

# Sample inputs for the reference table, per label
REFERENCE_VALUES = {
    "Length": [1, 100, 500, 1000, 5000, 10000, 42195],
    "Weight": [1, 100, 250, 500, 1000, 2500, 5000],
    "Temperature": [-40, -10, 0, 20, 37, 100, 200],
}
