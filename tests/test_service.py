"""Tests for the conversion pipeline."""

import unittest
from unittest import mock

from unit_converter.models import ConversionKind, ConversionRequest
from unit_converter.service import (
    convert_request,
    convert_value,
    format_result,
    run_conversion,
)


class TestRunConversion(unittest.TestCase):
    def test_length(self):
        result = run_conversion("2000", "Length")
        self.assertTrue(result.ok)
        self.assertEqual(result.value, 2.0)
        self.assertEqual(result.display_text(), "Converted Value: 2.0")

    def test_weight(self):
        result = run_conversion("5000", "Weight")
        self.assertEqual(result.value, 5.0)
        self.assertEqual(result.display_text(), "Converted Value: 5.0")

    def test_temperature_freezing(self):
        result = run_conversion("0", "Temperature")
        self.assertEqual(result.value, 32.0)
        self.assertEqual(result.display_text(), "Converted Value: 32.0")

    def test_temperature_boiling(self):
        result = run_conversion("100", "Temperature")
        self.assertEqual(result.value, 212.0)
        self.assertEqual(result.display_text(), "Converted Value: 212.0")

    def test_invalid_input_message(self):
        result = run_conversion("abc", "Temperature")
        self.assertFalse(result.ok)
        self.assertEqual(result.display_text(), "Please enter a valid number")

    def test_empty_input_message(self):
        result = run_conversion("", "Length")
        self.assertEqual(result.display_text(), "Please enter a valid number")

    def test_invalid_input_never_reaches_a_strategy(self):
        with mock.patch("unit_converter.service.resolve_strategy") as resolve, \
                mock.patch("unit_converter.service.get_strategy") as get:
            result = run_conversion("abc", "Length")
        resolve.assert_not_called()
        get.assert_not_called()
        self.assertFalse(result.ok)

    def test_unknown_label_converts_as_length(self):
        result = run_conversion("2000", "Weightx")
        self.assertEqual(result.value, 2.0)

    def test_lowercase_label_converts_as_length(self):
        # 100 m -> 0.1 km, not 212 F
        result = run_conversion("100", "temperature")
        self.assertEqual(result.value, 0.1)


class TestConvertValue(unittest.TestCase):
    def test_known_labels(self):
        self.assertEqual(convert_value(2000, "Length"), 2.0)
        self.assertEqual(convert_value(5000, "Weight"), 5.0)
        self.assertEqual(convert_value(100, "Temperature"), 212.0)

    def test_fallback(self):
        self.assertEqual(convert_value(1500, ""), 1.5)


class TestConvertRequest(unittest.TestCase):
    def test_request(self):
        result = convert_request(ConversionRequest(value=-40.0, kind=ConversionKind.TEMPERATURE))
        self.assertEqual(result.value, -40.0)


class TestFormatResult(unittest.TestCase):
    def test_prefix(self):
        self.assertEqual(format_result(2.0), "Converted Value: 2.0")

    def test_no_fixed_precision(self):
        self.assertEqual(format_result(1.2345), "Converted Value: 1.2345")
        self.assertEqual(format_result(98.60000000000001), "Converted Value: 98.60000000000001")


if __name__ == "__main__":
    unittest.main()
