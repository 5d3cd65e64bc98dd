"""Command-line interface for the unit converter."""

import argparse
import logging
import sys

from unit_converter.config import DEFAULT_CONVERSION_LABEL, LOG_LEVEL
from unit_converter.converters import conversion_labels, resolve_strategy
from unit_converter.reference import conversion_table, format_table
from unit_converter.service import run_conversion


# --- Command handlers ---

def cmd_convert(args):
    result = run_conversion(args.value, args.type)
    print(result.display_text())
    if not result.ok:
        sys.exit(1)


def cmd_types(args):
    for label in conversion_labels():
        strategy = resolve_strategy(label)
        print(f"{label:<12}  {strategy.description}")


def cmd_table(args):
    strategy = resolve_strategy(args.type)
    print(f"{strategy.kind.label}: {strategy.description}\n")
    print(format_table(conversion_table(strategy.kind)))


# --- Argument parser ---

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unit_converter",
        description="Unit Converter - meters to km, grams to kg, Celsius to Fahrenheit",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- convert ---
    convert_p = subparsers.add_parser("convert", help="Convert a value")
    convert_p.add_argument("value", help="Value to convert (use -- before negative exponents)")
    convert_p.add_argument("--type", default=DEFAULT_CONVERSION_LABEL,
                           help=f"Conversion type: {', '.join(conversion_labels())} "
                                f"(default: {DEFAULT_CONVERSION_LABEL})")
    convert_p.set_defaults(func=cmd_convert)

    # --- types ---
    types_p = subparsers.add_parser("types", help="List conversion types")
    types_p.set_defaults(func=cmd_types)

    # --- table ---
    table_p = subparsers.add_parser("table", help="Show a reference table")
    table_p.add_argument("--type", default=DEFAULT_CONVERSION_LABEL,
                         help=f"Conversion type (default: {DEFAULT_CONVERSION_LABEL})")
    table_p.set_defaults(func=cmd_table)

    return parser


def main(argv=None):
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    args.func(args)
