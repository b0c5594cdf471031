#!/usr/bin/env python3
"""
Basic Table Example

Demonstrates the core variadic-table API.

Run this example:
    uv run python examples/basic_table.py

Set VARIADIC_TABLE_STATIC_COLUMN_SIZE to reserve a minimum width for
numeric columns:
    VARIADIC_TABLE_STATIC_COLUMN_SIZE=10 uv run python examples/basic_table.py
"""

import logging
import sys
from decimal import Decimal

from variadic_table import ConfigurationError, RowError, VariadicTable


def main() -> None:
    """Build and print a small table."""
    print("=== Family ===\n")

    table = VariadicTable([str, float, int, str], ["Name", "Weight", "Age", "Brother"])
    table.add_row(("Fred", 193.4, 35, "Sam"))
    table.add_row(("Billy", 89.2, 24, "Grant"))
    table.add_row(("Santiago", 211, 54, "Bob"))  # int widens into the float column
    table.render()

    print("\n=== Prices (rendered to a string) ===\n")

    prices = VariadicTable([str, Decimal, int], ["Item", "Price", "Qty"])
    prices.add_rows(
        [
            ("Widget", Decimal("4.99"), 3),
            ("Gadget with a long name", Decimal("129.00"), 1),
        ]
    )
    print(prices.render_to_string(), end="")

    print("\n=== Misuse ===\n")

    try:
        VariadicTable([str, int], ["Only one header"])
    except ConfigurationError as e:
        print(f"Construction failed: {e}")

    try:
        table.add_row(("Wilma", "heavy", 33, "None"))
    except RowError as e:
        print(f"Row rejected: {e}")


if __name__ == "__main__":
    if "-v" in sys.argv:
        logging.basicConfig(level=logging.DEBUG)
    main()
