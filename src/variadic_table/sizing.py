"""Column width resolution.

Widths are derived from the headers and every stored row on each call and
are never cached, so a render always reflects the current row store.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from .cells import ColumnSpec


def resolve_widths(
    headers: Sequence[str],
    rows: Iterable[Sequence[Any]],
    columns: Sequence[ColumnSpec],
    static_column_size: int = 0,
) -> list[int]:
    """
    Compute the display width of each column.

    Each width starts at its header length and grows to the widest printed
    cell in that column. Columns whose type has no natural length measure
    at least ``static_column_size`` per cell.

    Args:
        headers: Column header names
        rows: Stored rows, each holding one value per column
        columns: Resolved column schema
        static_column_size: Fallback width for columns without a natural length

    Returns:
        One non-negative width per column
    """
    widths = [len(h) for h in headers]
    for row in rows:
        for i, (spec, value) in enumerate(zip(columns, row)):
            widths[i] = max(widths[i], spec.measure(value, static_column_size))
    return widths


def total_width(widths: Sequence[int]) -> int:
    """Width of a border line: one separator per column plus a trailing one."""
    return len(widths) + 1 + sum(widths)
