"""
Table renderer with dash and pipe borders.

This module turns headers, rows and resolved column widths into the text
layout of a table and writes it to a sink line by line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Protocol

from .cells import ColumnSpec, format_cell
from .exceptions import SinkError
from .sizing import total_width

logger = logging.getLogger(__name__)

HORIZONTAL = "-"
VERTICAL = "|"


class Sink(Protocol):
    """Anything accepting sequential text writes (files, StringIO, sys.stdout)."""

    def write(self, text: str, /) -> Any: ...


def center_header(header: str, width: int) -> str:
    """Center ``header`` in ``width`` columns, extra slack going to the right.

    The left pad is ``width // 2 - len(header) // 2``, clamped at zero. A
    header wider than its column is emitted whole rather than truncated.
    """
    pad = width // 2 - len(header) // 2
    if pad < 0:
        logger.warning(
            "Header %r is wider than its column (%d > %d); left padding clamped to zero",
            header,
            len(header),
            width,
        )
        pad = 0
    return (" " * pad + header).ljust(width)


class TableRenderer:
    """Render rows as a bordered table.

    Example output:
        -------------------------
        |Name|Weight|Age|Brother|
        -------------------------
        |Fred| 193.4| 35|Sam    |
        -------------------------
    """

    def __init__(self, columns: Sequence[ColumnSpec]) -> None:
        """Initialize the table renderer.

        Args:
            columns: Resolved column schema; fixes the justification of each column
        """
        self._columns = tuple(columns)

    def rule(self, widths: Sequence[int]) -> str:
        return HORIZONTAL * total_width(widths)

    def header_line(self, headers: Sequence[str], widths: Sequence[int]) -> str:
        cells = [center_header(h, w) for h, w in zip(headers, widths)]
        return VERTICAL + "".join(c + VERTICAL for c in cells)

    def row_line(self, row: Sequence[Any], widths: Sequence[int]) -> str:
        cells = [
            spec.justify.apply(format_cell(value), w)
            for spec, value, w in zip(self._columns, row, widths)
        ]
        return VERTICAL + "".join(c + VERTICAL for c in cells)

    def lines(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[Any]],
        widths: Sequence[int],
    ) -> Iterator[str]:
        """Yield every output line, without trailing newlines.

        Args:
            headers: Column header names
            rows: Rows to render, in order
            widths: Resolved column widths

        Yields:
            Top rule, header line, middle rule, one line per row, bottom rule
        """
        separator = self.rule(widths)
        yield separator
        yield self.header_line(headers, widths)
        yield separator
        for row in rows:
            yield self.row_line(row, widths)
        yield separator

    def render(
        self,
        headers: Sequence[str],
        rows: Iterable[Sequence[Any]],
        widths: Sequence[int],
        sink: Sink,
    ) -> None:
        """Write the table to ``sink``.

        Raises:
            SinkError: If the sink fails a write. Lines written before the
                failure are left in the sink.
        """
        written = 0
        for line in self.lines(headers, rows, widths):
            try:
                sink.write(line + "\n")
            except (OSError, ValueError) as e:
                raise SinkError("Failed to write table to sink", e, lines_written=written) from e
            written += 1
        logger.debug("Rendered %d lines", written)
