"""The table façade: column schema, headers and the append-only row store."""

from __future__ import annotations

import io
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import Any

from .cells import ColumnSpec, resolve_columns
from .config import TableConfig
from .exceptions import ConfigurationError, RowError
from .rendering import Sink, TableRenderer
from .sizing import resolve_widths

logger = logging.getLogger(__name__)


class VariadicTable:
    """
    A pretty-printed table of heterogeneous, column-typed rows.

    Every value in a column has the column's declared type. Numeric columns
    are right-justified, all others left-justified, and headers are centered.

    Example:
        table = VariadicTable([str, float, int, str], ["Name", "Weight", "Age", "Brother"])
        table.add_row(("Fred", 193.4, 35, "Sam"))
        table.render()

    Args:
        column_types: One Python type per column
        headers: One display name per column
        static_column_size: Minimum width for columns whose type has no natural
            length. ``None`` reads ``VARIADIC_TABLE_STATIC_COLUMN_SIZE`` when it is
            set and falls back to 0 only when it is unset or blank. A malformed
            value in the variable fails construction.

    Raises:
        ConfigurationError: If the header count differs from the column count,
            a header is not a string, a column type is not a class, or the
            static column size is invalid
    """

    def __init__(
        self,
        column_types: Sequence[type],
        headers: Sequence[str],
        static_column_size: int | None = None,
    ) -> None:
        columns = resolve_columns(column_types)
        if isinstance(headers, str):
            raise ConfigurationError(
                "headers", headers, "Must be a sequence of strings, not a string"
            )
        headers = tuple(headers)
        if len(headers) != len(columns):
            raise ConfigurationError(
                "headers",
                headers,
                f"Number of headers ({len(headers)}) must match "
                f"number of columns ({len(columns)})",
            )
        for header in headers:
            if not isinstance(header, str):
                raise ConfigurationError(
                    "headers",
                    headers,
                    f"Headers must be strings, got {type(header).__name__}",
                )

        self._config = TableConfig.from_env(static_column_size)
        self._columns = columns
        self._headers = headers
        self._rows: list[tuple[Any, ...]] = []
        self._renderer = TableRenderer(columns)
        logger.debug(
            "Created table with %d columns (%s)",
            len(columns),
            ", ".join(c.name for c in columns),
        )

    @property
    def headers(self) -> tuple[str, ...]:
        return self._headers

    @property
    def columns(self) -> tuple[ColumnSpec, ...]:
        return self._columns

    @property
    def num_columns(self) -> int:
        return len(self._columns)

    @property
    def static_column_size(self) -> int:
        return self._config.static_column_size

    @property
    def rows(self) -> tuple[tuple[Any, ...], ...]:
        """Snapshot of the stored rows, in insertion order."""
        return tuple(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def _check_row(self, row: Sequence[Any], index: int) -> tuple[Any, ...]:
        if isinstance(row, (str, bytes)):
            raise RowError(index, "Row must be a sequence of values, not a string")
        try:
            values = tuple(row)
        except TypeError:
            raise RowError(index, f"Row must be a sequence, got {type(row).__name__}") from None
        if len(values) != len(self._columns):
            raise RowError(
                index,
                f"Expected {len(self._columns)} values, got {len(values)}",
            )
        for i, (spec, value) in enumerate(zip(self._columns, values)):
            if not spec.accepts(value):
                raise RowError(
                    index,
                    f"Expected {spec.name}, got {type(value).__name__} ({value!r})",
                    column=i,
                )
        return values

    def add_row(self, row: Sequence[Any]) -> None:
        """
        Append one row.

        Args:
            row: One value per column, each an instance of its column's type

        Raises:
            RowError: If the arity or a value's type does not match the schema
        """
        self._rows.append(self._check_row(row, len(self._rows)))

    def add_rows(self, rows: Iterable[Sequence[Any]]) -> None:
        """Append several rows. Nothing is appended if any row is rejected."""
        start = len(self._rows)
        checked = [self._check_row(row, start + n) for n, row in enumerate(rows)]
        self._rows.extend(checked)

    def column_widths(self) -> list[int]:
        """Resolve the current width of every column."""
        return resolve_widths(
            self._headers,
            self._rows,
            self._columns,
            self._config.static_column_size,
        )

    def render(self, sink: Sink | None = None) -> None:
        """
        Write the table to ``sink`` (``sys.stdout`` when omitted).

        Raises:
            SinkError: If the sink fails a write
        """
        if sink is None:
            sink = sys.stdout
        widths = self.column_widths()
        logger.debug("Rendering %d rows with column widths %s", len(self._rows), widths)
        self._renderer.render(self._headers, self._rows, widths, sink)

    def render_to_string(self) -> str:
        """Render the table and return the text."""
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()

    def __str__(self) -> str:
        return self.render_to_string()

    def __repr__(self) -> str:
        return (
            f"VariadicTable(columns=[{', '.join(c.name for c in self._columns)}], "
            f"headers={list(self._headers)!r}, rows={len(self._rows)})"
        )


def new_table(
    column_types: Sequence[type],
    headers: Sequence[str],
    static_column_size: int | None = None,
) -> VariadicTable:
    """
    Create a table.

    Equivalent to ``VariadicTable(column_types, headers, static_column_size)``.

    Raises:
        ConfigurationError: If the table cannot be constructed
    """
    return VariadicTable(column_types, headers, static_column_size)
