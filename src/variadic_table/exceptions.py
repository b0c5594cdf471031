"""Exceptions for variadic-table."""

from typing import Any

# ---------------------------------------------------------------------------
# Base Exception
# ---------------------------------------------------------------------------


class VariadicTableError(Exception):
    """
    Base exception for all variadic-table errors.

    All exceptions raised by this library inherit from this class,
    allowing callers to catch all library-specific errors with a single
    except clause.
    """

    pass


# ---------------------------------------------------------------------------
# Configuration Exceptions
# ---------------------------------------------------------------------------


class ConfigurationError(VariadicTableError):
    """
    Raised when a table cannot be constructed from the given configuration.

    A table that fails construction is never usable: the headers, column
    types and fallback width are all checked before the table exists.

    Attributes:
        field: Name of the offending argument (e.g. "headers")
        value: The rejected value
        reason: Human-readable explanation
    """

    def __init__(self, field: str, value: Any, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")


# ---------------------------------------------------------------------------
# Row Exceptions
# ---------------------------------------------------------------------------


class RowError(VariadicTableError):
    """
    Raised when an appended row does not match the column schema.

    The row store is left unchanged when this is raised.

    Attributes:
        row_index: Position the row would have taken in the row store
        reason: Human-readable explanation
        column: Offending column index, if the problem is a single cell
    """

    def __init__(self, row_index: int, reason: str, column: int | None = None) -> None:
        self.row_index = row_index
        self.reason = reason
        self.column = column
        location = f"row {row_index}"
        if column is not None:
            location += f", column {column}"
        super().__init__(f"Rejected {location}: {reason}")


# ---------------------------------------------------------------------------
# Output Exceptions
# ---------------------------------------------------------------------------


class SinkError(VariadicTableError, OSError):
    """
    Raised when the output sink fails a write during render.

    Output already written before the failure stays in the sink.
    Subclasses OSError so callers handling I/O errors still catch it.

    Attributes:
        cause: The exception raised by the sink
        lines_written: Number of complete lines written before the failure
    """

    def __init__(
        self,
        message: str,
        cause: Exception | None = None,
        *,
        lines_written: int = 0,
    ) -> None:
        self.cause = cause
        self.lines_written = lines_written
        super().__init__(self._format_message(message))

    def _format_message(self, message: str) -> str:
        parts = [message]
        if self.cause is not None:
            parts.append(f"({type(self.cause).__name__}: {self.cause})")
        parts.append(f"[lines_written={self.lines_written}]")
        return " ".join(parts)
