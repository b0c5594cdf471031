"""Cell formatting and the per-column schema.

Each declared column type is resolved once into a ``ColumnSpec`` that fixes
the column's justification and whether its values have a natural printed
length. Individual cells are never inspected to choose either property.
"""

from __future__ import annotations

import numbers
from collections.abc import Sized
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .exceptions import ConfigurationError

# Declared type -> extra types accepted for it (numeric tower widening)
_WIDENING: dict[type, tuple[type, ...]] = {
    float: (int,),
    complex: (int, float),
}


class Justify(Enum):
    """Alignment of a cell's text within its column width."""

    LEFT = "l"
    RIGHT = "r"

    def apply(self, text: str, width: int) -> str:
        """Pad ``text`` with spaces to ``width`` on the appropriate side."""
        if self is Justify.RIGHT:
            return text.rjust(width)
        return text.ljust(width)


def justify_for(column_type: type) -> Justify:
    """Arithmetic types are right-justified, everything else left-justified."""
    if issubclass(column_type, numbers.Number):
        return Justify.RIGHT
    return Justify.LEFT


def has_natural_length(column_type: type) -> bool:
    """Whether values of ``column_type`` expose a length (``__len__``).

    Only the class and its bases count; a metaclass ``__len__`` (``EnumMeta``)
    describes the class, not its members.
    """
    return issubclass(column_type, Sized)


def format_cell(value: Any) -> str:
    """Textual form of a cell: the value's standard ``str()`` conversion."""
    return str(value)


@dataclass(frozen=True)
class ColumnSpec:
    """
    Resolved description of one column.

    Attributes:
        type: The declared Python type of the column's values
        justify: Alignment used for every cell in the column
        sized: True if the type has a natural printed length
    """

    type: type
    justify: Justify
    sized: bool

    @classmethod
    def from_type(cls, column_type: Any) -> ColumnSpec:
        """Resolve a declared column type into its spec."""
        if not isinstance(column_type, type):
            raise ConfigurationError(
                "column_types",
                column_type,
                f"Column types must be classes, got {column_type!r}",
            )
        return cls(
            type=column_type,
            justify=justify_for(column_type),
            sized=has_natural_length(column_type),
        )

    @property
    def name(self) -> str:
        return self.type.__name__

    def accepts(self, value: Any) -> bool:
        """Check whether ``value`` conforms to this column's declared type."""
        # bool is an int subclass but only belongs in bool (or object) columns
        if isinstance(value, bool) and self.type not in (bool, object):
            return False
        if isinstance(value, self.type):
            return True
        return isinstance(value, _WIDENING.get(self.type, ()))

    def measure(self, value: Any, static_column_size: int) -> int:
        """
        Printed length of ``value`` in this column.

        Sized kinds report the length of their text. Kinds without a natural
        length reserve at least ``static_column_size`` columns.
        """
        length = len(format_cell(value))
        if self.sized:
            return length
        return max(static_column_size, length)


def resolve_columns(column_types: Any) -> tuple[ColumnSpec, ...]:
    """
    Build the column schema from a sequence of declared types.

    Raises:
        ConfigurationError: If the sequence is empty or holds a non-type
    """
    if isinstance(column_types, (str, bytes)):
        raise ConfigurationError(
            "column_types",
            column_types,
            "Must be a sequence of types, not a string",
        )
    specs = tuple(ColumnSpec.from_type(t) for t in column_types)
    if not specs:
        raise ConfigurationError("column_types", column_types, "At least one column is required")
    return specs
