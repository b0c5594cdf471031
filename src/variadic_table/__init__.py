"""
variadic-table: Pretty-print tables of heterogeneous, column-typed data.

Columns are declared with Python types. Numeric columns are right-justified,
everything else left-justified, headers are centered, and every column is
sized to fit its header and its widest cell.

Example:
    from variadic_table import VariadicTable

    table = VariadicTable([str, float, int, str], ["Name", "Weight", "Age", "Brother"])
    table.add_row(("Fred", 193.4, 35, "Sam"))
    table.add_row(("Billy", 89.2, 24, "Grant"))
    table.render()

Output:
    --------------------------
    |Name |Weight|Age|Brother|
    --------------------------
    |Fred | 193.4| 35|Sam    |
    |Billy|  89.2| 24|Grant  |
    --------------------------
"""

from .cells import ColumnSpec, Justify, format_cell
from .config import (
    DEFAULT_STATIC_COLUMN_SIZE,
    STATIC_COLUMN_SIZE_ENV_VAR,
    TableConfig,
)
from .exceptions import (
    ConfigurationError,
    RowError,
    SinkError,
    VariadicTableError,
)
from .rendering import TableRenderer
from .sizing import resolve_widths
from .table import VariadicTable, new_table

__version__ = "0.1.0"

__all__ = [
    # Table
    "VariadicTable",
    "new_table",
    # Components
    "ColumnSpec",
    "Justify",
    "TableRenderer",
    "format_cell",
    "resolve_widths",
    # Config
    "TableConfig",
    "DEFAULT_STATIC_COLUMN_SIZE",
    "STATIC_COLUMN_SIZE_ENV_VAR",
    # Exceptions
    "VariadicTableError",
    "ConfigurationError",
    "RowError",
    "SinkError",
]
