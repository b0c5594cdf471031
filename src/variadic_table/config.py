"""Table configuration.

The only tunable is the static column size: the width reserved for columns
whose type has no natural printed length (numbers, dates, user objects).
"""

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

DEFAULT_STATIC_COLUMN_SIZE = 0
"""Fallback width used when neither an argument nor the env var is given."""

STATIC_COLUMN_SIZE_ENV_VAR = "VARIADIC_TABLE_STATIC_COLUMN_SIZE"
"""Environment variable for overriding the default static column size."""


def validate_static_column_size(value: object) -> int:
    """
    Validate a static column size.

    Args:
        value: The user-provided width

    Returns:
        The width as an int

    Raises:
        ConfigurationError: If the width is not a non-negative integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(
            "static_column_size",
            value,
            f"Must be an integer, got {type(value).__name__}",
        )
    if value < 0:
        raise ConfigurationError(
            "static_column_size",
            value,
            "Must be non-negative",
        )
    return value


def resolve_static_column_size(static_column_size: int | None = None) -> int:
    """Resolve the static column size from explicit arg, env var, or default.

    Resolution order: ``static_column_size`` arg → ``VARIADIC_TABLE_STATIC_COLUMN_SIZE``
    env var → ``0``.

    Args:
        static_column_size: Explicit width, or ``None`` to use env/default.

    Returns:
        Validated static column size.

    Raises:
        ConfigurationError: If the argument or env var is not a non-negative integer
    """
    if static_column_size is not None:
        return validate_static_column_size(static_column_size)

    raw = os.environ.get(STATIC_COLUMN_SIZE_ENV_VAR)
    if raw is None or not raw.strip():
        return DEFAULT_STATIC_COLUMN_SIZE

    try:
        parsed = int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            STATIC_COLUMN_SIZE_ENV_VAR,
            raw,
            "Must be an integer",
        ) from None
    return validate_static_column_size(parsed)


@dataclass(frozen=True)
class TableConfig:
    """
    Rendering configuration shared by the sizer and renderer.

    Attributes:
        static_column_size: Minimum width for columns without a natural length
    """

    static_column_size: int = DEFAULT_STATIC_COLUMN_SIZE

    def __post_init__(self) -> None:
        validate_static_column_size(self.static_column_size)

    @classmethod
    def from_env(cls, static_column_size: int | None = None) -> "TableConfig":
        """Create a config, falling back to the environment for unset values."""
        return cls(static_column_size=resolve_static_column_size(static_column_size))
