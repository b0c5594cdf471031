"""Shared fixtures for variadic-table unit tests."""

import pytest

from variadic_table import STATIC_COLUMN_SIZE_ENV_VAR, VariadicTable


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's environment from changing the fallback width."""
    monkeypatch.delenv(STATIC_COLUMN_SIZE_ENV_VAR, raising=False)


@pytest.fixture
def family_table() -> VariadicTable:
    """Table with one row of mixed text and numeric columns."""
    table = VariadicTable([str, float, int, str], ["Name", "Weight", "Age", "Brother"])
    table.add_row(("Fred", 193.4, 35, "Sam"))
    return table


class FailingSink:
    """Sink that accepts ``ok_writes`` writes and then raises ``error``."""

    def __init__(self, ok_writes: int, error: Exception | None = None) -> None:
        self.ok_writes = ok_writes
        self.error = error or OSError(28, "No space left on device")
        self.written: list[str] = []

    def write(self, text: str) -> int:
        if len(self.written) >= self.ok_writes:
            raise self.error
        self.written.append(text)
        return len(text)


@pytest.fixture
def failing_sink():
    """Factory for sinks that fail after a number of writes."""
    return FailingSink
