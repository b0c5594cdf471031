"""Tests for column width resolution."""

from enum import Enum

from variadic_table.cells import resolve_columns
from variadic_table.sizing import resolve_widths, total_width


class TestResolveWidths:
    """Tests for resolve_widths."""

    def test_zero_rows_uses_header_lengths(self) -> None:
        """With no rows each width is its header length."""
        columns = resolve_columns([str, int])
        assert resolve_widths(["Name", "Age"], [], columns) == [4, 3]

    def test_example_widths(self) -> None:
        """Cells no wider than their headers keep the header widths."""
        columns = resolve_columns([str, float, int, str])
        headers = ["Name", "Weight", "Age", "Brother"]
        rows = [("Fred", 193.4, 35, "Sam")]
        assert resolve_widths(headers, rows, columns) == [4, 6, 3, 7]

    def test_wide_text_cell_grows_column(self) -> None:
        """A text cell wider than its header widens the column."""
        columns = resolve_columns([str])
        rows = [("Short",), ("A much longer description",)]
        assert resolve_widths(["ID"], rows, columns) == [25]

    def test_wide_number_grows_column(self) -> None:
        """A number wider than its header widens the column."""
        columns = resolve_columns([int])
        assert resolve_widths(["N"], [(1234567,)], columns) == [7]

    def test_empty_text_never_shrinks_below_header(self) -> None:
        """Empty cells leave the header length in place."""
        columns = resolve_columns([str])
        assert resolve_widths(["Brother"], [("",)], columns) == [7]

    def test_static_fallback_applies_to_unsized_columns(self) -> None:
        """Columns without a natural length reserve the fallback width."""
        columns = resolve_columns([str, int])
        widths = resolve_widths(["A", "B"], [("x", 5)], columns, static_column_size=10)
        assert widths == [1, 10]

    def test_static_fallback_applies_to_enum_columns(self) -> None:
        """Enum members have no natural length, so the fallback widens them."""

        class Color(Enum):
            RED = 1

        columns = resolve_columns([Color, int])
        widths = resolve_widths(["C", "N"], [(Color.RED, 1)], columns, static_column_size=12)
        assert widths == [12, 12]

    def test_static_fallback_unused_without_rows(self) -> None:
        """The fallback only comes from cells, never from headers."""
        columns = resolve_columns([int])
        assert resolve_widths(["B"], [], columns, static_column_size=10) == [1]

    def test_max_over_all_rows(self) -> None:
        """Each column takes the maximum over every row."""
        columns = resolve_columns([str, int])
        rows = [("a", 1), ("abcdef", 22), ("abc", 333333)]
        assert resolve_widths(["K", "V"], rows, columns) == [6, 6]

    def test_deterministic(self) -> None:
        """Repeated resolution gives identical widths."""
        columns = resolve_columns([str, float])
        rows = [("x", 1.25), ("yy", 10.5)]
        first = resolve_widths(["A", "B"], rows, columns)
        assert resolve_widths(["A", "B"], rows, columns) == first

    def test_accepts_generator_rows(self) -> None:
        """Rows may be any iterable."""
        columns = resolve_columns([str])
        rows = (("x" * n,) for n in range(1, 4))
        assert resolve_widths(["H"], rows, columns) == [3]


class TestTotalWidth:
    """Tests for total_width."""

    def test_separators_plus_widths(self) -> None:
        """N + 1 separators plus the sum of widths."""
        assert total_width([4, 6, 3, 7]) == 25

    def test_zero_width_columns(self) -> None:
        """Zero-width columns still get their separators."""
        assert total_width([0, 0]) == 3
