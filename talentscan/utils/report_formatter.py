"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for analysis reports.
"""

from typing import Any, Iterable, List


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<"):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
        """
        self.name = name
        self.width = width
        self.align = align

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        return f"{str(value):{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text reports with aligned table columns."""

    def __init__(self, columns: List[Column] = None, total_width: int = 72):
        """
        Args:
            columns: Column definitions for the current table (can be swapped with set_columns)
            total_width: Total report width for separators
        """
        self.columns = columns or []
        self.total_width = total_width
        self.lines: List[str] = []

    def set_columns(self, columns: List[Column]) -> "TableFormatter":
        """Switch to a new set of columns for the next table in the report."""
        self.columns = columns
        return self

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_subheader(self, title: str) -> "TableFormatter":
        """Add a title underlined with dashes."""
        self.lines.append(title)
        self.lines.append("-" * len(title))
        return self

    def add_table_header(self) -> "TableFormatter":
        header_parts = [col.format_header() for col in self.columns]
        self.lines.append(" ".join(header_parts).rstrip())
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_key_value(self, key: str, value: Any, key_width: int = 28) -> "TableFormatter":
        """Add a 'Key: value' line with the key padded to a fixed width."""
        self.lines.append(f"{key + ':':<{key_width}} {value}")
        return self

    def add_numbered_list(self, items: Iterable[str], indent: int = 2) -> "TableFormatter":
        """Add items as a 1-based numbered list."""
        for i, item in enumerate(items, 1):
            self.lines.append(f"{' ' * indent}{i}. {item}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)
