"""An in-memory CSV table addressed by header name."""

from __future__ import annotations

from typing import Dict, List, TextIO

from zoomcsv.reader import CsvReader


class CsvTable:
    """Load a whole CSV stream; the first row names the columns."""

    def __init__(self, stream: TextIO, delim: str = ",") -> None:
        reader = CsvReader(stream, delim)
        try:
            self._header: List[str] = next(reader)
        except StopIteration:
            raise ValueError("CSV: empty input") from None
        self._index: Dict[str, int] = {name: i for i, name in enumerate(self._header)}
        self._rows: List[List[str]] = list(reader)

    def row_count(self) -> int:
        """Number of data rows, not counting the header."""
        return len(self._rows)

    def col_count(self) -> int:
        """Number of columns in the header."""
        return len(self._header)

    def header(self) -> List[str]:
        """The column names, in file order."""
        return list(self._header)

    def cell(self, column: str, row: int) -> str:
        """Value of ``column`` in data row ``row``; empty if the row is short.

        Raises KeyError for an unknown column and IndexError for a row
        outside the table.
        """
        try:
            col = self._index[column]
        except KeyError:
            raise KeyError(f"CSV: unknown column {column!r}") from None
        if not 0 <= row < len(self._rows):
            raise IndexError("CSV: row out of range")
        values = self._rows[row]
        return values[col] if col < len(values) else ""