"""Splitting CSV text into rows and fields."""

from __future__ import annotations

from typing import Iterator, List, TextIO

_QUOTE = '"'


def _check_delim(delim: str) -> str:
    if not isinstance(delim, str) or len(delim) != 1:
        raise ValueError("delimiter must be a single character")
    return delim


def parse_csv_line(line: str, delim: str = ",") -> List[str]:
    """Split one logical CSV line into its fields.

    Quoted fields may hold the delimiter, newlines and doubled quotes
    (``""`` stands for a literal ``"``). Spaces around fields are kept.
    A line ending in the delimiter gets a trailing empty field.
    """
    _check_delim(delim)
    fields: List[str] = []
    pos, end = 0, len(line)

    while pos < end:
        field: List[str] = []
        quoted = line[pos] == _QUOTE
        if quoted:
            pos += 1

        while pos < end:
            ch = line[pos]
            if quoted:
                if ch == _QUOTE:
                    if pos + 1 < end and line[pos + 1] == _QUOTE:
                        field.append(_QUOTE)
                        pos += 2
                        continue
                    pos += 1
                    break
                field.append(ch)
            elif ch == delim:
                pos += 1
                break
            else:
                field.append(ch)
            pos += 1

        fields.append("".join(field))

        if quoted and pos < end and line[pos] == delim:
            pos += 1

    if line.endswith(delim):
        fields.append("")

    return fields


class CsvReader:
    """Stream rows from a text stream one at a time.

    Carriage returns are dropped everywhere, and a newline inside a
    quoted field does not end the row.
    """

    def __init__(self, stream: TextIO, delim: str = ",") -> None:
        self._stream = stream
        self._delim = _check_delim(delim)

    def __iter__(self) -> Iterator[List[str]]:
        return self

    def __next__(self) -> List[str]:
        chars: List[str] = []
        in_quotes = False
        at_eof = True

        while ch := self._stream.read(1):
            if ch == "\r":
                continue
            if ch == _QUOTE:
                in_quotes = not in_quotes
            if ch == "\n" and not in_quotes:
                at_eof = False
                break
            chars.append(ch)

        if at_eof and not chars:
            raise StopIteration
        return parse_csv_line("".join(chars), self._delim)