"""Detecting and skipping byte-order marks."""

from __future__ import annotations

import codecs
from typing import IO, Union

_TEXT_BOM = "\ufeff"
_BYTE_BOMS = (codecs.BOM_UTF8, codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)


def skip_bom(stream: IO) -> Union[bytes, str]:
    """Consume a UTF-8 or UTF-16 byte-order mark at the stream's position.

    Returns the mark that was skipped, or an empty value when there was
    none; in that case the stream is left where it was.
    """
    start = stream.tell()
    head = stream.read(1)
    if not head:
        return head

    if isinstance(head, str):
        if head == _TEXT_BOM:
            return head
        stream.seek(start)
        return ""

    first = head[0]
    if first == 0xEF:
        candidate = head + stream.read(2)
        if candidate == codecs.BOM_UTF8:
            return candidate
    elif first in (0xFE, 0xFF):
        candidate = head + stream.read(1)
        if candidate in (codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE):
            return candidate

    stream.seek(start)
    return b""


def strip_bom(data: Union[bytes, str]) -> Union[bytes, str]:
    """Return ``data`` without a leading byte-order mark."""
    if isinstance(data, str):
        return data[1:] if data.startswith(_TEXT_BOM) else data
    for bom in _BYTE_BOMS:
        if data.startswith(bom):
            return data[len(bom):]
    return data