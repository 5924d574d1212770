"""
Line-oriented text format for the DB file.

Each entry is one line, `<key>:<value>\n`. The first `:` on a line is the
separator, so values may contain `:` but keys never do. There is no header and
no escaping; an empty file is an empty DB.
"""

from __future__ import annotations

from typing import Mapping

from .errors import FormatError
from .models import KEY_VALUE_SEP, Entry, is_valid_key

__all__ = ["KEY_VALUE_SEP", "decode", "encode", "is_valid_key"]


def decode(text: str) -> dict[str, str]:
    """
    Parse file content into a key -> value mapping.

    Empty lines are skipped. A repeated key does not fail: the later line
    overwrites the earlier one. Any malformed line fails the whole decode.
    """
    data: dict[str, str] = {}
    for line_no, line in enumerate(text.split("\n"), start=1):
        if not line:
            continue
        try:
            entry = Entry.from_line(line)
        except ValueError as e:
            raise FormatError(f"line {line_no}: format is not correct", line_no=line_no) from e
        data[entry.key] = entry.value
    return data


def encode(data: Mapping[str, str]) -> str:
    """
    Serialize a mapping to file content. Line order is unspecified.

    Raises FormatError for an entry that would not decode back: a key outside
    [A-Za-z0-9_-] or a value holding a newline.
    """
    try:
        return "".join(Entry(key=k, value=v).to_line() for k, v in data.items())
    except ValueError as e:
        raise FormatError("entry cannot be written in the line format") from e
