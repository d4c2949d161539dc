"""Splitting of single feed lines into fields."""
from __future__ import annotations

from typing import List

QUOTE = '"'


def split_line(line: str, delimiter: str = ",") -> List[str]:
    """Split ``line`` on ``delimiter`` outside of double-quoted spans.

    Quotes only toggle the quoted state and are dropped from the output.
    An unterminated quote swallows the rest of the line into the last field.
    The result always holds at least one (possibly empty) field.
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == delimiter and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields
