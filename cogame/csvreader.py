"""Reading cells out of simple CSV files."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterator, Optional, Union

_BOM = "\ufeff"
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def _physical_lines(text: str) -> Iterator[str]:
    lines = text.replace("\r\n", "\n").split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return iter(lines)


def _strip_quotes(line: str) -> str:
    """Drop quote characters; the character after a dropped quote is kept as is.

    This turns a doubled quote into a single literal one.
    """
    out = []
    chars = iter(line)
    for ch in chars:
        if ch == '"':
            following = next(chars, None)
            if following is not None:
                out.append(following)
        else:
            out.append(ch)
    return "".join(out)


def _split_fields(line: str) -> list[str]:
    fields = []
    current = []
    in_quotes = False
    for ch in line:
        if ch == "," and not in_quotes:
            fields.append("".join(current))
            current = []
            continue
        if ch == '"':
            in_quotes = not in_quotes
        current.append(ch)
    fields.append("".join(current))
    return fields


def parse_csv(text: str) -> list[list[str]]:
    """Split CSV text into rows of cells.

    A line with an odd number of quotes continues on the next line.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    rows = []
    lines = _physical_lines(text)
    for line in lines:
        while line.count('"') % 2:
            following = next(lines, None)
            if following is None:
                break
            line += "\n" + following
        rows.append(_split_fields(_strip_quotes(line)))
    return rows


class CsvReader:
    """Holds every cell of a CSV file; a file that cannot be read gives no lines."""

    def __init__(self, filename: Optional[Union[str, Path]] = None):
        self._rows: list[list[str]] = []
        if filename is None:
            return
        try:
            data = Path(filename).read_bytes()
        except OSError:
            return
        self._rows = parse_csv(data.decode("utf-8", errors="replace"))

    @classmethod
    def from_text(cls, text: str) -> "CsvReader":
        reader = cls()
        reader._rows = parse_csv(text)
        return reader

    def __len__(self) -> int:
        return len(self._rows)

    @property
    def lines(self) -> int:
        return len(self._rows)

    def _row(self, line: int) -> list[str]:
        if not 0 <= line < len(self._rows):
            raise IndexError(f"line {line} out of range")
        return self._rows[line]

    def columns(self, line: int) -> int:
        """Number of cells on ``line``."""
        return len(self._row(line))

    def get_string(self, line: int, column: int) -> str:
        """The cell's text, or "" past the end of the line."""
        row = self._row(line)
        if column < 0:
            raise IndexError(f"column {column} out of range")
        if column >= len(row):
            return ""
        return row[column]

    def get_int(self, line: int, column: int) -> int:
        """The leading integer of the cell; 0 for an empty cell."""
        text = self.get_string(line, column)
        if text == "":
            return 0
        match = _INT_PREFIX.match(text)
        if match is None:
            raise ValueError(f"not an integer: {text!r}")
        return int(match.group())

    def get_float(self, line: int, column: int) -> float:
        """The leading number of the cell; 0.0 for an empty cell."""
        text = self.get_string(line, column)
        if text == "":
            return 0.0
        match = _FLOAT_PREFIX.match(text)
        if match is None:
            raise ValueError(f"not a number: {text!r}")
        return float(match.group())