"""Parsing utilities for the sequential per-character pinyin CSV.

Row ``N`` (zero-based, blank rows included) describes code point ``U+4E00 + N``.
Each row holds comma-separated numbered syllables, most common reading first.
An empty row keeps its code point slot but gives it no readings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from hanzi_pinyin.syllables import CHINESE_CHAR_MIN_CODE_POINT


@dataclass(frozen=True)
class TableRow:
    """One non-empty CSV row with its position in the source file."""

    line_no: int
    code_point: int
    readings: tuple[str, ...]

    @property
    def character(self) -> str:
        """Return the character described by this row."""

        return chr(self.code_point)


def parse_table_lines(
    lines: Iterable[str],
    first_code_point: int = CHINESE_CHAR_MIN_CODE_POINT,
) -> list[TableRow]:
    """Parse sequential CSV lines into rows keyed by code point.

    The parser does not check syllable grammar; see
    :func:`hanzi_pinyin.validation.validate_table_rows`.

    Args:
        lines: Raw lines, with or without trailing newlines.
        first_code_point: Code point described by the first line.

    Returns:
        Rows for every non-empty line, in file order.
    """

    rows: list[TableRow] = []
    for offset, line in enumerate(lines):
        line = line.strip()
        if not line:
            continue
        readings = tuple(field.strip() for field in line.split(","))
        rows.append(
            TableRow(
                line_no=offset + 1,
                code_point=first_code_point + offset,
                readings=readings,
            )
        )
    return rows
