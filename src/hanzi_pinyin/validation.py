"""Validation helpers for loaded pinyin data."""

from __future__ import annotations

from typing import Sequence

from hanzi_pinyin.dictionary.parser import TableRow
from hanzi_pinyin.syllables import is_numbered_syllable

MAX_REPORTED_ERRORS = 25


def _raise_if_errors(errors: Sequence[str], label: str) -> None:
    """Raise one ``ValueError`` summarising ``errors`` when there are any."""

    if not errors:
        return
    preview = "\n".join(f"- {item}" for item in errors[:MAX_REPORTED_ERRORS])
    rest = len(errors) - min(MAX_REPORTED_ERRORS, len(errors))
    more = f"\n- ... and {rest} more" if rest > 0 else ""
    raise ValueError(f"{label} validation failed with {len(errors)} errors:\n{preview}{more}")


def validate_table_rows(rows: Sequence[TableRow], source: str = "<table>") -> None:
    """Validate every reading in parsed table rows.

    Args:
        rows: Rows produced by :func:`parse_table_lines`.
        source: Name of the data source used in error messages.

    Raises:
        ValueError: If any reading is not a numbered syllable or a code point
            appears twice.
    """

    errors: list[str] = []
    seen: set[int] = set()
    for row in rows:
        if row.code_point in seen:
            errors.append(f"{source}:{row.line_no}: duplicate code point U+{row.code_point:04X}")
        seen.add(row.code_point)
        for reading in row.readings:
            if not is_numbered_syllable(reading):
                errors.append(
                    f"{source}:{row.line_no}: invalid reading '{reading}' "
                    f"for '{row.character}' (U+{row.code_point:04X})"
                )

    _raise_if_errors(errors, "Pinyin table")
