"""Writer for the sequential per-character pinyin CSV format."""

from __future__ import annotations

from pathlib import Path

from hanzi_pinyin.dictionary.table import PinyinTable
from hanzi_pinyin.syllables import CHINESE_CHAR_MAX_CODE_POINT, CHINESE_CHAR_MIN_CODE_POINT


def write_table_csv(
    table: PinyinTable,
    output_path: Path,
    first_code_point: int = CHINESE_CHAR_MIN_CODE_POINT,
    last_code_point: int = CHINESE_CHAR_MAX_CODE_POINT,
) -> int:
    """Write one CSV row per code point in ``[first_code_point, last_code_point]``.

    Code points missing from the table get an empty row so that row positions
    keep matching code points.

    Args:
        table: Table to serialize.
        output_path: Destination CSV path.
        first_code_point: Code point of the first row.
        last_code_point: Code point of the last row, inclusive.

    Returns:
        Number of rows that carry readings.
    """

    written = 0
    with output_path.open("w", encoding="utf-8") as handle:
        for code_point in range(first_code_point, last_code_point + 1):
            readings = table.lookup(code_point)
            if readings:
                handle.write(",".join(readings))
                written += 1
            handle.write("\n")
    return written
