"""Pinyin table built from the per-character dictionary shipped with pypinyin.

pypinyin stores readings with tone marks (``lüè``); they are converted here to
numbered syllables (``lve4``) so they follow the same grammar as CSV tables.
"""

from __future__ import annotations

import logging
import unicodedata

from pypinyin import constants as pypinyin_constants

from hanzi_pinyin.dictionary.table import PinyinTable
from hanzi_pinyin.syllables import (
    CHINESE_CHAR_MAX_CODE_POINT,
    CHINESE_CHAR_MIN_CODE_POINT,
    is_numbered_syllable,
)

logger = logging.getLogger(__name__)

COMBINING_TONES = {
    "\u0304": 1,  # macron
    "\u0301": 2,  # acute
    "\u030c": 3,  # caron
    "\u0300": 4,  # grave
}
COMBINING_DIAERESIS = "\u0308"
COMBINING_CIRCUMFLEX = "\u0302"


def numbered_from_marked(reading: str) -> str | None:
    """Convert a tone-marked reading such as ``lǚ`` to ``lv3``.

    Args:
        reading: One pinyin reading, possibly with precomposed or combining
            diacritics.

    Returns:
        Numbered syllable, or ``None`` when the reading has more than one tone
        mark or letters outside the pinyin alphabet.
    """

    letters: list[str] = []
    tones: set[int] = set()
    for ch in unicodedata.normalize("NFD", reading.strip().lower()):
        if ch in COMBINING_TONES:
            tones.add(COMBINING_TONES[ch])
        elif ch == COMBINING_DIAERESIS:
            if not letters or letters[-1] != "u":
                return None
            letters[-1] = "v"
        elif ch == COMBINING_CIRCUMFLEX:
            continue
        else:
            letters.append(ch)

    if len(tones) > 1:
        return None
    tone = tones.pop() if tones else 5
    numbered = "".join(letters) + str(tone)
    return numbered if is_numbered_syllable(numbered) else None


def _numbered_readings(code_point: int, value: str) -> tuple[str, ...]:
    """Convert one comma-joined pypinyin entry, dropping duplicates."""

    readings: list[str] = []
    for item in value.split(","):
        numbered = numbered_from_marked(item)
        if numbered is None:
            logger.debug("Skipping reading '%s' for U+%04X", item, code_point)
            continue
        if numbered not in readings:
            readings.append(numbered)
    return tuple(readings)


def pypinyin_table(
    first_code_point: int = CHINESE_CHAR_MIN_CODE_POINT,
    last_code_point: int = CHINESE_CHAR_MAX_CODE_POINT,
) -> PinyinTable:
    """Build a table from ``pypinyin.constants.PINYIN_DICT``.

    Args:
        first_code_point: First code point to include.
        last_code_point: Last code point to include, inclusive.

    Returns:
        Table with every character in range that has at least one reading.
    """

    entries: dict[int, tuple[str, ...]] = {}
    for code_point, value in pypinyin_constants.PINYIN_DICT.items():
        if not first_code_point <= code_point <= last_code_point:
            continue
        readings = _numbered_readings(code_point, str(value))
        if readings:
            entries[code_point] = readings

    table = PinyinTable(entries)
    logger.info("Built pinyin table with %d entries from pypinyin", len(table))
    return table
