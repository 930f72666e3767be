"""Unit tests for the pypinyin-derived table."""

from __future__ import annotations

import pytest

from hanzi_pinyin.dictionary.pypinyin_source import numbered_from_marked, pypinyin_table
from hanzi_pinyin.syllables import is_numbered_syllable


@pytest.mark.parametrize(
    ("reading", "expected"),
    [
        ("zhōng", "zhong1"),
        ("lǚ", "lv3"),
        ("lüè", "lve4"),
        ("ǹg", "ng4"),
        ("ḿ", "m2"),
        ("m\u0300", "m4"),
        ("de", "de5"),
        ("hm", "hm5"),
        ("\u00ea\u0304", "e1"),
        ("ê", "e5"),
        ("Yī", "yi1"),
    ],
)
def test_numbered_from_marked_converts_tone_marks(reading: str, expected: str) -> None:
    assert numbered_from_marked(reading) == expected


def test_numbered_from_marked_rejects_unusable_readings() -> None:
    assert numbered_from_marked("áà") is None
    assert numbered_from_marked("a-b") is None
    assert numbered_from_marked("") is None


def test_pypinyin_table_contains_numbered_readings_in_range() -> None:
    table = pypinyin_table()

    assert table.readings("一")[0] == "yi1"
    assert table.readings("中")[0] == "zhong1"
    assert "lve4" in table.readings("略")
    assert "de5" in table.readings("的")
    assert table.lookup(ord("a")) is None
    assert all(0x4E00 <= code_point <= 0x9FA5 for code_point in table.entries)
    assert all(
        is_numbered_syllable(reading)
        for readings in table.entries.values()
        for reading in readings
    )


def test_pypinyin_table_drops_duplicate_readings() -> None:
    table = pypinyin_table()

    for readings in table.entries.values():
        assert len(readings) == len(set(readings))
