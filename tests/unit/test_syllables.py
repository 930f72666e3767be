"""Unit tests for syllable grammar and tone rendering."""

from __future__ import annotations

import re

import pytest

from hanzi_pinyin.syllables import (
    is_chinese_character,
    is_numbered_syllable,
    mark_tone,
    strip_tone,
    tone_number,
)

NUMBERED_TO_MARKED = {
    "yi1": "yī",
    "yu4": "yù",
    "ng4": "ǹg",
    "m2": "m",
    "cha2": "chá",
    "zha1": "zhā",
    "dan1": "dān",
    "chan2": "chán",
    "shan4": "shàn",
    "yuan2": "yuán",
    "ce4": "cè",
    "shi4": "shì",
    "lv3": "lǚ",
    "liu2": "liú",
    "lou2": "lóu",
    "lve4": "lüè",
    "de5": "de",
    "di4": "dì",
    "di2": "dí",
    "di1": "dī",
    "bai4": "bài",
    "gui4": "guì",
    "nv5": "nü",
    "n1": "n",
    "n2": "ń",
}


def test_is_chinese_character_covers_inclusive_range() -> None:
    for code_point in (0x4E00, 0x4E01, 0x9FA5, 0x9FA4, ord("嗯"), ord("得"), ord("隆")):
        assert is_chinese_character(code_point)

    for code_point in (0x4E00 - 1, 0x9FA5 + 1, 0, -1, 2**31 - 1, ord("."), ord("，")):
        assert not is_chinese_character(code_point)


def test_is_numbered_syllable_accepts_letters_plus_tone_digit() -> None:
    for syllable in ("a1", "a2", "a3", "a4", "a5", "bai1", "bai5"):
        assert is_numbered_syllable(syllable)

    for syllable in (None, "", "3", "33", "a", "a0", "a6", "bai", "bai33", "b3i3", " a1", "a1 ", "Bai1", "lü3"):
        assert not is_numbered_syllable(syllable)


def test_tone_number_reads_trailing_digit() -> None:
    assert tone_number("lv3") == 3
    assert tone_number("de5") == 5
    with pytest.raises(ValueError, match="not a numbered pinyin syllable"):
        tone_number("lv")


@pytest.mark.parametrize(("numbered", "marked"), sorted(NUMBERED_TO_MARKED.items()))
def test_mark_tone_places_diacritic(numbered: str, marked: str) -> None:
    assert mark_tone(numbered) == marked


def test_mark_tone_prefers_later_of_i_and_u() -> None:
    """``iu`` marks the ``u`` and ``ui`` marks the ``i``."""

    assert mark_tone("jiu3") == "jiǔ"
    assert mark_tone("dui4") == "duì"


def test_renderers_pass_through_non_syllables() -> None:
    for value in (None, "", "，", "bai", "bai33", "."):
        assert mark_tone(value) == value
        assert strip_tone(value) == value


def test_strip_tone_removes_digit() -> None:
    assert strip_tone("lv3") == "lv"
    assert strip_tone("lve4") == "lve"
    assert strip_tone("de5") == "de"


def test_strip_tone_is_idempotent() -> None:
    for value in ("lv3", "bai4", "ng4", "bai", "，", ""):
        assert strip_tone(strip_tone(value)) == strip_tone(value)


def test_rendered_forms_have_expected_shape() -> None:
    """Marked output has no digits and stripped output has no diacritics."""

    for numbered in NUMBERED_TO_MARKED:
        assert not re.search(r"[0-9]", mark_tone(numbered))
        assert re.fullmatch(r"[a-z]+", strip_tone(numbered))
