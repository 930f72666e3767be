"""Syllable grammar and tone rendering for numbered pinyin.

A numbered syllable is lowercase ASCII letters followed by one tone digit
``1``-``5`` (``5`` is the neutral tone), for example ``bai4`` or ``lv3`` where
``v`` spells ``ü``. The renderers pass anything else through unchanged.
"""

from __future__ import annotations

import re

CHINESE_CHAR_MIN_CODE_POINT = 0x4E00
CHINESE_CHAR_MAX_CODE_POINT = 0x9FA5

NUMBERED_SYLLABLE_RE = re.compile(r"[a-z]+[1-5]")

# Tone variants for tones 1-4. ``n`` has no precomposed first-tone form.
MARKED_LETTERS = {
    "a": ("ā", "á", "ǎ", "à"),
    "e": ("ē", "é", "ě", "è"),
    "i": ("ī", "í", "ǐ", "ì"),
    "o": ("ō", "ó", "ǒ", "ò"),
    "u": ("ū", "ú", "ǔ", "ù"),
    "v": ("ǖ", "ǘ", "ǚ", "ǜ"),
    "n": ("n", "ń", "ň", "ǹ"),
}


def is_chinese_character(code_point: int) -> bool:
    """Return whether ``code_point`` lies in the supported Chinese range."""

    return CHINESE_CHAR_MIN_CODE_POINT <= code_point <= CHINESE_CHAR_MAX_CODE_POINT


def is_numbered_syllable(syllable: str | None) -> bool:
    """Return whether ``syllable`` is a syllable-with-tone such as ``de5``."""

    return syllable is not None and NUMBERED_SYLLABLE_RE.fullmatch(syllable) is not None


def tone_number(syllable: str) -> int:
    """Return the tone digit of a numbered syllable.

    Raises:
        ValueError: If ``syllable`` is not a numbered syllable.
    """

    if not is_numbered_syllable(syllable):
        raise ValueError(f"'{syllable}' is not a numbered pinyin syllable.")
    return int(syllable[-1])


def strip_tone(syllable: str | None) -> str | None:
    """Drop the trailing tone digit, e.g. ``lv3`` -> ``lv``.

    Args:
        syllable: Numbered syllable; other values are returned unchanged.

    Returns:
        Tone-free syllable, or the input when it is not a numbered syllable.
    """

    if not is_numbered_syllable(syllable):
        return syllable
    return syllable[:-1]


def _tone_letter_index(base: str) -> int | None:
    """Find the position that carries the tone mark in a tone-free syllable.

    Priority is ``a``, ``o``, ``e``, then whichever of ``i``/``u`` comes later,
    then ``v``, then the nasal ``n``.
    """

    for vowel in "aoe":
        index = base.find(vowel)
        if index >= 0:
            return index

    index = max(base.find("i"), base.find("u"))
    if index >= 0:
        return index

    for letter in "vn":
        index = base.find(letter)
        if index >= 0:
            return index
    return None


def mark_tone(syllable: str | None) -> str | None:
    """Convert a numbered syllable to its tone-mark spelling.

    Examples are ``lv3`` -> ``lǚ``, ``bai4`` -> ``bài`` and ``ng4`` -> ``ǹg``.
    The neutral tone gets no mark. Any ``v`` left after marking is written
    as ``ü``.

    Args:
        syllable: Numbered syllable; other values are returned unchanged.

    Returns:
        Syllable spelled with a diacritic and without the tone digit.
    """

    if not is_numbered_syllable(syllable):
        return syllable

    tone = int(syllable[-1])
    base = syllable[:-1]
    if tone <= 4:
        index = _tone_letter_index(base)
        if index is not None:
            marked = MARKED_LETTERS[base[index]][tone - 1]
            base = base[:index] + marked + base[index + 1 :]
    return base.replace("v", "ü")
