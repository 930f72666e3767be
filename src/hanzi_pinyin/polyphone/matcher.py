"""Reference-word matching around a character of interest."""

from __future__ import annotations

from dataclasses import dataclass

from hanzi_pinyin.syllables import is_chinese_character


@dataclass(frozen=True)
class WordMatcher:
    """Checks whether a character sits inside a fixed reference word.

    ``pivots`` are the offsets inside ``word`` where the character of interest
    may stand. For ``word="目的"`` and ``pivots=(1,)`` the matcher accepts a
    ``的`` that directly follows ``目``.
    """

    word: str
    pivots: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.word:
            raise ValueError("Reference word must not be empty.")
        for char in self.word:
            if not is_chinese_character(ord(char)):
                raise ValueError(f"Invalid Chinese character '{char}' in word '{self.word}'.")
        if not self.pivots:
            raise ValueError(f"No pivot offsets for word '{self.word}'.")
        for pivot in self.pivots:
            if not 0 <= pivot < len(self.word):
                raise ValueError(f"Pivot offset {pivot} out of range for word '{self.word}'.")

    @classmethod
    def for_character(cls, word: str, character: str) -> WordMatcher:
        """Build a matcher pivoting on every occurrence of ``character``.

        Raises:
            ValueError: If ``character`` does not occur in ``word``.
        """

        pivots = tuple(idx for idx, char in enumerate(word) if char == character)
        if not pivots:
            raise ValueError(f"Character '{character}' does not occur in word '{word}'.")
        return cls(word=word, pivots=pivots)

    def matches(self, text: str, index: int) -> bool:
        """Return whether ``text[index]`` is surrounded by the reference word.

        Args:
            text: Text being converted.
            index: Position of the character of interest.

        Returns:
            ``True`` for the first pivot whose window fits inside ``text`` and
            equals the word, ``False`` otherwise.
        """

        for pivot in self.pivots:
            start = index - pivot
            if start < 0 or start + len(self.word) > len(text):
                continue
            if text.startswith(self.word, start):
                return True
        return False
