"""Per-character reading selection for polyphone characters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from hanzi_pinyin.polyphone.matcher import WordMatcher
from hanzi_pinyin.syllables import is_chinese_character, is_numbered_syllable


@dataclass(frozen=True)
class PolyphoneResolver:
    """Chooses a reading for one character from the words around it.

    ``rules`` pairs each candidate reading with its matchers. Candidates and
    matchers are tried in the stored order and the first match wins, so the
    most specific words have to come first. When nothing matches the
    ``default`` reading is used.
    """

    code_point: int
    default: str
    rules: tuple[tuple[str, tuple[WordMatcher, ...]], ...] = ()

    def __post_init__(self) -> None:
        if not is_chinese_character(self.code_point):
            raise ValueError(f"U+{self.code_point:04X} is not a valid Chinese character.")
        if not is_numbered_syllable(self.default):
            raise ValueError(f"'{self.default}' is not a numbered pinyin syllable.")

        seen: set[str] = set()
        for syllable, _ in self.rules:
            if not is_numbered_syllable(syllable):
                raise ValueError(f"'{syllable}' is not a numbered pinyin syllable.")
            if syllable in seen:
                raise ValueError(f"Duplicate candidate '{syllable}' for '{self.character}'.")
            seen.add(syllable)

    @classmethod
    def build(
        cls,
        character: str,
        default: str,
        rules: Sequence[tuple[str, Sequence[WordMatcher]]] = (),
    ) -> PolyphoneResolver:
        """Build a resolver from a character string and plain sequences."""

        if len(character) != 1:
            raise ValueError(f"Expected a single character, got '{character}'.")
        return cls(
            code_point=ord(character),
            default=default,
            rules=tuple((syllable, tuple(matchers)) for syllable, matchers in rules),
        )

    @property
    def character(self) -> str:
        """Return the character this resolver handles."""

        return chr(self.code_point)

    @property
    def candidates(self) -> tuple[str, ...]:
        """Return candidate readings in evaluation order."""

        return tuple(syllable for syllable, _ in self.rules)

    @property
    def readings(self) -> frozenset[str]:
        """Return every reading ``resolve`` can produce."""

        return frozenset((*self.candidates, self.default))

    def resolve(self, text: str, index: int) -> str:
        """Return the numbered reading of the character at ``text[index]``.

        Raises:
            ValueError: If ``text[index]`` is not this resolver's character.
        """

        if ord(text[index]) != self.code_point:
            raise ValueError(
                f"Invalid target character '{text[index]}' at index {index}; "
                f"expected '{self.character}'."
            )
        for syllable, matchers in self.rules:
            for matcher in matchers:
                if matcher.matches(text, index):
                    return syllable
        return self.default
