"""Immutable code point to pinyin readings table."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from hanzi_pinyin.syllables import is_numbered_syllable


@dataclass(frozen=True)
class PinyinTable:
    """Read-only lookup of numbered pinyin readings by Unicode code point.

    Readings for one character are kept in source order; the first reading is
    the one used when no polyphone rule applies. The table is never mutated
    after construction and can be shared between threads.
    """

    entries: Mapping[int, tuple[str, ...]]

    def __post_init__(self) -> None:
        entries = {code_point: tuple(readings) for code_point, readings in self.entries.items()}
        for code_point, readings in entries.items():
            if not readings:
                raise ValueError(f"No readings for U+{code_point:04X}.")
            for reading in readings:
                if not is_numbered_syllable(reading):
                    raise ValueError(
                        f"Invalid reading '{reading}' for U+{code_point:04X}; "
                        "expected a numbered pinyin syllable."
                    )
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def lookup(self, code_point: int) -> tuple[str, ...] | None:
        """Return the readings for ``code_point``, or ``None`` when absent."""

        return self.entries.get(code_point)

    def readings(self, char: str) -> tuple[str, ...] | None:
        """Return the readings for a single character string.

        Raises:
            ValueError: If ``char`` is not exactly one character long.
        """

        if len(char) != 1:
            raise ValueError(f"Expected a single character, got '{char}'.")
        return self.lookup(ord(char))

    def __contains__(self, code_point: object) -> bool:
        return code_point in self.entries

    def __len__(self) -> int:
        return len(self.entries)
