"""Top-level orchestration for text to pinyin conversion."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from pathlib import Path
from typing import Callable, Protocol

from hanzi_pinyin.dictionary.pypinyin_source import pypinyin_table
from hanzi_pinyin.dictionary.repository import TableRepository
from hanzi_pinyin.dictionary.table import PinyinTable
from hanzi_pinyin.models import OutputForm
from hanzi_pinyin.polyphone.repository import (
    PolyphoneRepository,
    ResolverRegistry,
    packaged_polyphone_path,
)
from hanzi_pinyin.polyphone.resolver import PolyphoneResolver
from hanzi_pinyin.syllables import mark_tone, strip_tone

logger = logging.getLogger(__name__)


def _numbered(syllable: str) -> str:
    return syllable


RENDERERS: dict[OutputForm, Callable[[str], str]] = {
    OutputForm.NUMBERED_TONE: _numbered,
    OutputForm.MARKED_TONE: mark_tone,
    OutputForm.TONE_FREE: strip_tone,
}


class ReadingSource(Protocol):
    """Supplies the numbered reading of the character at ``text[index]``."""

    def reading(self, text: str, index: int) -> str | None: ...


@dataclass(frozen=True)
class TableBacked:
    """Reading source for characters without polyphone rules.

    Always picks the first reading listed in the table.
    """

    table: PinyinTable

    def reading(self, text: str, index: int) -> str | None:
        readings = self.table.lookup(ord(text[index]))
        return readings[0] if readings else None


@dataclass(frozen=True)
class ResolverBacked:
    """Reading source that defers to a character's polyphone resolver."""

    resolver: PolyphoneResolver

    def reading(self, text: str, index: int) -> str | None:
        return self.resolver.resolve(text, index)


@dataclass(frozen=True)
class PinyinConverter:
    """Converts text with a pinyin table and a polyphone resolver registry.

    Both collaborators are immutable, so one converter can serve any number
    of concurrent callers.
    """

    table: PinyinTable
    registry: ResolverRegistry

    def source_for(self, char: str) -> ReadingSource:
        """Pick the reading source for one character."""

        resolver = self.registry.get(ord(char))
        if resolver is not None:
            return ResolverBacked(resolver)
        return TableBacked(self.table)

    def convert(self, text: str | None, form: OutputForm) -> str | None:
        """Replace every Chinese character in ``text`` with its pinyin.

        Characters without a reading are kept as they are. Every position
        except the last is followed by a single space, so the output holds one
        token per input character.

        Args:
            text: Source text; ``None`` and ``""`` are returned unchanged.
            form: Spelling of converted syllables.

        Returns:
            Converted text.
        """

        if not text:
            return text

        render = RENDERERS[form]
        last = len(text) - 1
        parts: list[str] = []
        for index, char in enumerate(text):
            reading = self.source_for(char).reading(text, index)
            parts.append(char if reading is None else render(reading))
            if index < last:
                parts.append(" ")
        return "".join(parts)


def build_converter(
    table_path: Path | None = None,
    polyphone_path: Path | None = None,
) -> PinyinConverter:
    """Build a converter from explicit data files.

    Args:
        table_path: Sequential pinyin CSV; ``None`` uses the pypinyin table.
        polyphone_path: Rule dataset; ``None`` uses the packaged dataset.

    Returns:
        Ready converter.

    Raises:
        FileNotFoundError: If a given file does not exist.
        ValueError: If a data file is malformed.
    """

    table = TableRepository(table_path).table if table_path is not None else pypinyin_table()
    source = polyphone_path if polyphone_path is not None else packaged_polyphone_path()
    registry = PolyphoneRepository(source).registry
    return PinyinConverter(table=table, registry=registry)


@lru_cache(maxsize=None)
def default_converter() -> PinyinConverter:
    """Return the process-wide converter, building it on first use."""

    logger.debug("Building default pinyin converter")
    return build_converter()


def convert(text: str | None, form: OutputForm) -> str | None:
    """Convert ``text`` with the default converter."""

    return default_converter().convert(text, form)


def to_pinyin_with_tone_number(text: str | None) -> str | None:
    """Convert text to numbered pinyin.

    ``"他屏气凝神"`` becomes ``"ta1 bing3 qi4 ning2 shen2"``.
    """

    return convert(text, OutputForm.NUMBERED_TONE)


def to_pinyin_with_tone_mark(text: str | None) -> str | None:
    """Convert text to pinyin with tone marks, e.g. ``"tā bǐng qì níng shén"``."""

    return convert(text, OutputForm.MARKED_TONE)


def to_pinyin_without_tone(text: str | None) -> str | None:
    """Convert text to pinyin without tones, e.g. ``"ta bing qi ning shen"``."""

    return convert(text, OutputForm.TONE_FREE)
