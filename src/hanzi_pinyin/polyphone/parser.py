"""Parser for the block-formatted polyphone rule dataset.

Each block describes one character::

    # comment
    的 de5
    di4 目的 的确 的士
    di2 的的喀喀湖_0_1

The header line gives the character and its default reading. Every following
line starting with a lowercase letter gives a candidate reading and one or
more reference words. ``word_<offset>[_<offset>...]`` names the pivot offsets
explicitly; a bare word pivots on every occurrence of the character. A blank
line (or the end of the input) closes the block. Candidate order is kept as
written because the first matching candidate wins.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from hanzi_pinyin.polyphone.matcher import WordMatcher
from hanzi_pinyin.polyphone.resolver import PolyphoneResolver
from hanzi_pinyin.syllables import is_chinese_character, is_numbered_syllable

COMMENT_PREFIX = "#"
PIVOT_SEPARATOR = "_"


@dataclass
class _OpenBlock:
    """Mutable accumulator for the block currently being parsed."""

    line_no: int
    character: str
    default: str
    rules: list[tuple[str, tuple[WordMatcher, ...]]] = field(default_factory=list)

    def candidates(self) -> set[str]:
        return {syllable for syllable, _ in self.rules}


def _format_error(source: str, line_no: int, line: str, reason: str) -> ValueError:
    return ValueError(f"{source}:{line_no}: {reason}: '{line}'")


def parse_word_pattern(token: str, character: str) -> WordMatcher:
    """Parse one reference word token into a matcher for ``character``.

    Args:
        token: ``word`` or ``word_<offset>[_<offset>...]``.
        character: Character owning the block.

    Returns:
        Matcher for the reference word.

    Raises:
        ValueError: If an offset is not a number, is out of range, or does not
            point at ``character``, or the word itself is invalid.
    """

    word, *offsets = token.split(PIVOT_SEPARATOR)
    if not offsets:
        return WordMatcher.for_character(word, character)

    pivots: list[int] = []
    for offset in offsets:
        if not (offset.isascii() and offset.isdigit()):
            raise ValueError(f"Invalid pivot offset '{offset}' in '{token}'.")
        pivots.append(int(offset))

    matcher = WordMatcher(word=word, pivots=tuple(pivots))
    for pivot in matcher.pivots:
        if word[pivot] != character:
            raise ValueError(
                f"Pivot offset {pivot} in '{token}' points at '{word[pivot]}', "
                f"not '{character}'."
            )
    return matcher


def parse_polyphone_lines(
    lines: Iterable[str],
    source: str = "<polyphones>",
) -> list[PolyphoneResolver]:
    """Parse dataset lines into resolvers in file order.

    Args:
        lines: Raw dataset lines.
        source: Name of the data source used in error messages.

    Returns:
        One resolver per block.

    Raises:
        ValueError: On the first malformed line; the message names the source,
            line number and line text.
    """

    resolvers: list[PolyphoneResolver] = []
    defined: set[str] = set()
    block: _OpenBlock | None = None

    def close_block() -> None:
        nonlocal block
        if block is None:
            return
        try:
            resolvers.append(PolyphoneResolver.build(block.character, block.default, block.rules))
        except ValueError as exc:
            raise ValueError(f"{source}:{block.line_no}: {exc}") from exc
        defined.add(block.character)
        block = None

    for line_no, raw_line in enumerate(lines, start=1):
        line = raw_line.strip()
        if not line:
            close_block()
            continue
        if line.startswith(COMMENT_PREFIX):
            continue

        first = line[0]
        fields = line.split()

        if is_chinese_character(ord(first)):
            if block is not None:
                raise _format_error(
                    source, line_no, line, f"block for '{block.character}' is not terminated"
                )
            if len(fields) != 2 or len(fields[0]) != 1:
                raise _format_error(
                    source, line_no, line, "expected '<character> <default reading>'"
                )
            character, default = fields
            if character in defined:
                raise _format_error(source, line_no, line, f"duplicate block for '{character}'")
            if not is_numbered_syllable(default):
                raise _format_error(source, line_no, line, f"invalid default reading '{default}'")
            block = _OpenBlock(line_no=line_no, character=character, default=default)
            continue

        if "a" <= first <= "z":
            if block is None:
                raise _format_error(source, line_no, line, "candidate line outside of a block")
            syllable, *tokens = fields
            if not is_numbered_syllable(syllable):
                raise _format_error(source, line_no, line, f"invalid reading '{syllable}'")
            if not tokens:
                raise _format_error(source, line_no, line, "candidate without reference words")
            if syllable in block.candidates():
                raise _format_error(
                    source, line_no, line, f"duplicate candidate '{syllable}' for '{block.character}'"
                )
            try:
                matchers = tuple(parse_word_pattern(token, block.character) for token in tokens)
            except ValueError as exc:
                raise _format_error(source, line_no, line, str(exc)) from exc
            block.rules.append((syllable, matchers))
            continue

        raise _format_error(source, line_no, line, "unrecognized line")

    close_block()
    return resolvers
