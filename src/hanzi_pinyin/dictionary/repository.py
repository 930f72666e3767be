"""Repository that loads a pinyin table from a sequential CSV file."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
import logging
from pathlib import Path

from hanzi_pinyin.dictionary.parser import parse_table_lines
from hanzi_pinyin.dictionary.table import PinyinTable
from hanzi_pinyin.validation import validate_table_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableRepository:
    """Path-scoped loader that parses and validates a table CSV once.

    Loading is all or nothing: a missing file or any invalid row raises and no
    table is produced.
    """

    path: Path

    @cached_property
    def table(self) -> PinyinTable:
        """Load and cache the table.

        Returns:
            Immutable table keyed by code point.

        Raises:
            FileNotFoundError: If the configured CSV path is not a file.
            ValueError: If any row contains an invalid reading.
        """

        if not self.path.is_file():
            raise FileNotFoundError(f"Pinyin table file not found: {self.path}")

        with self.path.open("r", encoding="utf-8") as handle:
            rows = parse_table_lines(handle)

        validate_table_rows(rows, source=str(self.path))
        table = PinyinTable({row.code_point: row.readings for row in rows})
        logger.info("Loaded %d pinyin table entries from %s", len(table), self.path)
        return table
