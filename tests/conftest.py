"""Shared fixtures and helpers for the test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Mapping

import pytest

from hanzi_pinyin.syllables import CHINESE_CHAR_MIN_CODE_POINT


def write_table_csv(path: Path, readings: Mapping[str, str]) -> Path:
    """Write a sequential table CSV holding only ``readings``.

    Rows for code points between ``U+4E00`` and the highest given character
    are left empty.
    """

    last = max(ord(char) for char in readings)
    rows = [""] * (last - CHINESE_CHAR_MIN_CODE_POINT + 1)
    for char, value in readings.items():
        rows[ord(char) - CHINESE_CHAR_MIN_CODE_POINT] = value
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def table_csv_factory(tmp_path: Path):
    """Return a callable that writes a table CSV into ``tmp_path``."""

    def factory(readings: Mapping[str, str], name: str = "dict.csv") -> Path:
        return write_table_csv(tmp_path / name, readings)

    return factory
