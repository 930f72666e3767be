"""Unit tests for sequential table CSV export."""

from __future__ import annotations

from pathlib import Path

from hanzi_pinyin.dictionary.repository import TableRepository
from hanzi_pinyin.dictionary.table import PinyinTable
from hanzi_pinyin.io.csv_io import write_table_csv


def test_write_table_csv_keeps_row_positions_for_gaps(tmp_path: Path) -> None:
    output = tmp_path / "dict.csv"
    table = PinyinTable({0x4E00: ("yi1",), 0x4E03: ("qi1",), 0x4E08: ("zhang4",)})

    written = write_table_csv(table, output_path=output, last_code_point=0x4E08)
    lines = output.read_text(encoding="utf-8").splitlines()

    assert written == 3
    assert len(lines) == 9
    assert lines[0] == "yi1"
    assert lines[1] == ""
    assert lines[3] == "qi1"
    assert lines[8] == "zhang4"


def test_written_table_loads_back(tmp_path: Path) -> None:
    output = tmp_path / "dict.csv"
    table = PinyinTable({0x4E00: ("yi1",), 0x4E01: ("ding1", "zheng1")})

    write_table_csv(table, output_path=output, last_code_point=0x4E05)

    assert dict(TableRepository(output).table.entries) == dict(table.entries)
