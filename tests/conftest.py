"""Shared fixtures: charset files written under tmp_path."""
from pathlib import Path

import pytest

from atlus_codec.registry import CodecRegistry

ASCII_TABLE = [chr(i) for i in range(0x80)]

LATIN_EXTENDED = ["€", "é", "ü"]
KOREAN_EXTENDED = ["가", "나", "é"]


def charset_cell(c: str) -> str:
    if len(c) == 1 and (ord(c) < 0x20 or ord(c) == 0x7F):
        return f"\\u{ord(c):04X}"
    return c


def write_charset(path: Path, table: list[str], per_row: int = 16) -> Path:
    cells = [charset_cell(c) for c in table]
    rows = ["\t".join(cells[i:i + per_row]) for i in range(0, len(cells), per_row)]
    path.write_text("\n".join(rows) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def charset_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "Charsets"
    directory.mkdir()
    write_charset(directory / "ASCII.tsv", ASCII_TABLE)
    write_charset(directory / "LATIN.tsv", ASCII_TABLE + LATIN_EXTENDED)
    write_charset(directory / "KOREAN.tsv", ASCII_TABLE + KOREAN_EXTENDED)
    return directory


@pytest.fixture
def registry(charset_dir: Path) -> CodecRegistry:
    return CodecRegistry(charset_dir)
