"""Tests for atlus_codec.languages module."""
from pathlib import Path

import pytest

from atlus_codec.languages import (
    CUSTOM_CHARSET_FILENAME,
    CUSTOM_CHARSET_NAME,
    LANGUAGE_CHARSETS,
    Language,
    codec_for_language,
    language_for_code,
)
from atlus_codec.registry import CodecRegistry

from conftest import ASCII_TABLE, KOREAN_EXTENDED, LATIN_EXTENDED, write_charset


@pytest.fixture
def game_registry(tmp_path: Path) -> CodecRegistry:
    directory = tmp_path / "Charsets"
    directory.mkdir()
    write_charset(directory / "P4G_EFIGS.tsv", ASCII_TABLE + LATIN_EXTENDED)
    write_charset(directory / "P4G_Korean.tsv", ASCII_TABLE + KOREAN_EXTENDED)
    return CodecRegistry(directory)


class TestLanguageForCode:
    def test_codes(self) -> None:
        assert language_for_code("en") is Language.ENGLISH
        assert language_for_code("ZH-Hans") is Language.SIMPLIFIED_CHINESE

    def test_unknown(self) -> None:
        with pytest.raises(KeyError, match="zh-hant"):
            language_for_code("xx")

    def test_every_language_has_a_charset(self) -> None:
        assert set(LANGUAGE_CHARSETS) == set(Language)

    def test_efigs_languages_share_charset(self) -> None:
        names = {LANGUAGE_CHARSETS[language_for_code(c)] for c in ("en", "fr", "it", "de", "es")}
        assert names == {"P4G_EFIGS"}


class TestCodecForLanguage:
    def test_uses_registry(self, game_registry: CodecRegistry) -> None:
        english = codec_for_language(game_registry, "en")
        assert english is game_registry.get_or_create("P4G_EFIGS")
        assert codec_for_language(game_registry, Language.FRENCH) is english

    def test_korean(self, game_registry: CodecRegistry) -> None:
        assert codec_for_language(game_registry, "ko").encode("가") == b"\x80\xe0"

    def test_custom_charset_in_directory(self, game_registry: CodecRegistry, tmp_path: Path) -> None:
        subtitles = tmp_path / "Subtitles" / "en"
        subtitles.mkdir(parents=True)
        write_charset(subtitles / CUSTOM_CHARSET_FILENAME, ASCII_TABLE + ["ß"])

        codec = codec_for_language(game_registry, "en", subtitles)
        assert codec.name == CUSTOM_CHARSET_NAME
        assert codec.encode("ß") == b"\x80\xe0"
        assert game_registry.cached(CUSTOM_CHARSET_NAME) is None

    def test_directory_without_custom_charset(self, game_registry: CodecRegistry, tmp_path: Path) -> None:
        codec = codec_for_language(game_registry, "en", tmp_path)
        assert codec.name == "P4G_EFIGS"
