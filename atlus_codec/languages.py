#!python3
# atlus-codec 2026
#
# Which charset the game uses for each subtitle language.  A subtitle
# directory may ship its own Charset.tsv, which then takes precedence.

from enum import Enum
from pathlib import Path

CUSTOM_CHARSET_FILENAME = "Charset.tsv"
CUSTOM_CHARSET_NAME = "CustomSubtitleEncoding"

class Language(Enum):
    JAPANESE = "jp"
    ENGLISH = "en"
    KOREAN = "ko"
    TRADITIONAL_CHINESE = "zh-hant"
    SIMPLIFIED_CHINESE = "zh-hans"
    FRENCH = "fr"
    ITALIAN = "it"
    GERMAN = "de"
    SPANISH = "es"

LANGUAGE_CHARSETS = {
    Language.JAPANESE: "P4G_JP",
    Language.ENGLISH: "P4G_EFIGS",
    Language.FRENCH: "P4G_EFIGS",
    Language.ITALIAN: "P4G_EFIGS",
    Language.GERMAN: "P4G_EFIGS",
    Language.SPANISH: "P4G_EFIGS",
    Language.KOREAN: "P4G_Korean",
    Language.SIMPLIFIED_CHINESE: "P4G_CHS",
    Language.TRADITIONAL_CHINESE: "P4G_CHT",
}

def language_for_code(code):
    try:
        return Language(code.lower())
    except ValueError:
        valid = ", ".join(l.value for l in Language)
        raise KeyError(f"unknown language code {code!r}, expected one of {valid}") from None

def codec_for_language(registry, language, directory=None):
    if not isinstance(language, Language):
        language = language_for_code(language)
    if directory is not None:
        custom = Path(directory) / CUSTOM_CHARSET_FILENAME
        if custom.is_file():
            return registry.load_file(CUSTOM_CHARSET_NAME, custom)
    return registry.get_or_create(LANGUAGE_CHARSETS[language])
