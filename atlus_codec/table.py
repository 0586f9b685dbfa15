#!python3
# atlus-codec 2026
#
# Char table layout:
#
#   positions 0x00 - 0x7F   one-byte code points, byte == position
#   positions 0x20 - end    two-byte code points, numbered from glyph 0x80
#
# The printable ASCII glyphs are also the first entries of glyph sub-table 0,
# so positions 0x20 - 0x7F have both a one-byte and a two-byte code point.
# Encoding prefers the one-byte form; decoding accepts both.

from dataclasses import dataclass
from types import MappingProxyType

from .codepoint import ASCII_RANGE, EXTENDED_OVERLAP_START, CodePoint, max_position
from .errors import CharsetTooLarge

@dataclass(frozen=True)
class CodecTables:
    forward:MappingProxyType
    reverse:MappingProxyType

def build_tables(char_table):
    char_table = list(char_table)
    if len(char_table) > max_position() + 1:
        raise CharsetTooLarge(f"charset has {len(char_table)} entries, at most {max_position() + 1} fit in the glyph tables")

    ascii_end = min(len(char_table), ASCII_RANGE + 1)

    # build character to code point table
    char_to_code_point = {}
    for char_index in range(ascii_end):
        char_to_code_point.setdefault(char_table[char_index], CodePoint.ascii(char_index))
    # extended characters, without the ascii range
    for char_index in range(ASCII_RANGE + 1, len(char_table)):
        char_to_code_point.setdefault(char_table[char_index], CodePoint.for_position(char_index))

    # build code point to character table
    code_point_to_char = {}
    for char_index in range(ascii_end):
        code_point_to_char[CodePoint.ascii(char_index)] = char_table[char_index]
    # extended characters, including the overlap with the ascii range
    for char_index in range(EXTENDED_OVERLAP_START, len(char_table)):
        code_point_to_char[CodePoint.for_position(char_index)] = char_table[char_index]

    return CodecTables(
        forward=MappingProxyType(char_to_code_point),
        reverse=MappingProxyType(code_point_to_char),
    )
