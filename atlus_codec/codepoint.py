#!python3
# atlus-codec 2026
#
# Ref: Atlus Script Tools, Common/Text/Encodings

from dataclasses import dataclass

# Offset from the start of the glyph range to the start of the char table
CHAR_TO_GLYPH_INDEX_OFFSET = 0x60

# Entries per glyph sub-table
GLYPH_TABLE_SIZE = 0x80

# Highest char table position in the one-byte ASCII range
ASCII_RANGE = 0x7F

# High bit of the first byte marks a two-byte code point
GLYPH_TABLE_INDEX_MARKER = 0x80

# First char table position that also gets an extended code point
EXTENDED_OVERLAP_START = 0x20

# Largest sub-table number that fits in the low 7 bits of the selector
MAX_GLYPH_TABLE = 0x7F

@dataclass(frozen=True)
class CodePoint:
    table_selector:int
    index:int

    @classmethod
    def ascii(cls, value):
        return cls(0, value)

    @classmethod
    def for_position(cls, position):
        glyph_index = position + CHAR_TO_GLYPH_INDEX_OFFSET
        table_index = glyph_index // GLYPH_TABLE_SIZE - 1
        table_relative_index = glyph_index - table_index * GLYPH_TABLE_SIZE
        return cls(GLYPH_TABLE_INDEX_MARKER | table_index, table_relative_index)

    @property
    def is_extended(self):
        return self.table_selector & GLYPH_TABLE_INDEX_MARKER == GLYPH_TABLE_INDEX_MARKER

    @property
    def sub_table(self):
        if not self.is_extended:
            return None
        return self.table_selector & ~GLYPH_TABLE_INDEX_MARKER

    @property
    def byte_length(self):
        return 2 if self.is_extended else 1

    def to_bytes(self):
        if self.is_extended:
            return bytes((self.table_selector, self.index))
        return bytes((self.index,))

    def __str__(self):
        if self.is_extended:
            return f"{self.table_selector:02X} {self.index:02X}"
        return f"{self.index:02X}"

def max_position():
    # last position whose sub-table still fits in the selector byte
    return (MAX_GLYPH_TABLE + 2) * GLYPH_TABLE_SIZE - CHAR_TO_GLYPH_INDEX_OFFSET - 1
