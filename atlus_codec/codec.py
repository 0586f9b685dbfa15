#!python3
# atlus-codec 2026
#
# Text is a sequence of graphemes, each looked up whole in the char table.
# Output bytes are either a single byte 0x00 - 0x7F, or a pair
# (0x80 | sub-table, index).  The codec adds no framing or terminator.

from typing import NamedTuple

from .codepoint import ASCII_RANGE, GLYPH_TABLE_INDEX_MARKER, CodePoint
from .errors import UndefinedCodePoint, UnsupportedCharacter
from .table import build_tables

# Substituted for code points the char table does not define
PLACEHOLDER = "\ufffd"

class EncodeResult(NamedTuple):
    data:bytes
    error:UnsupportedCharacter = None

    @property
    def ok(self):
        return self.error is None

class DecodeResult(NamedTuple):
    text:str
    all_defined:bool

def _is_high_surrogate(c):
    return "\ud800" <= c <= "\udbff"

def _is_low_surrogate(c):
    return "\udc00" <= c <= "\udfff"

def iter_graphemes(text):
    """Yield (position, grapheme) pairs.

    A high surrogate takes the following code unit with it.  A well-formed
    pair is joined into the supplementary character it stands for, so text
    decoded with 'surrogatepass' matches the char table.
    """
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if _is_high_surrogate(c) and i + 1 < n:
            pair = text[i:i+2]
            if _is_low_surrogate(pair[1]):
                pair = pair.encode("utf-16-le", "surrogatepass").decode("utf-16-le")
            yield i, pair
            i += 2
        else:
            yield i, c
            i += 1

def iter_code_points(data):
    """Yield (offset, code point) pairs; a truncated pair yields None."""
    data = bytes(data)
    i = 0
    n = len(data)
    while i < n:
        b = data[i]
        if b & GLYPH_TABLE_INDEX_MARKER == GLYPH_TABLE_INDEX_MARKER:
            if i + 1 >= n:
                yield i, None
                return
            yield i, CodePoint(b, data[i+1])
            i += 2
        else:
            yield i, CodePoint.ascii(b)
            i += 1

def complete_length(data):
    """Length of the longest prefix of data that ends on a code point boundary."""
    for offset, code_point in iter_code_points(data):
        if code_point is None:
            return offset
    return len(data)

class AtlusCodec:
    def __init__(self, name, char_table):
        self.name = name
        tables = build_tables(char_table)
        self._char_to_code_point = tables.forward
        self._code_point_to_char = tables.reverse

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r}: {len(self._char_to_code_point)} characters>"

    @property
    def forward(self):
        return self._char_to_code_point

    @property
    def reverse(self):
        return self._code_point_to_char

    def code_point(self, grapheme):
        return self._char_to_code_point.get(grapheme)

    def character(self, code_point):
        return self._code_point_to_char.get(code_point)

    def supports(self, text):
        return all(g in self._char_to_code_point for _, g in iter_graphemes(text))

    ### Encoding

    def byte_count(self, text):
        # sizing only: counts UTF-16 code units, not graphemes
        count = 0
        for c in text:
            n = ord(c)
            if n > 0xFFFF:
                count += 4
            elif n <= ASCII_RANGE:
                count += 1
            else:
                count += 2
        return count

    def max_byte_count(self, char_count):
        return char_count * 2

    def encode(self, text):
        result = bytearray()
        for position, grapheme in iter_graphemes(text):
            try:
                code_point = self._char_to_code_point[grapheme]
            except KeyError:
                raise UnsupportedCharacter(self.name, grapheme, position, text) from None
            if code_point.is_extended:
                result.append(code_point.table_selector)
            result.append(code_point.index)
        return bytes(result)

    def try_encode(self, text):
        try:
            return EncodeResult(self.encode(text))
        except UnsupportedCharacter as exc:
            return EncodeResult(b"", exc)

    def encode_many(self, texts):
        return [self.try_encode(text) for text in texts]

    ### Decoding

    def char_count(self, data):
        return sum(1 for _ in iter_code_points(data))

    def max_char_count(self, byte_count):
        return byte_count * 2

    def _decode(self, data, strict):
        data = bytes(data)
        chars = []
        all_defined = True
        for offset, code_point in iter_code_points(data):
            c = None if code_point is None else self._code_point_to_char.get(code_point)
            if c is None:
                if strict:
                    raise UndefinedCodePoint(self.name, code_point, offset, data,
                        truncated=data[offset] if code_point is None else None)
                all_defined = False
                c = PLACEHOLDER
            chars.append(c)
        return DecodeResult("".join(chars), all_defined)

    def try_decode(self, data):
        return self._decode(data, strict=False)

    def decode(self, data, errors="replace"):
        if errors not in ("strict", "replace"):
            raise ValueError(f"unsupported error handler: {errors!r}")
        return self._decode(data, strict=errors == "strict").text
