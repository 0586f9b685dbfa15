"""Tests for atlus_codec.codepoint module."""
from atlus_codec.codepoint import CodePoint, max_position


class TestCodePoint:
    def test_equality_and_hash(self) -> None:
        assert CodePoint(0x80, 0xE0) == CodePoint(0x80, 0xE0)
        assert hash(CodePoint(0x80, 0xE0)) == hash(CodePoint(0x80, 0xE0))
        assert CodePoint(0, 0x41) != CodePoint(0x80, 0x41)

    def test_ascii_is_one_byte(self) -> None:
        cp = CodePoint.ascii(0x41)
        assert not cp.is_extended
        assert cp.sub_table is None
        assert cp.byte_length == 1
        assert cp.to_bytes() == b"\x41"

    def test_extended_is_two_bytes(self) -> None:
        cp = CodePoint(0x81, 0x80)
        assert cp.is_extended
        assert cp.sub_table == 1
        assert cp.byte_length == 2
        assert cp.to_bytes() == b"\x81\x80"

    def test_str(self) -> None:
        assert str(CodePoint.ascii(0x0A)) == "0A"
        assert str(CodePoint(0x80, 0xE0)) == "80 E0"


class TestForPosition:
    def test_overlap_start(self) -> None:
        # glyph 0x80 is the first entry of sub-table 0
        assert CodePoint.for_position(0x20) == CodePoint(0x80, 0x80)

    def test_ascii_tail(self) -> None:
        assert CodePoint.for_position(0x41) == CodePoint(0x80, 0xA1)
        assert CodePoint.for_position(0x7F) == CodePoint(0x80, 0xDF)

    def test_first_extended_row(self) -> None:
        # glyph 0x80 + 0x60 = 0xE0, sub-table 0xE0 // 0x80 - 1 = 0
        assert CodePoint.for_position(0x80) == CodePoint(0x80, 0xE0)

    def test_sub_table_boundary(self) -> None:
        assert CodePoint.for_position(0x9F) == CodePoint(0x80, 0xFF)
        assert CodePoint.for_position(0xA0) == CodePoint(0x81, 0x80)

    def test_offset_stays_in_upper_half(self) -> None:
        for position in range(0x20, 0x400):
            cp = CodePoint.for_position(position)
            assert 0x80 <= cp.index <= 0xFF

    def test_last_position(self) -> None:
        assert max_position() == 0x401F
        assert CodePoint.for_position(max_position()) == CodePoint(0xFF, 0xFF)
