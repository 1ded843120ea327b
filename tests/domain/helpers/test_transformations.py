"""Tests for 16-bit transformation helpers."""

from modbus_rw.domain.helpers.transformations import (
    convert_to_signed_int16,
    convert_to_unsigned_int16,
    format_register_values,
)


class TestConvertToSignedInt16:
    """Test convert_to_signed_int16."""

    def test_positive_values_unchanged(self):
        """Test values below 0x8000 stay positive."""
        assert convert_to_signed_int16(0) == 0
        assert convert_to_signed_int16(0x7FFF) == 32767

    def test_high_bit_negative(self):
        """Test values with the sign bit set become negative."""
        assert convert_to_signed_int16(0x8000) == -32768
        assert convert_to_signed_int16(0xFFFF) == -1
        assert convert_to_signed_int16(0xFF9C) == -100


class TestConvertToUnsignedInt16:
    """Test convert_to_unsigned_int16."""

    def test_negative_values(self):
        """Test negative values wrap to two's complement."""
        assert convert_to_unsigned_int16(-1) == 0xFFFF
        assert convert_to_unsigned_int16(-32768) == 0x8000

    def test_inverse_of_signed(self):
        """Test the two conversions are inverses."""
        for value in (0, 1, 0x7FFF, 0x8000, 0xFFFF):
            assert convert_to_unsigned_int16(convert_to_signed_int16(value)) == value


class TestFormatRegisterValues:
    """Test format_register_values."""

    def test_unsigned_default(self):
        """Test unsigned reporting returns the raw values."""
        assert format_register_values((1, 0xFFFF)) == [1, 65535]

    def test_signed(self):
        """Test signed reporting interprets the sign bit."""
        assert format_register_values([1, 0xFFFF, 0x8000], signed=True) == [
            1,
            -1,
            -32768,
        ]

    def test_empty(self):
        """Test no values produce an empty list."""
        assert format_register_values([], signed=True) == []
