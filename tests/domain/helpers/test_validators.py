"""Tests for validation helper functions."""

import pytest

from modbus_rw.domain.helpers.validators import (
    ValidationError,
    validate_register_address,
    validate_register_value,
    validate_unit_id,
    validate_word_count,
)


class TestValidationError:
    """Test ValidationError exception."""

    def test_validation_error_is_value_error(self):
        """Test ValidationError is subclass of ValueError."""
        assert issubclass(ValidationError, ValueError)

    def test_error_message(self):
        """Test error message is preserved."""
        with pytest.raises(ValidationError, match="custom message"):
            raise ValidationError("custom message")


class TestValidateRegisterAddress:
    """Test validate_register_address function."""

    def test_valid_addresses(self):
        """Test validating valid addresses."""
        assert validate_register_address(0) == 0
        assert validate_register_address(0x1234) == 4660
        assert validate_register_address(0xFFFF) == 65535

    def test_negative_address_raises(self):
        """Test negative address raises ValidationError."""
        with pytest.raises(ValidationError, match="Invalid address"):
            validate_register_address(-1)

    def test_too_large_address_raises(self):
        """Test address > 0xFFFF raises ValidationError."""
        with pytest.raises(ValidationError, match="Invalid read_start: 65536"):
            validate_register_address(0x10000, "read_start")

    def test_non_integer_raises(self):
        """Test non-integer types are rejected."""
        with pytest.raises(ValidationError, match="must be integer"):
            validate_register_address("0x10")

    def test_bool_raises(self):
        """Test bool is not accepted as an address."""
        with pytest.raises(ValidationError, match="got bool"):
            validate_register_address(True)


class TestValidateWordCount:
    """Test validate_word_count function."""

    def test_bounds(self):
        """Test zero and 127 are both valid counts."""
        assert validate_word_count(0) == 0
        assert validate_word_count(127) == 127

    def test_above_max_raises(self):
        """Test a count that overflows the byte count field is rejected."""
        with pytest.raises(ValidationError, match="must be 0-127"):
            validate_word_count(128, "write_count")

    def test_negative_raises(self):
        """Test negative counts are rejected."""
        with pytest.raises(ValidationError):
            validate_word_count(-1)


class TestValidateUnitId:
    """Test validate_unit_id function."""

    def test_valid(self):
        """Test unit ids within a byte."""
        assert validate_unit_id(0) == 0
        assert validate_unit_id(255) == 255

    def test_out_of_range(self):
        """Test unit ids outside a byte are rejected."""
        with pytest.raises(ValidationError, match="unit_id"):
            validate_unit_id(256)


class TestValidateRegisterValue:
    """Test validate_register_value function."""

    def test_unsigned_values_unchanged(self):
        """Test unsigned values pass through."""
        assert validate_register_value(0) == 0
        assert validate_register_value(300) == 300
        assert validate_register_value(0xFFFF) == 0xFFFF

    def test_signed_values_normalized(self):
        """Test signed values are stored in two's complement."""
        assert validate_register_value(-1) == 0xFFFF
        assert validate_register_value(-32768) == 0x8000

    @pytest.mark.parametrize("value", [-32769, 65536])
    def test_out_of_range(self, value):
        """Test values outside 16 bits are rejected."""
        with pytest.raises(ValidationError, match="-32768..65535"):
            validate_register_value(value)
