"""Validation helper functions.

All validators raise ValidationError (subclass of ValueError) for invalid
inputs.
"""

from typing import Any

from ...const import MAX_REGISTER, MAX_UNIT_ID, MAX_WORDS, MIN_REGISTER


class ValidationError(ValueError):
    """Domain validation error.

    Raised when validation fails. This is a subclass of ValueError
    for code simplicity.
    """


def _validate_int(value: Any, name: str) -> int:
    # bool is an int subclass but never a valid register field
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(
            f"Invalid {name}: must be integer, got {type(value).__name__}"
        )
    return value


def validate_register_address(address: int, name: str = "address") -> int:
    """Validate register address is in valid range (0x0000-0xFFFF).

    Args:
        address: Register address to validate
        name: Parameter name for error message

    Returns:
        Validated address

    Raises:
        ValidationError: If address is invalid
    """
    _validate_int(address, name)

    if not MIN_REGISTER <= address <= MAX_REGISTER:
        raise ValidationError(f"Invalid {name}: {address} (must be 0x0000-0xFFFF)")

    return address


def validate_word_count(count: int, name: str = "count") -> int:
    """Validate a register count fits the single-byte byte count field.

    Args:
        count: Number of 16-bit words
        name: Parameter name for error message

    Returns:
        Validated count

    Raises:
        ValidationError: If count is negative or above MAX_WORDS
    """
    _validate_int(count, name)

    if not 0 <= count <= MAX_WORDS:
        raise ValidationError(f"Invalid {name}: {count} (must be 0-{MAX_WORDS})")

    return count


def validate_unit_id(unit_id: int) -> int:
    """Validate unit identifier (0-255)."""
    _validate_int(unit_id, "unit_id")

    if not 0 <= unit_id <= MAX_UNIT_ID:
        raise ValidationError(f"Invalid unit_id: {unit_id} (must be 0-{MAX_UNIT_ID})")

    return unit_id


def validate_register_value(value: int, name: str = "value") -> int:
    """Validate a register value and normalize it to unsigned 16-bit.

    Signed values (-32768..-1) are accepted and stored in two's complement.

    Args:
        value: Register value to validate
        name: Parameter name for error message

    Returns:
        Value as unsigned 16-bit integer

    Raises:
        ValidationError: If value is outside -32768..65535

    Examples:
        >>> validate_register_value(-1)
        65535
        >>> validate_register_value(300)
        300
    """
    _validate_int(value, name)

    if not -0x8000 <= value <= 0xFFFF:
        raise ValidationError(f"Invalid {name}: {value} (must be -32768..65535)")

    return value & 0xFFFF
