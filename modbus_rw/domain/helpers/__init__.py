"""Domain helper functions."""

from .transformations import (
    convert_to_signed_int16,
    convert_to_unsigned_int16,
    format_register_values,
)
from .validators import (
    ValidationError,
    validate_register_address,
    validate_register_value,
    validate_unit_id,
    validate_word_count,
)

__all__ = [
    # Transformations
    "convert_to_signed_int16",
    "convert_to_unsigned_int16",
    "format_register_values",
    # Validators
    "ValidationError",
    "validate_register_address",
    "validate_register_value",
    "validate_unit_id",
    "validate_word_count",
]
