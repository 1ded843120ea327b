"""16-bit value transformation helpers.

Registers are stored unsigned; callers choose whether to report them as
signed or unsigned values.
"""

from typing import Iterable, List


def convert_to_signed_int16(value: int) -> int:
    """Convert unsigned 16-bit to signed 16-bit.

    Uses two's complement representation. Values >= 0x8000 are negative.

    Args:
        value: Unsigned 16-bit integer (0-65535)

    Returns:
        Signed 16-bit integer (-32768 to 32767)

    Examples:
        >>> convert_to_signed_int16(0x7FFF)
        32767
        >>> convert_to_signed_int16(0x8000)
        -32768
        >>> convert_to_signed_int16(0xFFFF)
        -1
    """
    if value >= 0x8000:
        return value - 0x10000
    return value


def convert_to_unsigned_int16(value: int) -> int:
    """Convert signed 16-bit to unsigned 16-bit.

    Args:
        value: Signed 16-bit integer (-32768 to 32767)

    Returns:
        Unsigned 16-bit integer (0-65535)

    Examples:
        >>> convert_to_unsigned_int16(-1)
        65535
        >>> convert_to_unsigned_int16(-32768)
        32768
    """
    if value < 0:
        return value + 0x10000
    return value & 0xFFFF


def format_register_values(values: Iterable[int], signed: bool = False) -> List[int]:
    """Interpret raw register values for reporting.

    Args:
        values: Unsigned 16-bit register values
        signed: Report as signed 16-bit when True

    Returns:
        List of values in the requested interpretation

    Examples:
        >>> format_register_values([1, 0xFFFF], signed=True)
        [1, -1]
        >>> format_register_values([1, 0xFFFF])
        [1, 65535]
    """
    if signed:
        return [convert_to_signed_int16(value) for value in values]
    return list(values)
