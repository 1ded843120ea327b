"""Modbus function codes."""

from enum import IntEnum


class FunctionCode(IntEnum):
    """Modbus function codes known to this package.

    Only READ_WRITE_MULTIPLE_REGISTERS has a payload codec; the others are
    listed so log output can name what a peer sent back.
    """

    READ_COILS = 0x01
    READ_DISCRETE_INPUTS = 0x02
    READ_HOLDING_REGISTERS = 0x03
    READ_INPUT_REGISTERS = 0x04
    WRITE_SINGLE_COIL = 0x05
    WRITE_SINGLE_REGISTER = 0x06
    WRITE_MULTIPLE_COILS = 0x0F
    WRITE_MULTIPLE_REGISTERS = 0x10
    READ_WRITE_MULTIPLE_REGISTERS = 0x17
    READ_FIFO_QUEUE = 0x18

    # Error responses have 0x80 bit set
    ERROR_READ_WRITE_MULTIPLE = 0x97

    @classmethod
    def describe(cls, code: int) -> str:
        """Return the enum name for a code, or its hex form if unknown.

        Example:
            >>> FunctionCode.describe(0x17)
            'READ_WRITE_MULTIPLE_REGISTERS'
            >>> FunctionCode.describe(0x41)
            '0x41'
        """
        try:
            return cls(code).name
        except ValueError:
            return f"0x{code:02X}"
