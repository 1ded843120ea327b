"""ExceptionResponse message.

An exception response signals an application-level rejection. On the wire
it is the request's function code with the 0x80 bit set followed by a
single exception code byte.
"""

from ...const import DEFAULT_UNIT_ID, EXCEPTION_FLAG, format_modbus_error
from ..value_objects.function_code import FunctionCode
from .modbus_message import ModbusMessage


class ExceptionResponse(ModbusMessage):
    """Response variant carrying only a function code and an exception code.

    Example:
        >>> response = ExceptionResponse(0x17, ExceptionCode.ILLEGAL_DATA_ADDRESS)
        >>> hex(response.function_code)
        '0x97'
        >>> response.original_function_code
        23
    """

    def __init__(
        self,
        function_code: int,
        exception_code: int,
        unit_id: int = DEFAULT_UNIT_ID,
    ):
        """Initialize exception response.

        Args:
            function_code: Function code of the rejected request (the 0x80
                bit is added if missing)
            exception_code: Exception code byte (0-255)
            unit_id: Slave unit identifier
        """
        super().__init__(function_code | EXCEPTION_FLAG, unit_id)
        if not 0 <= exception_code <= 0xFF:
            raise ValueError(f"Exception code must be 0-255, got {exception_code}")
        self._exception_code = exception_code

    @property
    def exception_code(self) -> int:
        """Exception code byte."""
        return self._exception_code

    @property
    def original_function_code(self) -> int:
        """Function code of the request that was rejected."""
        return self.function_code & ~EXCEPTION_FLAG

    def __str__(self) -> str:
        return (
            f"ExceptionResponse - function "
            f"{FunctionCode.describe(self.original_function_code)} - "
            f"{format_modbus_error(self._exception_code)}"
        )

    def __repr__(self) -> str:
        return (
            f"ExceptionResponse({self._header_repr()}, "
            f"func=0x{self.function_code:02X}, code=0x{self._exception_code:02X})"
        )
