"""Custom exceptions for the Modbus exchange.

This module defines domain-specific exceptions that represent expected
error conditions of a master/slave exchange. The master-side loop keys its
outcome classification off this hierarchy:

    ModbusError
    ├── ModbusIOError          transport failure (timeout, connection)
    ├── ModbusProtocolError    malformed or unexpected exchange
    │   ├── TruncatedMessageError
    │   ├── MalformedMessageError
    │   └── IllegalFunctionError
    ├── ModbusSlaveError       peer answered with an exception response
    └── IllegalAddressError    register range outside the store (slave side)
"""

from typing import Optional

from ..const import format_modbus_error


class ModbusError(Exception):
    """Base class for every failure of a Modbus exchange."""


class ModbusIOError(ModbusError):
    """Transport-level failure.

    Raised when the exchange primitive could not deliver the request or
    did not receive a response within the receive timeout. The request may
    or may not have reached the slave.

    Example:
        >>> raise ModbusIOError("Exchange timed out after 0.5s")
    """


class ModbusProtocolError(ModbusError):
    """Malformed or unexpected message shape."""


class TruncatedMessageError(ModbusProtocolError):
    """Fewer bytes available than the message declares.

    The exchange must be treated as failed; a shorter register list is
    never produced from a truncated buffer.

    Attributes:
        expected: Number of bytes the message declared
        available: Number of bytes actually present
    """

    def __init__(self, message: str, expected: int = 0, available: int = 0):
        super().__init__(message)
        self.expected = expected
        self.available = available


class MalformedMessageError(ModbusProtocolError):
    """Message bytes are present but inconsistent (e.g. odd byte count)."""


class IllegalFunctionError(ModbusProtocolError):
    """Function code not supported by this implementation.

    Attributes:
        function_code: The unsupported function code
    """

    def __init__(self, function_code: int):
        super().__init__(f"Unsupported function code: 0x{function_code:02X}")
        self.function_code = function_code


class ModbusSlaveError(ModbusError):
    """Slave rejected the request with an exception response.

    This is an application-level failure: the transport worked and the
    slave answered, but with an exception code instead of a result. It
    should be logged without a stack trace.

    Attributes:
        exception_code: Exception code byte returned by the slave
        function_code: Function code of the rejected request, if known
    """

    def __init__(self, exception_code: int, function_code: Optional[int] = None):
        super().__init__(f"Slave exception {format_modbus_error(exception_code)}")
        self.exception_code = exception_code
        self.function_code = function_code


class IllegalAddressError(ModbusError):
    """Register range outside the store's addressable space.

    Raised by register stores; the slave turns it into an
    ILLEGAL_DATA_ADDRESS exception response rather than a transport fault.
    """
