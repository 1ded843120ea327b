"""Modbus messages.

Requests and responses share the ModbusMessage header. Only the Read/Write
Multiple Registers function (0x17) has a payload; other function codes a
peer answers with surface as UnknownResponse.
"""

from .exception_response import ExceptionResponse
from .modbus_message import ModbusMessage
from .read_write_multiple_request import ReadWriteMultipleRequest
from .read_write_multiple_response import ReadWriteMultipleResponse
from .unknown_response import UnknownResponse

__all__ = [
    "ExceptionResponse",
    "ModbusMessage",
    "ReadWriteMultipleRequest",
    "ReadWriteMultipleResponse",
    "UnknownResponse",
]
