"""Modbus protocol implementations.

This module contains the wire codec for the 0x17 payloads and the PDU
protocol implementing the domain IProtocol interface.
"""

from .modbus_pdu_protocol import ModbusPDUProtocol
from .read_write_multiple_codec import (
    decode_request,
    decode_response,
    encode_exception,
    encode_request,
    encode_response,
)

__all__ = [
    "ModbusPDUProtocol",
    "decode_request",
    "decode_response",
    "encode_exception",
    "encode_request",
    "encode_response",
]
