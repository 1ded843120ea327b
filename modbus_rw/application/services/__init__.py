"""Application services.

Services coordinating domain objects and infrastructure:
- ResponseSynthesizer: answers 0x17 requests against a register store
- SlaveRequestHandler: request PDU in, response PDU out (slave side)
- ModbusTransaction: one request/response exchange (master side)
"""

from .modbus_transaction import ModbusTransaction
from .response_synthesizer import ResponseSynthesizer
from .slave_request_handler import SlaveRequestHandler

__all__ = [
    "ModbusTransaction",
    "ResponseSynthesizer",
    "SlaveRequestHandler",
]
