"""Modbus Read/Write Multiple Registers exchange.

Encodes the combined read/write request (function code 0x17), answers it
against a slave-side register store and drives repeated exchanges from the
master side with per-exchange error classification.

Example:
    >>> store = SimpleRegisterStore([10, 20, 30, 40])
    >>> slave = SlaveRequestHandler(ModbusPDUProtocol(), ResponseSynthesizer(store))
    >>> config = ExerciserConfig.from_dict(
    ...     {"read_count": 4, "write_start": 2, "write_values": [99, 99]}
    ... )
    >>> result = await run_exerciser(config, LoopbackTransport(slave.handle))
"""

from .application.services import (
    ModbusTransaction,
    ResponseSynthesizer,
    SlaveRequestHandler,
)
from .application.use_cases import (
    IterationResult,
    RunTransactionsResult,
    RunTransactionsUseCase,
    TransactionOutcome,
)
from .config import ExerciserConfig, load_exerciser_config
from .domain.entities import Register
from .domain.exceptions import (
    IllegalAddressError,
    IllegalFunctionError,
    MalformedMessageError,
    ModbusError,
    ModbusIOError,
    ModbusProtocolError,
    ModbusSlaveError,
    TruncatedMessageError,
)
from .domain.messages import (
    ExceptionResponse,
    ReadWriteMultipleRequest,
    ReadWriteMultipleResponse,
    UnknownResponse,
)
from .domain.strategies import PayloadDecoder
from .exerciser import run_exerciser
from .infrastructure.process_image import SimpleRegisterStore
from .infrastructure.protocol import ModbusPDUProtocol
from .infrastructure.transport import LoopbackTransport

__version__ = "1.0.0"

__all__ = [
    "ExceptionResponse",
    "ExerciserConfig",
    "IllegalAddressError",
    "IllegalFunctionError",
    "IterationResult",
    "LoopbackTransport",
    "MalformedMessageError",
    "ModbusError",
    "ModbusIOError",
    "ModbusPDUProtocol",
    "ModbusProtocolError",
    "ModbusSlaveError",
    "ModbusTransaction",
    "PayloadDecoder",
    "ReadWriteMultipleRequest",
    "ReadWriteMultipleResponse",
    "Register",
    "ResponseSynthesizer",
    "RunTransactionsResult",
    "RunTransactionsUseCase",
    "SimpleRegisterStore",
    "SlaveRequestHandler",
    "TransactionOutcome",
    "TruncatedMessageError",
    "UnknownResponse",
    "load_exerciser_config",
    "run_exerciser",
]
