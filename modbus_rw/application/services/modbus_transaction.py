"""ModbusTransaction: one master-side request/response exchange.

A transaction holds exactly one request, executes it once through the
transport and resolves to exactly one response or one error.
"""

import asyncio
import logging
from typing import Optional

from ...const import DEFAULT_RECEIVE_TIMEOUT
from ...domain.entities import TransactionState
from ...domain.exceptions import MalformedMessageError, ModbusSlaveError
from ...domain.interfaces import IProtocol, ITransport
from ...domain.messages import (
    ExceptionResponse,
    ModbusMessage,
    ReadWriteMultipleRequest,
    ReadWriteMultipleResponse,
)
from ...infrastructure.decorators import handle_transport_errors

_LOGGER = logging.getLogger(__name__)


class ModbusTransaction:
    """Single-shot exchange primitive.

    Failure mapping:
    - Timeout, connection or other transport failure → ModbusIOError
    - Empty, truncated or inconsistent response → ModbusProtocolError
    - Exception response (when check_exceptions) → ModbusSlaveError
    - Transport returned nothing → execute() returns None

    Attributes:
        request: The request this transaction carries
        response: The decoded response once executed
        state: Current TransactionState

    Example:
        >>> transaction = ModbusTransaction(transport, protocol, request)
        >>> response = await transaction.execute()
        >>> assert transaction.state is TransactionState.COMPLETED
    """

    def __init__(
        self,
        transport: ITransport,
        protocol: IProtocol,
        request: ModbusMessage,
        receive_timeout: int = DEFAULT_RECEIVE_TIMEOUT,
        transaction_id: int = 0,
        check_exceptions: bool = True,
    ):
        """Initialize transaction.

        Args:
            transport: Connected transport
            protocol: PDU protocol
            request: Request to execute (stamped with transaction_id
                unless headless)
            receive_timeout: Receive timeout in milliseconds
            transaction_id: Envelope transaction identifier
            check_exceptions: Raise ModbusSlaveError on exception responses
                instead of returning them
        """
        self._transport = transport
        self._protocol = protocol
        self._request = request
        self._receive_timeout = receive_timeout / 1000
        self._check_exceptions = check_exceptions
        self._response: Optional[ModbusMessage] = None
        self._state = TransactionState.PENDING

        if not request.headless:
            request.transaction_id = transaction_id

    @property
    def request(self) -> ModbusMessage:
        """Request carried by this transaction."""
        return self._request

    @property
    def response(self) -> Optional[ModbusMessage]:
        """Decoded response, None before execution or without response."""
        return self._response

    @property
    def state(self) -> TransactionState:
        """Current transaction state."""
        return self._state

    async def execute(self) -> Optional[ModbusMessage]:
        """Send the request and wait for the response.

        Returns:
            Decoded response, or None when the transport produced nothing

        Raises:
            ModbusIOError: Transport failure or timeout
            ModbusProtocolError: Malformed response
            ModbusSlaveError: Exception response and check_exceptions set
            RuntimeError: If the transaction was already executed
        """
        if self._state is not TransactionState.PENDING:
            raise RuntimeError(f"Transaction already {self._state.value}")

        self._state = TransactionState.EXECUTING
        try:
            pdu = self._protocol.build_request(self._request)
            response_pdu = await self._exchange(pdu, timeout=self._receive_timeout)

            if not response_pdu:
                _LOGGER.warning("No response for %r", self._request)
                self._state = TransactionState.COMPLETED
                return None

            response = self._protocol.decode_response(response_pdu, self._request)
            self._validate_response(response)
        except Exception:
            self._state = TransactionState.FAILED
            raise

        self._response = response
        self._state = TransactionState.COMPLETED

        if isinstance(response, ExceptionResponse) and self._check_exceptions:
            raise ModbusSlaveError(
                response.exception_code, response.original_function_code
            )

        return response

    @handle_transport_errors("Modbus exchange")
    async def _exchange(self, pdu: bytes, timeout: float) -> bytes:
        return await asyncio.wait_for(
            self._transport.send(pdu, timeout=timeout), timeout
        )

    def _validate_response(self, response: ModbusMessage) -> None:
        """Reject a 0x17 response whose size does not match the request."""
        if isinstance(response, ReadWriteMultipleResponse) and isinstance(
            self._request, ReadWriteMultipleRequest
        ):
            if response.word_count != self._request.read_count:
                raise MalformedMessageError(
                    f"Response carries {response.word_count} registers, "
                    f"requested {self._request.read_count}"
                )
