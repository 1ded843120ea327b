"""RunTransactionsUseCase: the master-side transaction loop.

This use case orchestrates N Read/Write Multiple Registers exchanges:
1. Acquire the transport
2. For each iteration: build a fresh request, execute one transaction,
   classify the outcome
3. Release the transport, on every path

No iteration outcome stops the loop and failed iterations are not retried;
failures are reported and the loop advances.
"""

import logging
from typing import Callable

from ...const import DEFAULT_RECEIVE_TIMEOUT, MAX_TRANSACTION_ID
from ...domain.exceptions import ModbusError, ModbusIOError, ModbusSlaveError
from ...domain.helpers import format_register_values
from ...domain.interfaces import IProtocol, ITransport
from ...domain.messages import (
    ExceptionResponse,
    ReadWriteMultipleRequest,
    ReadWriteMultipleResponse,
)
from ..services.modbus_transaction import ModbusTransaction
from .run_transactions_result import (
    IterationResult,
    RunTransactionsResult,
    TransactionOutcome,
)

_LOGGER = logging.getLogger(__name__)

RequestFactory = Callable[[int], ReadWriteMultipleRequest]


class RunTransactionsUseCase:
    """Use case exercising a slave with repeated 0x17 exchanges.

    Responsibilities:
    - Own the transport for the duration of the run
    - Execute one transaction per iteration
    - Classify each outcome (see TransactionOutcome)
    - Report values or failures through logging and the result DTO

    Dependencies (injected):
    - transport: Exchange primitive
    - protocol: Builds request PDUs and decodes responses

    Example:
        >>> use_case = RunTransactionsUseCase(transport, ModbusPDUProtocol())
        >>> result = await use_case.execute("loopback", config.build_request, 5)
        >>> print(f"{result.failure_count} of 5 exchanges failed")
    """

    def __init__(
        self,
        transport: ITransport,
        protocol: IProtocol,
        receive_timeout: int = DEFAULT_RECEIVE_TIMEOUT,
        signed: bool = True,
        check_exceptions: bool = True,
    ):
        """Initialize use case with dependencies.

        Args:
            transport: Communication transport
            protocol: Modbus PDU protocol
            receive_timeout: Receive timeout per exchange in milliseconds
            signed: Report register values as signed 16-bit
            check_exceptions: Treat exception responses as slave errors
        """
        self._transport = transport
        self._protocol = protocol
        self._receive_timeout = receive_timeout
        self._signed = signed
        self._check_exceptions = check_exceptions
        self._transaction_id = 0

    async def execute(
        self,
        address: str,
        request_factory: RequestFactory,
        count: int,
    ) -> RunTransactionsResult:
        """Run `count` exchanges.

        Args:
            address: Transport address to connect to
            request_factory: Builds a fresh request for an iteration index
            count: Number of iterations

        Returns:
            RunTransactionsResult with one entry per iteration

        Raises:
            ValueError: If count is negative
            ModbusIOError: If the transport cannot be acquired or released
        """
        if count < 0:
            raise ValueError(f"Iteration count must be >= 0, got {count}")

        await self._acquire(address)

        result = RunTransactionsResult()
        try:
            for index in range(count):
                iteration = await self._run_iteration(index, request_factory)
                result.iterations.append(iteration)
        finally:
            await self._release()

        _LOGGER.info(
            "Completed %d transactions: %d succeeded, %d failed",
            len(result.iterations),
            result.success_count,
            result.failure_count,
        )
        return result

    async def _acquire(self, address: str) -> None:
        try:
            connected = await self._transport.connect(address)
        except OSError as err:
            _LOGGER.error("Failed to connect to %s: %s", address, err)
            raise ModbusIOError(f"Failed to connect to {address}: {err}") from err

        if not connected:
            _LOGGER.error("Failed to connect to %s", address)
            raise ModbusIOError(f"Failed to connect to {address}")

    async def _release(self) -> None:
        try:
            await self._transport.disconnect()
        except OSError as err:
            _LOGGER.error("Failed to close transport: %s", err)
            raise ModbusIOError(f"Failed to close transport: {err}") from err

    def _next_transaction_id(self) -> int:
        self._transaction_id = self._transaction_id % MAX_TRANSACTION_ID + 1
        return self._transaction_id

    async def _run_iteration(
        self, index: int, request_factory: RequestFactory
    ) -> IterationResult:
        request = request_factory(index)
        transaction = ModbusTransaction(
            self._transport,
            self._protocol,
            request,
            receive_timeout=self._receive_timeout,
            transaction_id=self._next_transaction_id(),
            check_exceptions=self._check_exceptions,
        )

        try:
            response = await transaction.execute()
        except ModbusSlaveError as err:
            _LOGGER.warning("Slave exception in transaction %d: %s", index, err)
            return IterationResult(
                index,
                TransactionOutcome.SLAVE_ERROR,
                error=str(err),
                exception_code=err.exception_code,
            )
        except ModbusIOError as err:
            _LOGGER.warning("I/O exception in transaction %d: %s", index, err)
            return IterationResult(index, TransactionOutcome.IO_ERROR, error=str(err))
        except ModbusError as err:
            _LOGGER.warning("Modbus exception in transaction %d: %s", index, err)
            return IterationResult(
                index, TransactionOutcome.PROTOCOL_ERROR, error=str(err)
            )

        if response is None:
            _LOGGER.warning("No response for transaction %d", index)
            return IterationResult(
                index,
                TransactionOutcome.NO_RESPONSE,
                error=f"No response for transaction {index}",
            )

        if isinstance(response, ExceptionResponse):
            _LOGGER.warning("Transaction %d: %s", index, response)
            return IterationResult(
                index,
                TransactionOutcome.EXCEPTION_RESPONSE,
                error=str(response),
                exception_code=response.exception_code,
            )

        if isinstance(response, ReadWriteMultipleResponse):
            values = format_register_values(response.values, signed=self._signed)
            _LOGGER.info("Transaction %d: %d values", index, response.word_count)
            if _LOGGER.isEnabledFor(logging.DEBUG):
                for offset, value in enumerate(values):
                    _LOGGER.debug("data[%d] = %d", offset, value)
            return IterationResult(index, TransactionOutcome.SUCCESS, values=values)

        _LOGGER.warning("Unknown response in transaction %d: %r", index, response)
        return IterationResult(
            index,
            TransactionOutcome.UNKNOWN_RESPONSE,
            error=f"Unknown response: {response!r}",
        )
