"""Wiring for a configured transaction run."""

import logging
from typing import Optional

from .application.use_cases import RunTransactionsResult, RunTransactionsUseCase
from .config import ExerciserConfig
from .domain.interfaces import IProtocol, ITransport
from .infrastructure.protocol import ModbusPDUProtocol

_LOGGER = logging.getLogger(__name__)


async def run_exerciser(
    config: ExerciserConfig,
    transport: ITransport,
    address: str = "",
    protocol: Optional[IProtocol] = None,
) -> RunTransactionsResult:
    """Run `config.repeat` read/write exchanges over `transport`.

    Args:
        config: Validated exerciser configuration
        transport: Exchange primitive (not yet connected)
        address: Transport address
        protocol: PDU protocol (default: ModbusPDUProtocol)

    Returns:
        Result of the run

    Raises:
        ModbusIOError: If the transport cannot be acquired or released
    """
    use_case = RunTransactionsUseCase(
        transport,
        protocol or ModbusPDUProtocol(),
        receive_timeout=config.receive_timeout,
        signed=config.signed,
    )
    _LOGGER.debug("Starting %d transactions against %s", config.repeat, address)
    return await use_case.execute(address, config.build_request, config.repeat)
