"""In-process loopback transport.

Hands each request PDU straight to a slave-side handler in the same
process. Useful for exercising the master loop against a local process
image without any physical link.
"""

import asyncio
import logging
from typing import Callable, Optional

from ...domain.interfaces import ITransport

_LOGGER = logging.getLogger(__name__)

PduHandler = Callable[[bytes], Optional[bytes]]


class LoopbackTransport(ITransport):
    """Transport delivering PDUs to a local handler.

    Attributes:
        _handler: Slave-side callable turning a request PDU into a response
            PDU (None or empty means the slave stayed silent)
        _response_delay: Simulated round-trip latency in seconds

    Example:
        >>> slave = SlaveRequestHandler(ModbusPDUProtocol(), synthesizer)
        >>> transport = LoopbackTransport(slave.handle)
        >>> await transport.connect("loopback")
        >>> response_pdu = await transport.send(request_pdu, timeout=0.5)
    """

    def __init__(self, handler: PduHandler, response_delay: float = 0.0):
        """Initialize loopback transport.

        Args:
            handler: Slave-side PDU handler
            response_delay: Seconds to wait before answering
        """
        self._handler = handler
        self._response_delay = response_delay
        self._connected = False
        self._address = ""

    async def connect(self, address: str) -> bool:
        """Mark the transport connected."""
        self._connected = True
        self._address = address
        _LOGGER.debug("Loopback transport connected (%s)", address)
        return True

    async def disconnect(self) -> None:
        """Mark the transport disconnected (idempotent)."""
        if self._connected:
            _LOGGER.debug("Loopback transport disconnected (%s)", self._address)
        self._connected = False

    async def send(self, data: bytes, timeout: float = 0.5) -> bytes:
        """Deliver `data` to the handler and return its answer.

        Raises:
            ConnectionError: If not connected
            TimeoutError: If the simulated delay exceeds `timeout`
        """
        if not self._connected:
            raise ConnectionError("Loopback transport not connected")

        if self._response_delay:
            if self._response_delay > timeout:
                await asyncio.sleep(timeout)
                raise asyncio.TimeoutError(
                    f"No response within {timeout}s (delay {self._response_delay}s)"
                )
            await asyncio.sleep(self._response_delay)

        return self._handler(data) or b""

    @property
    def is_connected(self) -> bool:
        """Check if connected."""
        return self._connected
