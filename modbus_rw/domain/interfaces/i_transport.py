"""ITransport interface for the request/response exchange primitive."""

from abc import ABC, abstractmethod


class ITransport(ABC):
    """Interface for transport layer implementations.

    The transport moves one protocol data unit (function code + data) to
    the slave and returns the slave's answer. Framing (MBAP header, RTU
    checksum) belongs to the implementation.

    Connection lifecycle:
        1. connect(address) → establishes connection
        2. send(data) → sends data and receives response (multiple times)
        3. disconnect() → closes connection

    Example:
        >>> transport = LoopbackTransport(handler)
        >>> await transport.connect("loopback")
        >>> response = await transport.send(pdu, timeout=0.5)
        >>> await transport.disconnect()
    """

    @abstractmethod
    async def connect(self, address: str) -> bool:
        """Establish connection to the slave.

        Args:
            address: Implementation-specific address

        Returns:
            True if connection successful, False otherwise

        Raises:
            OSError: If connection fails due to hardware/network issues
        """

    @abstractmethod
    async def disconnect(self) -> None:
        """Close connection.

        This method should be idempotent (safe to call multiple times).
        After disconnect, is_connected should return False.
        """

    @abstractmethod
    async def send(self, data: bytes, timeout: float = 0.5) -> bytes:
        """Send a request PDU and receive the response PDU.

        Args:
            data: Request PDU
            timeout: Maximum time to wait for response in seconds

        Returns:
            Response PDU. An empty result means no response was obtained.

        Raises:
            ConnectionError: If not connected or the link dropped
            TimeoutError: If no response within timeout period
        """

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if transport is currently connected."""
