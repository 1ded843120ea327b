"""IProtocol interface for Modbus PDU encoding and decoding."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..messages import ModbusMessage, ReadWriteMultipleRequest
    from ..strategies import PayloadDecoder


class IProtocol(ABC):
    """Interface for Modbus protocol data unit handling.

    A PDU is the function code byte followed by the function's data:

        Request:   [Function][Data...]
        Response:  [Function][Data...]
        Exception: [Function + 0x80][Exception Code]

    Example:
        >>> protocol = ModbusPDUProtocol()
        >>> pdu = protocol.build_request(request)
        >>> response_pdu = await transport.send(pdu)
        >>> response = protocol.decode_response(response_pdu, request)
    """

    @abstractmethod
    def build_request(self, request: "ModbusMessage") -> bytes:
        """Encode a request message into a PDU.

        Raises:
            IllegalFunctionError: If the function code has no codec
        """

    @abstractmethod
    def decode_response(
        self, pdu: bytes, request: Optional["ModbusMessage"] = None
    ) -> "ModbusMessage":
        """Decode a response PDU (master side).

        Args:
            pdu: Response PDU
            request: Request being answered; its header is mirrored

        Returns:
            ExceptionResponse, a function-specific response, or
            UnknownResponse for function codes without a codec

        Raises:
            ModbusProtocolError: If the PDU is empty, truncated or malformed
        """

    @abstractmethod
    def decode_request(
        self,
        pdu: bytes,
        unit_id: int = 0,
        payload_decoder: Optional["PayloadDecoder"] = None,
        headless: bool = False,
    ) -> "ReadWriteMultipleRequest":
        """Decode a request PDU (slave side).

        Args:
            pdu: Request PDU
            unit_id: Unit identifier from the framing layer
            payload_decoder: Write payload decoding strategy
            headless: Whether the frame carried no transaction envelope

        Raises:
            IllegalFunctionError: If the function code has no codec
            ModbusProtocolError: If the PDU is truncated or malformed
        """

    @abstractmethod
    def encode_response(self, response: "ModbusMessage") -> bytes:
        """Encode a response or exception response into a PDU."""
