"""Modbus PDU protocol implementation.

Turns messages into protocol data units (function code + data) and back,
dispatching on the function code. Exception responses are recognised by
the 0x80 bit; function codes without a codec decode to UnknownResponse.
"""

import logging
from typing import Optional

from ...const import (
    DEFAULT_UNIT_ID,
    EXCEPTION_FLAG,
    FUNC_READ_WRITE_MULTIPLE,
    format_modbus_error,
)
from ...domain.exceptions import (
    IllegalFunctionError,
    MalformedMessageError,
    TruncatedMessageError,
)
from ...domain.interfaces import IProtocol
from ...domain.messages import (
    ExceptionResponse,
    ModbusMessage,
    ReadWriteMultipleRequest,
    ReadWriteMultipleResponse,
    UnknownResponse,
)
from ...domain.strategies import PayloadDecoder
from .read_write_multiple_codec import (
    decode_request,
    decode_response,
    encode_exception,
    encode_request,
    encode_response,
)

_LOGGER = logging.getLogger(__name__)


class ModbusPDUProtocol(IProtocol):
    """PDU-level protocol for the Read/Write Multiple Registers exchange.

    Example:
        >>> protocol = ModbusPDUProtocol()
        >>> request = ReadWriteMultipleRequest(read_count=2, values=[7])
        >>> protocol.build_request(request).hex()
        '170000000200000001020007'
        >>> response = protocol.decode_response(bytes.fromhex("1704000a0014"), request)
        >>> response.values
        [10, 20]
    """

    def build_request(self, request: ModbusMessage) -> bytes:
        """Encode a request into a PDU.

        Raises:
            IllegalFunctionError: If the request is not a 0x17 request
        """
        if not isinstance(request, ReadWriteMultipleRequest):
            raise IllegalFunctionError(request.function_code)

        pdu = bytes([request.function_code]) + encode_request(request)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Built request: %r, pdu=%s", request, pdu.hex())

        return pdu

    def decode_response(
        self, pdu: bytes, request: Optional[ModbusMessage] = None
    ) -> ModbusMessage:
        """Decode a response PDU.

        Args:
            pdu: Response PDU
            request: Request being answered; its header is mirrored

        Returns:
            ExceptionResponse, ReadWriteMultipleResponse or UnknownResponse

        Raises:
            MalformedMessageError: If the PDU is empty or inconsistent
            TruncatedMessageError: If the PDU is shorter than it declares
        """
        if not pdu:
            raise MalformedMessageError("Empty response PDU")

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Decoding response pdu=%s", pdu.hex())

        function_code = pdu[0]
        data = pdu[1:]

        # Check for exception response (function code with 0x80 bit set)
        if function_code & EXCEPTION_FLAG:
            if not data:
                raise TruncatedMessageError(
                    "Exception response has no exception code", expected=1, available=0
                )
            response = ExceptionResponse(function_code, data[0])
            if _LOGGER.isEnabledFor(logging.DEBUG):
                _LOGGER.debug(
                    "Modbus exception: func=0x%02X, %s",
                    function_code,
                    format_modbus_error(data[0]),
                )
        elif function_code == FUNC_READ_WRITE_MULTIPLE:
            response = decode_response(data)
        else:
            _LOGGER.warning("Unknown function code in response: 0x%02X", function_code)
            response = UnknownResponse(function_code, data)

        if request is not None:
            request.mirror_header(response)
        return response

    def decode_request(
        self,
        pdu: bytes,
        unit_id: int = DEFAULT_UNIT_ID,
        payload_decoder: Optional[PayloadDecoder] = None,
        headless: bool = False,
    ) -> ReadWriteMultipleRequest:
        """Decode a request PDU on the slave side.

        Args:
            pdu: Request PDU
            unit_id: Unit identifier to stamp on the request
            payload_decoder: Write payload decoding strategy
            headless: Whether the frame carried no transaction envelope

        Raises:
            IllegalFunctionError: If the function code is not 0x17
            MalformedMessageError: If the PDU is empty or inconsistent
            TruncatedMessageError: If the PDU is shorter than it declares
        """
        if not pdu:
            raise MalformedMessageError("Empty request PDU")

        function_code = pdu[0]
        if function_code != FUNC_READ_WRITE_MULTIPLE:
            raise IllegalFunctionError(function_code)

        return decode_request(
            pdu[1:],
            unit_id=unit_id,
            payload_decoder=payload_decoder,
            headless=headless,
        )

    def encode_response(self, response: ModbusMessage) -> bytes:
        """Encode a response or exception response into a PDU.

        Raises:
            IllegalFunctionError: If the response type has no codec
        """
        if isinstance(response, ExceptionResponse):
            data = encode_exception(response)
        elif isinstance(response, ReadWriteMultipleResponse):
            data = encode_response(response)
        elif isinstance(response, UnknownResponse):
            data = response.data
        else:
            raise IllegalFunctionError(response.function_code)

        pdu = bytes([response.function_code]) + data

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Encoded response: %r, pdu=%s", response, pdu.hex())

        return pdu
