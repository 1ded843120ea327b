"""SlaveRequestHandler: the receiving peer of the exchange.

Decodes a request PDU, synthesizes the response against the register store
and encodes the response PDU. Every failure becomes an exception response;
nothing raised here reaches the transport.
"""

import logging
from typing import Optional

from ...const import DEFAULT_UNIT_ID, FUNC_READ_WRITE_MULTIPLE
from ...domain.exceptions import IllegalFunctionError, ModbusProtocolError
from ...domain.interfaces import IProtocol
from ...domain.messages import ExceptionResponse, ModbusMessage
from ...domain.strategies import PayloadDecoder
from ...domain.value_objects import ExceptionCode
from .response_synthesizer import ResponseSynthesizer

_LOGGER = logging.getLogger(__name__)


class SlaveRequestHandler:
    """Turns request PDUs into response PDUs.

    Example:
        >>> handler = SlaveRequestHandler(ModbusPDUProtocol(), synthesizer)
        >>> handler.handle(bytes.fromhex("17000000020000000000")).hex()
        '1704000a0014'
    """

    def __init__(
        self,
        protocol: IProtocol,
        synthesizer: ResponseSynthesizer,
        payload_decoder: Optional[PayloadDecoder] = None,
    ):
        """Initialize handler.

        Args:
            protocol: PDU protocol
            synthesizer: Response synthesizer bound to the register store
            payload_decoder: Write payload strategy for decoded requests
        """
        self._protocol = protocol
        self._synthesizer = synthesizer
        self._payload_decoder = payload_decoder

    def handle(
        self,
        pdu: bytes,
        unit_id: int = DEFAULT_UNIT_ID,
        headless: bool = False,
    ) -> bytes:
        """Answer one request PDU.

        Unsupported function codes yield ILLEGAL_FUNCTION, truncated or
        malformed requests yield ILLEGAL_DATA_VALUE, out-of-range registers
        yield ILLEGAL_DATA_ADDRESS.

        Args:
            pdu: Request PDU
            unit_id: Unit identifier of the incoming frame
            headless: Whether the frame carried no transaction envelope
        """
        return self._protocol.encode_response(self.process(pdu, unit_id, headless))

    def process(
        self,
        pdu: bytes,
        unit_id: int = DEFAULT_UNIT_ID,
        headless: bool = False,
    ) -> ModbusMessage:
        """Decode and answer one request PDU, returning the response message."""
        try:
            request = self._protocol.decode_request(
                pdu,
                unit_id=unit_id,
                payload_decoder=self._payload_decoder,
                headless=headless,
            )
        except IllegalFunctionError as err:
            _LOGGER.warning("Rejected request: %s", err)
            return self._reject(
                err.function_code, ExceptionCode.ILLEGAL_FUNCTION, unit_id, headless
            )
        except ModbusProtocolError as err:
            _LOGGER.warning("Rejected malformed request: %s", err)
            function_code = pdu[0] if pdu else FUNC_READ_WRITE_MULTIPLE
            return self._reject(
                function_code, ExceptionCode.ILLEGAL_DATA_VALUE, unit_id, headless
            )

        return self._synthesizer.synthesize(request)

    @staticmethod
    def _reject(
        function_code: int, exception_code: int, unit_id: int, headless: bool
    ) -> ExceptionResponse:
        response = ExceptionResponse(function_code, exception_code, unit_id)
        response.headless = headless
        return response
