"""ModbusMessage base class.

Holds the header shared by every request and response: unit identifier,
function code and, unless the message is headless, the transaction and
protocol identifiers of the MBAP envelope.
"""

from typing import Optional

from ...const import DEFAULT_PROTOCOL_ID, DEFAULT_UNIT_ID, MAX_TRANSACTION_ID
from ..helpers.validators import ValidationError, validate_unit_id


class ModbusMessage:
    """Header common to all Modbus messages.

    Headless messages are framed without a transaction envelope (serial
    transports provide their own framing); their transaction and protocol
    identifiers are always None.

    Attributes:
        function_code: Protocol tag selecting the message shape
        unit_id: Slave unit identifier (0-255)
        headless: Whether the message has no transaction envelope
    """

    def __init__(
        self,
        function_code: int,
        unit_id: int = DEFAULT_UNIT_ID,
        headless: bool = False,
    ):
        self._function_code = function_code
        self._unit_id = validate_unit_id(unit_id)
        self._headless = headless
        self._transaction_id = 0
        self._protocol_id = DEFAULT_PROTOCOL_ID

    @property
    def function_code(self) -> int:
        """Function code of this message."""
        return self._function_code

    @property
    def unit_id(self) -> int:
        """Slave unit identifier."""
        return self._unit_id

    @unit_id.setter
    def unit_id(self, unit_id: int) -> None:
        self._unit_id = validate_unit_id(unit_id)

    @property
    def headless(self) -> bool:
        """True when the message carries no transaction envelope."""
        return self._headless

    @headless.setter
    def headless(self, headless: bool) -> None:
        self._headless = bool(headless)

    @property
    def transaction_id(self) -> Optional[int]:
        """Transaction identifier, None for headless messages."""
        return None if self._headless else self._transaction_id

    @transaction_id.setter
    def transaction_id(self, transaction_id: int) -> None:
        if not 0 <= transaction_id <= MAX_TRANSACTION_ID:
            raise ValidationError(
                f"Invalid transaction_id: {transaction_id} "
                f"(must be 0-{MAX_TRANSACTION_ID})"
            )
        self._transaction_id = transaction_id

    @property
    def protocol_id(self) -> Optional[int]:
        """Protocol identifier, None for headless messages."""
        return None if self._headless else self._protocol_id

    @protocol_id.setter
    def protocol_id(self, protocol_id: int) -> None:
        self._protocol_id = protocol_id

    def mirror_header(self, response: "ModbusMessage") -> None:
        """Copy this message's envelope and unit id onto a response."""
        response.headless = self._headless
        if not self._headless:
            response.transaction_id = self._transaction_id
            response.protocol_id = self._protocol_id
        response.unit_id = self._unit_id

    def _header_repr(self) -> str:
        if self._headless:
            return f"unit={self._unit_id}, headless"
        return f"unit={self._unit_id}, tid={self._transaction_id}"
