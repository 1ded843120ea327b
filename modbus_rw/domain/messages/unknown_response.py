"""UnknownResponse message for function codes without a codec."""

from ...const import DEFAULT_UNIT_ID
from ..value_objects.function_code import FunctionCode
from .modbus_message import ModbusMessage


class UnknownResponse(ModbusMessage):
    """Response whose function code this package does not decode.

    Attributes:
        data: Raw data bytes following the function code
    """

    def __init__(self, function_code: int, data: bytes, unit_id: int = DEFAULT_UNIT_ID):
        super().__init__(function_code, unit_id)
        self.data = bytes(data)

    def __repr__(self) -> str:
        return (
            f"UnknownResponse({self._header_repr()}, "
            f"func={FunctionCode.describe(self.function_code)}, data={self.data.hex()})"
        )
