"""ReadWriteMultipleResponse message (function code 0x17)."""

from typing import Iterable, List, Union

from ...const import DEFAULT_UNIT_ID, FUNC_READ_WRITE_MULTIPLE
from ..entities.register import Register
from .modbus_message import ModbusMessage


class ReadWriteMultipleResponse(ModbusMessage):
    """Response to a Read/Write Multiple Registers request.

    Carries the values of the read range as they were before the write was
    applied. The register sequence is owned by the response and fixed at
    construction; accessors hand out copies.

    Example:
        >>> response = ReadWriteMultipleResponse([10, 20, 30, 40])
        >>> response.word_count
        4
        >>> response.byte_count
        8
        >>> response.get_register_value(2)
        30
    """

    def __init__(
        self,
        values: Iterable[Union[int, Register]] = (),
        unit_id: int = DEFAULT_UNIT_ID,
    ):
        """Initialize response.

        Args:
            values: Read register values (ints or Register cells, copied)
            unit_id: Slave unit identifier
        """
        super().__init__(FUNC_READ_WRITE_MULTIPLE, unit_id)
        self._registers: List[Register] = [
            value.copy() if isinstance(value, Register) else Register(value)
            for value in values
        ]

    @property
    def word_count(self) -> int:
        """Number of registers read."""
        return len(self._registers)

    @property
    def byte_count(self) -> int:
        """Number of payload bytes carrying the registers."""
        return self.word_count * 2

    def get_registers(self) -> List[Register]:
        """Return copies of the read registers."""
        return [register.copy() for register in self._registers]

    def get_register(self, index: int) -> Register:
        """Return a copy of the register at `index`.

        Raises:
            IndexError: If index is out of bounds
        """
        if not 0 <= index < self.word_count:
            raise IndexError(
                f"Register index {index} out of range 0-{self.word_count - 1}"
            )
        return self._registers[index].copy()

    def get_register_value(self, index: int) -> int:
        """Return the unsigned value of the register at `index`."""
        return self.get_register(index).to_unsigned_short()

    @property
    def values(self) -> List[int]:
        """Unsigned values of all read registers."""
        return [register.value for register in self._registers]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadWriteMultipleResponse):
            return NotImplemented
        return self.unit_id == other.unit_id and self.values == other.values

    __hash__ = None

    def __repr__(self) -> str:
        return f"ReadWriteMultipleResponse({self._header_repr()}, values={self.values})"
