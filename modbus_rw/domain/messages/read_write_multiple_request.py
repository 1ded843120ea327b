"""ReadWriteMultipleRequest message (function code 0x17).

A combined request: read a block of registers, then write a block of
registers, answered with the values of the read block as they were before
the write.
"""

from typing import Iterable, List, Optional, Sequence, Union

from ...const import DEFAULT_UNIT_ID, FUNC_READ_WRITE_MULTIPLE
from ..entities.register import Register
from ..helpers.validators import (
    ValidationError,
    validate_register_address,
    validate_word_count,
)
from ..strategies.payload_decoder import PayloadDecoder
from .exception_response import ExceptionResponse
from .modbus_message import ModbusMessage
from .read_write_multiple_response import ReadWriteMultipleResponse


class ReadWriteMultipleRequest(ModbusMessage):
    """Read/Write Multiple Registers request.

    The write payload is an owned sequence of Register values; `write_count`
    is always its length and cannot be set on its own. Replacing the payload
    with set_registers() reallocates the sequence and recomputes the count.

    Attributes:
        read_start: First register to read (0x0000-0xFFFF)
        read_count: Number of registers to read (0-127)
        write_start: First register to write (0x0000-0xFFFF)
        write_count: Number of registers to write (derived)
        byte_count: Write payload size in bytes, always 2 * write_count
        payload_decoder: How the write payload is decoded off the wire

    Example:
        >>> request = ReadWriteMultipleRequest(
        ...     unit_id=1, read_start=0, read_count=4,
        ...     write_start=2, values=[99, 99],
        ... )
        >>> request.write_count
        2
        >>> request.byte_count
        4
        >>> request.set_registers([1, 2, 3])
        >>> request.write_count
        3
    """

    def __init__(
        self,
        unit_id: int = DEFAULT_UNIT_ID,
        read_start: int = 0,
        read_count: int = 0,
        write_start: int = 0,
        write_count: Optional[int] = None,
        values: Optional[Iterable[Union[int, Register]]] = None,
        payload_decoder: Optional[PayloadDecoder] = None,
        headless: bool = False,
    ):
        """Initialize request.

        Args:
            unit_id: Slave unit identifier
            read_start: First register to read
            read_count: Number of registers to read
            write_start: First register to write
            write_count: Number of zero-valued registers to write when no
                values are given; must match len(values) otherwise
            values: Register values to write
            payload_decoder: Write payload decoding strategy (default: words)
            headless: Frame without transaction envelope

        Raises:
            ValidationError: If any field is out of range or write_count
                disagrees with values
        """
        super().__init__(FUNC_READ_WRITE_MULTIPLE, unit_id, headless)
        self._read_start = validate_register_address(read_start, "read_start")
        self._read_count = validate_word_count(read_count, "read_count")
        self._write_start = validate_register_address(write_start, "write_start")
        self._payload_decoder = payload_decoder or PayloadDecoder.words()

        if values is None:
            count = validate_word_count(write_count or 0, "write_count")
            self._registers = [Register() for _ in range(count)]
        else:
            self._registers = self._allocate(values)
            if write_count is not None and write_count != len(self._registers):
                raise ValidationError(
                    f"write_count {write_count} does not match "
                    f"{len(self._registers)} register values"
                )

    @staticmethod
    def _allocate(values: Iterable[Union[int, Register]]) -> List[Register]:
        registers = [
            value.copy() if isinstance(value, Register) else Register(value)
            for value in values
        ]
        validate_word_count(len(registers), "write_count")
        return registers

    @property
    def read_start(self) -> int:
        """First register to read."""
        return self._read_start

    @read_start.setter
    def read_start(self, start: int) -> None:
        self._read_start = validate_register_address(start, "read_start")

    @property
    def read_count(self) -> int:
        """Number of registers to read."""
        return self._read_count

    @read_count.setter
    def read_count(self, count: int) -> None:
        self._read_count = validate_word_count(count, "read_count")

    @property
    def write_start(self) -> int:
        """First register to write."""
        return self._write_start

    @write_start.setter
    def write_start(self, start: int) -> None:
        self._write_start = validate_register_address(start, "write_start")

    @property
    def write_count(self) -> int:
        """Number of registers to write."""
        return len(self._registers)

    @property
    def byte_count(self) -> int:
        """Write payload size in bytes."""
        return self.write_count * 2

    @property
    def payload_decoder(self) -> PayloadDecoder:
        """Write payload decoding strategy chosen at construction."""
        return self._payload_decoder

    def set_registers(self, values: Iterable[Union[int, Register]]) -> None:
        """Replace the write payload.

        Args:
            values: New register values (ints or Register cells, copied)

        Raises:
            ValidationError: If more than MAX_WORDS values are given
        """
        self._registers = self._allocate(values)

    def get_registers(self) -> List[Register]:
        """Return copies of the registers to be written."""
        return [register.copy() for register in self._registers]

    def get_register(self, index: int) -> Register:
        """Return the register to be written at `index`.

        Raises:
            IndexError: If index is out of bounds
        """
        if index < 0:
            raise IndexError(f"{index} < 0")
        if index >= self.write_count:
            raise IndexError(f"{index} >= {self.write_count}")
        return self._registers[index]

    def get_register_value(self, index: int) -> int:
        """Return the unsigned value of the register to be written at `index`."""
        return self.get_register(index).to_unsigned_short()

    @property
    def values(self) -> List[int]:
        """Unsigned values of the write payload."""
        return [register.value for register in self._registers]

    def get_response(
        self, values: Sequence[Union[int, Register]] = ()
    ) -> ReadWriteMultipleResponse:
        """Build a response mirroring this request's header.

        Args:
            values: Read register values for the response payload

        Returns:
            Response with unit id, function code and (unless headless)
            transaction/protocol ids copied from this request
        """
        response = ReadWriteMultipleResponse(values, unit_id=self.unit_id)
        self.mirror_header(response)
        return response

    def create_exception_response(self, exception_code: int) -> ExceptionResponse:
        """Build an exception response mirroring this request's header."""
        response = ExceptionResponse(self.function_code, exception_code, self.unit_id)
        self.mirror_header(response)
        return response

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ReadWriteMultipleRequest):
            return NotImplemented
        return (
            self.unit_id == other.unit_id
            and self._read_start == other._read_start
            and self._read_count == other._read_count
            and self._write_start == other._write_start
            and self.values == other.values
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"ReadWriteMultipleRequest({self._header_repr()}, "
            f"read=0x{self._read_start:04X}+{self._read_count}, "
            f"write=0x{self._write_start:04X}+{self.write_count}, "
            f"values={self.values})"
        )
