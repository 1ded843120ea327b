"""Register entity.

A Register is a mutable 16-bit cell. Identity is positional: the store owns
the cell at an index, and messages carry copies of register values in and
out.
"""

from ..helpers.transformations import convert_to_signed_int16
from ..helpers.validators import validate_register_value


class Register:
    """Mutable 16-bit register cell.

    The value is kept unsigned (0-65535). Assignments accept signed values
    down to -32768 and store their two's complement.

    Example:
        >>> register = Register(486)
        >>> register.to_bytes()
        b'\\x01\\xe6'
        >>> register.value = -1
        >>> register.value
        65535
        >>> register.to_short()
        -1
    """

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        """Initialize register.

        Args:
            value: Initial value (-32768..65535)

        Raises:
            ValidationError: If value is out of range
        """
        self._value = validate_register_value(value)

    @classmethod
    def from_bytes(cls, high: int, low: int) -> "Register":
        """Build a register from its big-endian byte pair."""
        return cls(((high & 0xFF) << 8) | (low & 0xFF))

    @property
    def value(self) -> int:
        """Unsigned 16-bit value."""
        return self._value

    @value.setter
    def value(self, value: int) -> None:
        self._value = validate_register_value(value)

    def copy(self) -> "Register":
        """Return an independent register holding the same value."""
        return Register(self._value)

    def to_bytes(self) -> bytes:
        """Return the value as two big-endian bytes."""
        return self._value.to_bytes(2, byteorder="big")

    def to_short(self) -> int:
        """Return the value interpreted as signed 16-bit."""
        return convert_to_signed_int16(self._value)

    def to_unsigned_short(self) -> int:
        """Return the value interpreted as unsigned 16-bit."""
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Register):
            return self._value == other._value
        return NotImplemented

    # Mutable cell compared by value
    __hash__ = None

    def __repr__(self) -> str:
        return f"Register(0x{self._value:04X})"
