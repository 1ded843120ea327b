"""In-memory register store.

A fixed-size process image of holding registers, addressed from zero.
"""

from typing import Iterable, List, Optional

from ...domain.entities import Register
from ...domain.exceptions import IllegalAddressError
from ...domain.interfaces import IRegisterStore


class SimpleRegisterStore(IRegisterStore):
    """Register store backed by a list of Register cells.

    Attributes:
        _registers: Owned register cells, index == address

    Example:
        >>> store = SimpleRegisterStore([10, 20, 30, 40])
        >>> store.get_register_range(2, 2)[0].value = 99
        >>> store.values
        [10, 20, 99, 40]
        >>> SimpleRegisterStore(size=3).values
        [0, 0, 0]
    """

    def __init__(self, values: Optional[Iterable[int]] = None, size: int = 0):
        """Initialize store.

        Args:
            values: Initial register values (defines the store size)
            size: Number of zero registers when no values are given
        """
        if values is None:
            self._registers: List[Register] = [Register() for _ in range(size)]
        else:
            self._registers = [Register(value) for value in values]

    def _check_range(self, start: int, count: int) -> None:
        if start < 0 or count < 0 or start + count > len(self._registers):
            raise IllegalAddressError(
                f"Register range {start}+{count} outside store of "
                f"{len(self._registers)} registers"
            )

    def get_register_range(self, start: int, count: int) -> List[Register]:
        """Return the store's own cells for `start..start+count-1`."""
        self._check_range(start, count)
        return self._registers[start : start + count]

    def get_register(self, index: int) -> Register:
        """Return the store's own cell at `index`."""
        self._check_range(index, 1)
        return self._registers[index]

    def set_register(self, index: int, value: int) -> None:
        """Set the value of the cell at `index`."""
        self.get_register(index).value = value

    @property
    def register_count(self) -> int:
        """Number of addressable registers."""
        return len(self._registers)

    @property
    def values(self) -> List[int]:
        """Snapshot of all register values."""
        return [register.value for register in self._registers]
