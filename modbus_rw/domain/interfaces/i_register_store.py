"""IRegisterStore interface for the slave-side process image."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.register import Register


class IRegisterStore(ABC):
    """Interface for the addressable register memory of a slave.

    Indices are zero-based within the store's own addressing. Ranges hand
    out the store's own Register cells (not copies), so writing through a
    returned register mutates the store.

    Concurrency:
        Implementations are not required to be thread-safe. Callers that
        combine a range read with a range write must serialize access
        themselves (see ResponseSynthesizer).

    Example:
        >>> store = SimpleRegisterStore([10, 20, 30, 40])
        >>> [r.value for r in store.get_register_range(1, 2)]
        [20, 30]
        >>> store.get_register_range(3, 2)  # Raises IllegalAddressError
    """

    @abstractmethod
    def get_register_range(self, start: int, count: int) -> List[Register]:
        """Return `count` contiguous registers starting at `start`.

        Args:
            start: First register index
            count: Number of registers (0 is valid)

        Returns:
            The store's own Register cells, in address order

        Raises:
            IllegalAddressError: If any part of the range is outside the store
        """

    @abstractmethod
    def get_register(self, index: int) -> Register:
        """Return the register cell at `index`.

        Raises:
            IllegalAddressError: If index is outside the store
        """

    @abstractmethod
    def set_register(self, index: int, value: int) -> None:
        """Set the value of the register at `index`.

        Raises:
            IllegalAddressError: If index is outside the store
            ValidationError: If value is not a 16-bit value
        """

    @property
    @abstractmethod
    def register_count(self) -> int:
        """Number of addressable registers."""
