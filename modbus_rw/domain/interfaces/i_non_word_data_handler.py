"""INonWordDataHandler interface for custom write-payload interpretation."""

from abc import ABC, abstractmethod
from typing import Sequence


class INonWordDataHandler(ABC):
    """Converts a write payload that is not plain 16-bit words.

    Some devices pack values into the write payload in a layout other than
    one big-endian word per register (packed bytes, BCD, floats spanning
    two registers...). A handler takes full ownership of the `byte_count`
    payload bytes and produces the register values to write.

    Example:
        >>> class ByteHandler(INonWordDataHandler):
        ...     def read_data(self, payload, reference, count):
        ...         return list(payload)  # one register per byte
    """

    @abstractmethod
    def read_data(self, payload: bytes, reference: int, count: int) -> Sequence[int]:
        """Interpret the write payload.

        Args:
            payload: Exactly `byte_count` bytes taken off the wire
            reference: Write start address from the request
            count: Write register count from the request

        Returns:
            Register values to write, in order

        Raises:
            MalformedMessageError: If the payload cannot be interpreted
        """
