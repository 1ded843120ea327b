"""Write-payload decoding strategy.

The 0x17 request payload is normally one big-endian word per register. A
request can instead be constructed with a custom non-word handler which
interprets the payload bytes itself. The choice is a tagged value fixed at
request-construction time rather than a subclass of the request.
"""

import struct
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..exceptions import MalformedMessageError, ModbusError
from ..helpers.validators import validate_register_value
from ..interfaces.i_non_word_data_handler import INonWordDataHandler


class PayloadKind(Enum):
    """Available payload interpretations."""

    WORDS = "words"  # Fixed 2 bytes per register, big-endian
    CUSTOM = "custom"  # Delegated to an INonWordDataHandler


@dataclass(frozen=True)
class PayloadDecoder:
    """Tagged choice between word decoding and a custom handler.

    Attributes:
        kind: Which interpretation applies
        handler: Custom handler, present only for PayloadKind.CUSTOM

    Example:
        >>> PayloadDecoder.words().decode(b"\\x00\\x63\\x00\\x64", 0, 2)
        [99, 100]
        >>> decoder = PayloadDecoder.custom(my_handler)
        >>> decoder.is_custom
        True
    """

    kind: PayloadKind = PayloadKind.WORDS
    handler: Optional[INonWordDataHandler] = None

    def __post_init__(self) -> None:
        """Validate the tag matches the presence of a handler."""
        if self.kind is PayloadKind.CUSTOM and self.handler is None:
            raise ValueError("Custom payload decoding requires a handler")
        if self.kind is PayloadKind.WORDS and self.handler is not None:
            raise ValueError("Word payload decoding does not take a handler")

    @classmethod
    def words(cls) -> "PayloadDecoder":
        """Default fixed-width decoder."""
        return cls(PayloadKind.WORDS)

    @classmethod
    def custom(cls, handler: INonWordDataHandler) -> "PayloadDecoder":
        """Decoder delegating to a non-word data handler."""
        return cls(PayloadKind.CUSTOM, handler)

    @property
    def is_custom(self) -> bool:
        """True when a non-word handler owns the payload."""
        return self.kind is PayloadKind.CUSTOM

    def decode(self, payload: bytes, reference: int, count: int) -> List[int]:
        """Turn the write payload into register values.

        Args:
            payload: Exactly `byte_count` bytes from the wire
            reference: Write start address from the request
            count: Write count field from the request

        Returns:
            Unsigned 16-bit values to write

        Raises:
            MalformedMessageError: If the payload cannot be interpreted
        """
        if self.kind is PayloadKind.CUSTOM:
            try:
                values = self.handler.read_data(payload, reference, count)
            except ModbusError:
                raise
            except Exception as err:
                raise MalformedMessageError(
                    f"Non-word handler failed to read payload: {err!r}"
                ) from err
            try:
                return [validate_register_value(value) for value in values]
            except (TypeError, ValueError) as err:
                raise MalformedMessageError(
                    f"Non-word handler produced invalid value: {err}"
                ) from err

        if len(payload) % 2:
            raise MalformedMessageError(
                f"Byte count {len(payload)} is not a whole number of registers"
            )

        # Word count comes from the byte count; the two are one datum on the wire
        return list(struct.unpack(f">{len(payload) // 2}H", payload))
