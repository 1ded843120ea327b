"""Domain strategies."""

from .payload_decoder import PayloadDecoder, PayloadKind

__all__ = [
    "PayloadDecoder",
    "PayloadKind",
]
