"""Domain interfaces.

This module defines the contracts (interfaces) that infrastructure
implementations must fulfill, so the exchange logic can be tested against
fakes and used with any transport or process image.
"""

from .i_non_word_data_handler import INonWordDataHandler
from .i_protocol import IProtocol
from .i_register_store import IRegisterStore
from .i_transport import ITransport

__all__ = [
    "INonWordDataHandler",
    "IProtocol",
    "IRegisterStore",
    "ITransport",
]
