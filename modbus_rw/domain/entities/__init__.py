"""Domain entities.

Entities are domain objects with mutable state. A Register's identity is
its position in the store that owns it; two registers with the same value
compare equal but are distinct cells.
"""

from .register import Register
from .transaction_state import TransactionState

__all__ = [
    "Register",
    "TransactionState",
]
