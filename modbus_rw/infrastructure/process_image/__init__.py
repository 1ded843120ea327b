"""Register store implementations."""

from .simple_register_store import SimpleRegisterStore

__all__ = [
    "SimpleRegisterStore",
]
