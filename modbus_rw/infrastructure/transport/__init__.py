"""Transport implementations.

Physical transports (TCP, UDP, serial) live outside this package and only
need to implement the domain ITransport interface.
"""

from .loopback_transport import LoopbackTransport

__all__ = [
    "LoopbackTransport",
]
