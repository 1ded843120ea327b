"""Test doubles for unit testing.

Test doubles are fake implementations of interfaces used for testing.
They're faster and more reliable than mocking, and they implement the
actual interface contracts.

Example:
    >>> from doubles import FakeTransport
    >>> transport = FakeTransport(handler=slave.handle)
    >>> transport.fail_on_call(3, asyncio.TimeoutError())
    >>> await transport.connect("fake")
    >>> response = await transport.send(request_pdu)
"""

from .fake_transport import FakeTransport

__all__ = [
    "FakeTransport",
]
