"""ResponseSynthesizer for Read/Write Multiple Registers requests.

Builds the slave's answer to a decoded 0x17 request against a register
store. The read snapshot is taken strictly before the write is applied, so
overlapping read and write ranges return the pre-write values.
"""

import logging
import threading

from ...domain.exceptions import IllegalAddressError
from ...domain.interfaces import IRegisterStore
from ...domain.messages import ModbusMessage, ReadWriteMultipleRequest
from ...domain.value_objects import ExceptionCode

_LOGGER = logging.getLogger(__name__)


class ResponseSynthesizer:
    """Service answering 0x17 requests from a register store.

    Order of operations:
    1. Fetch the read range (ILLEGAL_DATA_ADDRESS if invalid, nothing mutated)
    2. Copy the read values into an independent snapshot
    3. Fetch the write range (ILLEGAL_DATA_ADDRESS if invalid, nothing mutated)
    4. Write the request's values into the write range, in order
    5. Respond with the snapshot

    Concurrency:
        The read-then-write pair runs under an internal lock, so concurrent
        synthesize() calls on one synthesizer never observe a torn state.
        Precondition: every writer of the store goes through the same
        synthesizer; direct store writes from other threads are not
        serialized.

    Example:
        >>> store = SimpleRegisterStore([10, 20, 30, 40])
        >>> synthesizer = ResponseSynthesizer(store)
        >>> request = ReadWriteMultipleRequest(
        ...     read_start=0, read_count=4, write_start=2, values=[99, 99]
        ... )
        >>> synthesizer.synthesize(request).values
        [10, 20, 30, 40]
        >>> store.values
        [10, 20, 99, 99]
    """

    def __init__(self, store: IRegisterStore):
        """Initialize synthesizer.

        Args:
            store: Register store the requests read from and write to
        """
        self._store = store
        self._lock = threading.Lock()

    @property
    def store(self) -> IRegisterStore:
        """Register store served by this synthesizer."""
        return self._store

    def synthesize(self, request: ReadWriteMultipleRequest) -> ModbusMessage:
        """Answer a request.

        Args:
            request: Decoded 0x17 request

        Returns:
            ReadWriteMultipleResponse carrying the pre-write read values, or
            an ExceptionResponse(ILLEGAL_DATA_ADDRESS)
        """
        with self._lock:
            try:
                read_registers = self._store.get_register_range(
                    request.read_start, request.read_count
                )
            except IllegalAddressError as err:
                _LOGGER.warning(
                    "Rejected read range 0x%04X+%d: %s",
                    request.read_start,
                    request.read_count,
                    err,
                )
                return request.create_exception_response(
                    ExceptionCode.ILLEGAL_DATA_ADDRESS
                )

            snapshot = [register.copy() for register in read_registers]

            try:
                write_registers = self._store.get_register_range(
                    request.write_start, request.write_count
                )
            except IllegalAddressError as err:
                _LOGGER.warning(
                    "Rejected write range 0x%04X+%d: %s",
                    request.write_start,
                    request.write_count,
                    err,
                )
                return request.create_exception_response(
                    ExceptionCode.ILLEGAL_DATA_ADDRESS
                )

            for index, register in enumerate(write_registers):
                register.value = request.get_register_value(index)

        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug(
                "Synthesized response: read 0x%04X+%d, wrote 0x%04X+%d",
                request.read_start,
                request.read_count,
                request.write_start,
                request.write_count,
            )

        return request.get_response(snapshot)
