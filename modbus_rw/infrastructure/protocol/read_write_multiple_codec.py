"""Wire codec for Read/Write Multiple Registers (0x17) payloads.

Pure functions converting between messages and the data bytes that follow
the function code. All multi-byte fields are big-endian, without padding.

Request data:
    offset 0: read_start               (2 bytes)
    offset 2: read_count               (2 bytes)
    offset 4: write_start              (2 bytes)
    offset 6: write_count              (2 bytes)
    offset 8: byte_count = 2 * write_count (1 byte)
    offset 9: write_count registers, 2 bytes each

Response data:
    offset 0: byte_count = 2 * read_count (1 byte)
    offset 1: read_count registers, 2 bytes each
"""

import logging
import struct
from typing import Optional

from ...const import DEFAULT_UNIT_ID, REQUEST_HEADER_SIZE, RESPONSE_HEADER_SIZE
from ...domain.exceptions import MalformedMessageError, TruncatedMessageError
from ...domain.helpers.validators import ValidationError
from ...domain.messages import (
    ExceptionResponse,
    ReadWriteMultipleRequest,
    ReadWriteMultipleResponse,
)
from ...domain.strategies import PayloadDecoder

_LOGGER = logging.getLogger(__name__)

_REQUEST_HEADER = struct.Struct(">HHHHB")


def _pack_words(values) -> bytes:
    return struct.pack(f">{len(values)}H", *values)


def _take_payload(data: bytes, offset: int, byte_count: int) -> bytes:
    """Return exactly `byte_count` bytes after `offset` or raise."""
    payload = data[offset : offset + byte_count]
    if len(payload) < byte_count:
        raise TruncatedMessageError(
            f"Message declares {byte_count} payload bytes, only {len(payload)} available",
            expected=byte_count,
            available=len(payload),
        )
    return payload


def encode_request(request: ReadWriteMultipleRequest) -> bytes:
    """Encode request data.

    Args:
        request: Request to encode

    Returns:
        ``9 + 2 * write_count`` bytes; the byte count field is derived from
        the write payload, never taken from elsewhere

    Example:
        >>> request = ReadWriteMultipleRequest(
        ...     read_start=0, read_count=4, write_start=2, values=[99, 99]
        ... )
        >>> encode_request(request).hex()
        '00000004000200020400630063'
    """
    values = request.values
    return _REQUEST_HEADER.pack(
        request.read_start,
        request.read_count,
        request.write_start,
        len(values),
        len(values) * 2,
    ) + _pack_words(values)


def decode_request(
    data: bytes,
    unit_id: int = DEFAULT_UNIT_ID,
    payload_decoder: Optional[PayloadDecoder] = None,
    headless: bool = False,
) -> ReadWriteMultipleRequest:
    """Decode request data into a fresh request.

    Reads the four header words and the byte count, then exactly
    `byte_count` payload bytes. The payload is interpreted by
    `payload_decoder` (one word per register unless a custom non-word
    handler is supplied). Bytes beyond the declared payload are ignored;
    message boundaries belong to the transport framing.

    Args:
        data: Request data (without function code)
        unit_id: Unit identifier to stamp on the request
        payload_decoder: Write payload decoding strategy
        headless: Whether the request arrived without transaction envelope

    Returns:
        Populated request

    Raises:
        TruncatedMessageError: If fewer bytes remain than declared
        MalformedMessageError: If the payload or a field is invalid
    """
    if len(data) < REQUEST_HEADER_SIZE:
        raise TruncatedMessageError(
            f"Request too short: {len(data)} bytes, header needs {REQUEST_HEADER_SIZE}",
            expected=REQUEST_HEADER_SIZE,
            available=len(data),
        )

    read_start, read_count, write_start, write_count, byte_count = (
        _REQUEST_HEADER.unpack_from(data)
    )
    payload = _take_payload(data, REQUEST_HEADER_SIZE, byte_count)

    decoder = payload_decoder or PayloadDecoder.words()
    values = decoder.decode(payload, write_start, write_count)

    try:
        request = ReadWriteMultipleRequest(
            unit_id=unit_id,
            read_start=read_start,
            read_count=read_count,
            write_start=write_start,
            values=values,
            payload_decoder=decoder,
            headless=headless,
        )
    except ValidationError as err:
        raise MalformedMessageError(f"Invalid request field: {err}") from err

    if _LOGGER.isEnabledFor(logging.DEBUG):
        _LOGGER.debug(
            "Decoded request: read=0x%04X+%d, write=0x%04X+%d (%s payload)",
            read_start,
            read_count,
            write_start,
            request.write_count,
            decoder.kind.value,
        )

    return request


def encode_response(response: ReadWriteMultipleResponse) -> bytes:
    """Encode response data: byte count followed by the read registers.

    Example:
        >>> encode_response(ReadWriteMultipleResponse([10, 20])).hex()
        '04000a0014'
    """
    values = response.values
    return struct.pack(">B", len(values) * 2) + _pack_words(values)


def decode_response(
    data: bytes, request: Optional[ReadWriteMultipleRequest] = None
) -> ReadWriteMultipleResponse:
    """Decode response data.

    Args:
        data: Response data (without function code)
        request: Request being answered; its header is mirrored

    Returns:
        Response carrying `byte_count / 2` registers

    Raises:
        TruncatedMessageError: If fewer bytes remain than declared
        MalformedMessageError: If the byte count is odd
    """
    if len(data) < RESPONSE_HEADER_SIZE:
        raise TruncatedMessageError(
            "Response has no byte count", expected=RESPONSE_HEADER_SIZE, available=0
        )

    byte_count = data[0]
    payload = _take_payload(data, RESPONSE_HEADER_SIZE, byte_count)
    if byte_count % 2:
        raise MalformedMessageError(
            f"Byte count {byte_count} is not a whole number of registers"
        )

    values = struct.unpack(f">{byte_count // 2}H", payload)

    if request is not None:
        return request.get_response(values)
    return ReadWriteMultipleResponse(values)


def encode_exception(response: ExceptionResponse) -> bytes:
    """Encode exception response data: the single exception code byte."""
    return struct.pack(">B", response.exception_code)
