"""Modbus exception codes."""

from enum import IntEnum


class ExceptionCode(IntEnum):
    """Modbus exception codes carried by exception responses."""

    ILLEGAL_FUNCTION = 0x01  # Function code not supported by the slave
    ILLEGAL_DATA_ADDRESS = 0x02  # Register range outside the process image
    ILLEGAL_DATA_VALUE = 0x03  # Malformed request payload
    SLAVE_DEVICE_FAILURE = 0x04
    ACKNOWLEDGE = 0x05
    SLAVE_DEVICE_BUSY = 0x06
    MEMORY_PARITY_ERROR = 0x08
    GATEWAY_PATH_UNAVAILABLE = 0x0A
    GATEWAY_TARGET_NO_RESPONSE = 0x0B
