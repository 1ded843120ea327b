"""Constants for the Read/Write Multiple Registers exchange.

This file contains protocol constants, limits and defaults shared by the
codec, the slave-side synthesizer and the master-side transaction loop.
"""

# Unit identifiers
DEFAULT_UNIT_ID = 0
MAX_UNIT_ID = 255

# Modbus function codes
FUNC_READ_HOLDING = 0x03
FUNC_WRITE_MULTIPLE = 0x10
FUNC_READ_WRITE_MULTIPLE = 0x17
EXCEPTION_FLAG = 0x80

# MBAP envelope defaults (non-headless messages)
DEFAULT_PROTOCOL_ID = 0
MAX_TRANSACTION_ID = 0xFFFF

# Register limits
MIN_REGISTER = 0x0000
MAX_REGISTER = 0xFFFF
MAX_WORDS = 127  # byte count is a single unsigned byte

# Fixed part of the 0x17 request payload: 4 words + byte count
REQUEST_HEADER_SIZE = 9
RESPONSE_HEADER_SIZE = 1

# Timing (milliseconds)
DEFAULT_RECEIVE_TIMEOUT = 500

# Exerciser defaults
DEFAULT_REPEAT = 1


# ============================================================================
# MODBUS ERROR CODES
# ============================================================================

# Error codes for Modbus exception responses
MODBUS_ERROR_CODES = {
    0x01: "Illegal function - slave does not support this function code",
    0x02: "Illegal data address - register range outside the process image",
    0x03: "Illegal data value - malformed request payload",
    0x04: "Slave device failure - unrecoverable error while processing",
    0x05: "Acknowledge - request accepted, processing takes a long time",
    0x06: "Slave device busy - retry later",
    0x08: "Memory parity error",
    0x0A: "Gateway path unavailable",
    0x0B: "Gateway target device failed to respond",
}


def format_modbus_error(error_code: int) -> str:
    """Format a Modbus exception code for log output.

    Args:
        error_code: Exception code byte from an exception response

    Returns:
        Human-readable string such as ``"0x02 (Illegal data address - ...)"``
    """
    description = MODBUS_ERROR_CODES.get(error_code, "Unknown error")
    return f"0x{error_code:02X} ({description})"
