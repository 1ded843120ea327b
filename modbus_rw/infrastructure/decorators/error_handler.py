"""Error handling decorators for transport operations."""

import asyncio
import logging
from functools import wraps
from typing import Callable, Optional

from ...domain.exceptions import ModbusError, ModbusIOError


def handle_transport_errors(
    operation_name: str,
    logger: Optional[logging.Logger] = None,
):
    """Decorator translating transport failures into ModbusIOError.

    Timeouts, OS-level connection errors and unexpected exceptions raised
    by a transport all surface as ModbusIOError, so callers only classify
    the Modbus error hierarchy. ModbusError subclasses pass through. Only
    coroutine functions can be decorated.

    Args:
        operation_name: Human-readable operation name for logging
        logger: Logger to use (defaults to function's module logger)

    Example:
        @handle_transport_errors("Exchange")
        async def _exchange(self, pdu: bytes, timeout: float) -> bytes:
            return await asyncio.wait_for(self._transport.send(pdu, timeout), timeout)
    """

    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            log = logger or logging.getLogger(func.__module__)
            try:
                return await func(*args, **kwargs)
            except asyncio.TimeoutError as err:
                timeout_val = kwargs.get("timeout", "unknown")
                log.warning("%s timed out after %ss", operation_name, timeout_val)
                raise ModbusIOError(
                    f"{operation_name} timed out after {timeout_val}s"
                ) from err
            except ModbusError as err:
                log.debug("%s failed: %s", operation_name, err)
                raise
            except OSError as err:
                log.error("%s connection error: %s", operation_name, err)
                raise ModbusIOError(f"{operation_name} connection error: {err}") from err
            except Exception as err:
                log.error(
                    "%s unexpected error: %s",
                    operation_name,
                    err,
                    exc_info=True,
                )
                raise ModbusIOError(f"{operation_name} failed: {err}") from err

        return async_wrapper

    return decorator
