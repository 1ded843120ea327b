"""Value objects for the Modbus domain.

Value objects are immutable domain primitives with value-based equality.
"""

from .exception_code import ExceptionCode
from .function_code import FunctionCode

__all__ = [
    "ExceptionCode",
    "FunctionCode",
]
