"""Error records and exceptions for failable.

- ErrorInfo: message-carrying record stored on Failure values
- FailableException: raised when unwrapping the wrong variant
- TypeAdapter utilities: validate_error_info for validation at boundaries
"""

from .errors import (
    ErrorInfo,
    FailableException,
    error_info,
    error_info_from_exc,
    error_message,
    validate_error_info,
)
from .types import JsonDict, JsonMapping, JsonPrimitive, JsonValue

__all__ = [
    "ErrorInfo", "FailableException",
    "error_info", "error_info_from_exc", "error_message", "validate_error_info",
    "JsonDict", "JsonMapping", "JsonPrimitive", "JsonValue",
]
