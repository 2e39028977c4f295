"""Structured error records carried by Failure values.

ErrorInfo is the message-carrying record stored on a Failure when the error
is built from text or from a caught exception. FailableException is the only
exception the library raises itself, and only outside pipelines (e.g. when
unwrapping the wrong variant).
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .types import JsonDict

if TYPE_CHECKING:
    from ...monads.result import Failable


class ErrorInfo(BaseModel):
    """Error record for a Failure.

    Attributes:
        message: Human-readable error message
        cause: Type and text of the exception that produced the failure, if any
        details: Formatted traceback of that exception
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        revalidate_instances="never",
        json_schema_extra={
            "title": "Error Info",
            "examples": [{
                "message": "function at index 2 threw an exception",
                "cause": "KeyError: 'user_id'",
            }],
        },
    )

    message: Annotated[str, Field(description="Human-readable error message")]
    cause: str | None = Field(default=None, description="Exception type and text")
    details: str | None = Field(default=None, repr=False, description="Formatted traceback")

    def __hash__(self) -> int:
        return hash((self.message, self.cause))

    def __str__(self) -> str:
        return f"{self.message} ({self.cause})" if self.cause else self.message


_ErrorInfoAdapter: TypeAdapter[ErrorInfo] = TypeAdapter(ErrorInfo)


def error_info(message: str) -> ErrorInfo:
    """Create ErrorInfo from a message (bypasses validation)."""
    return ErrorInfo.model_construct(message=message, cause=None, details=None)


def _safe_str(exc: BaseException) -> str:
    """str(exc) that cannot raise; a broken __str__ yields a placeholder."""
    try:
        return str(exc)
    except Exception:
        return "<exception str() failed>"


def error_info_from_exc(exc: BaseException, message: str | None = None) -> ErrorInfo:
    """Create ErrorInfo keeping the exception as cause and its traceback as details.

    Never raises, even for exceptions whose __str__ is broken.
    """
    text = _safe_str(exc)
    return ErrorInfo.model_construct(
        message=message or text or type(exc).__name__,
        cause=f"{type(exc).__name__}: {text}",
        details="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
    )


def validate_error_info(data: JsonDict) -> ErrorInfo:
    """Validate dict as ErrorInfo (use when validation is needed)."""
    return _ErrorInfoAdapter.validate_python(data)


def error_message(error: object) -> str | None:
    """Extract a message from whatever a Failure carries.

    Handles ErrorInfo, mappings with a "message" key and exceptions.
    Returns None when no message can be found.
    """
    match error:
        case ErrorInfo(): return error.message
        case {"message": str() as msg}: return msg
        case BaseException(): return str(error)
        case str(): return error
        case _: return None


class FailableException(RuntimeError):
    """Raised when a Failable is unwrapped as the wrong variant."""

    __slots__ = ("result",)

    def __init__(self, message: str, result: Failable[object]) -> None:
        self.result = result
        super().__init__(message)
