"""Assertion helpers for testing code that returns Failable values.

Example:
    >>> result = await failable_pipe([parse, validate])("42")
    >>> assert_success(result, 42)

    >>> assert_failure(await failable_sequence([])(None), "no functions were supplied")
"""

from __future__ import annotations

from typing import Any

from ..errors import error_message
from ...monads import Failable, is_failable

_UNSET: Any = object()


def assert_success(result: Failable[Any], expected: Any = _UNSET) -> Any:
    """Assert result is a Success, optionally with the expected payload. Returns the payload."""
    if not is_failable(result):
        raise AssertionError(f"Expected a Failable, got {type(result).__name__}: {result!r}")
    if result.is_failure():
        raise AssertionError(f"Expected success, got failure: {result.error}")
    if expected is not _UNSET and result.payload != expected:
        raise AssertionError(f"Expected payload {expected!r}, got {result.payload!r}")
    return result.payload


def assert_failure(result: Failable[Any], expected: Any = _UNSET) -> Any:
    """Assert result is a Failure, optionally with the expected error. Returns the error.

    A string expectation is compared against the error's message; anything
    else is compared against the error itself.
    """
    if not is_failable(result):
        raise AssertionError(f"Expected a Failable, got {type(result).__name__}: {result!r}")
    if result.is_success():
        raise AssertionError(f"Expected failure, got success with payload {result.payload!r}")
    if expected is not _UNSET:
        actual = error_message(result.error) if isinstance(expected, str) else result.error
        if actual != expected:
            raise AssertionError(f"Expected error {expected!r}, got {actual!r}")
    return result.error
