"""Predicates over collections of Failable values."""

from __future__ import annotations

from functools import reduce
from typing import TYPE_CHECKING, TypeVar

from .result import is_failable, is_failure, is_success

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .result import Failable

T = TypeVar("T")


def _all_true(flags: Iterable[bool]) -> bool:
    return reduce(lambda acc, flag: flag and acc, flags, True)


def any_failed(results: Iterable[Failable[T]]) -> bool:
    """True if at least one result is a Failure. Empty input gives False."""
    return not _all_true(is_success(r) for r in results)


def first_failure(results: Iterable[Failable[T]]) -> Failable[T] | None:
    """Return the first Failure in order (the same object), or None if there is none.

    Example:
        >>> f1, f2 = failure("error 1"), failure("error 2")
        >>> first_failure([f1, success(), f2]) is f1
        True
    """
    return next((r for r in results if is_failure(r)), None)


def all_failable(items: Iterable[object]) -> bool:
    """True if every item is a Failable. Empty input gives True."""
    return _all_true(is_failable(item) for item in items)
