"""The Failable success/failure value and predicates over it.

Example:
    >>> from failable.monads import success, failure, any_failed
    >>>
    >>> def parse(s: str) -> Failable[int]:
    ...     return success(int(s)) if s.isdigit() else failure(f"not a number: {s}")
    >>>
    >>> any_failed([parse("1"), parse("x")])
    True
"""

from .aggregate import all_failable, any_failed, first_failure
from .result import (
    Failable,
    empty,
    empty_success,
    failure,
    has_payload,
    is_empty,
    is_failable,
    is_failure,
    is_success,
    success,
)

__all__ = [
    # Core type
    "Failable",
    # Constructors
    "success",
    "empty_success",
    "empty",
    "failure",
    # Predicates
    "is_success",
    "is_failure",
    "is_empty",
    "has_payload",
    "is_failable",
    # Collection predicates
    "any_failed",
    "first_failure",
    "all_failable",
]
