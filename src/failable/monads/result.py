"""Failable: the success/failure value passed between pipeline stages.

A closed two-variant union:
- Success carries an optional payload (None is a legal "empty" success)
- Failure carries an error, usually an ErrorInfo with a message

Constructors (success, empty_success, failure) and predicates are plain
module functions so stages can be written without touching the class.
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    TypeVar,
    cast,
)

from ..foundation.errors import ErrorInfo, FailableException, error_info

if TYPE_CHECKING:
    from ..foundation.errors import JsonDict

T = TypeVar("T")  # Payload type
U = TypeVar("U")  # Mapped payload type


class Failable(Generic[T]):
    """Discriminated union representing Success or Failure.

    Examples:
        >>> success(42).map(lambda x: x * 2)
        Success(84)

        >>> failure("failed").map(lambda x: x * 2).error.message
        'failed'

    Notes:
        - Uses __slots__ and rejects attribute assignment after construction
        - All operations return new Failable values
    """

    __slots__ = ("_value", "_success")
    __match_args__ = ("_value",)

    def __init__(self, value: object, success: bool) -> None:
        """Private constructor. Use success(), empty_success() or failure() instead."""
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_success", success)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Failable is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Failable is immutable, cannot delete {name!r}")

    # ─────────────────────────────────────────────────────────────────
    # Variant Inspection
    # ─────────────────────────────────────────────────────────────────

    @property
    def success(self) -> bool:
        """True for the Success variant."""
        return self._success

    @property
    def payload(self) -> T | None:
        """Success payload, None on Failure."""
        return cast(T, self._value) if self._success else None

    @property
    def error(self) -> object:
        """Failure error, None on Success."""
        return None if self._success else self._value

    def is_success(self) -> bool:
        return self._success

    def is_failure(self) -> bool:
        return not self._success

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def unwrap(self) -> T | None:
        """Extract Success payload.

        Raises:
            FailableException: If this is a Failure
        """
        if self._success:
            return cast(T, self._value)
        raise FailableException(f"Called unwrap() on Failure value: {self._value}", self)

    def unwrap_err(self) -> object:
        """Extract Failure error.

        Raises:
            FailableException: If this is a Success
        """
        if not self._success:
            return self._value
        raise FailableException(f"Called unwrap_err() on Success value: {self._value!r}", self)

    def unwrap_or(self, default: T) -> T | None:
        """Extract Success payload or return default."""
        return cast(T, self._value) if self._success else default

    # ─────────────────────────────────────────────────────────────────
    # Composition
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T | None], U]) -> Failable[U]:
        """Apply f to the payload of a Success, pass a Failure through unchanged."""
        if self._success:
            return success(f(cast(T, self._value)))
        return cast("Failable[U]", self)

    def flat_map(self, f: Callable[[T | None], Failable[U]]) -> Failable[U]:
        """Chain a payload-consuming step that itself returns a Failable."""
        if self._success:
            return f(cast(T, self._value))
        return cast("Failable[U]", self)

    def and_then(self, f: Callable[[T | None], Failable[U]]) -> Failable[U]:
        """Alias for flat_map for better readability."""
        return self.flat_map(f)

    def match(
        self,
        *,
        success: Callable[[T | None], U],
        failure: Callable[[object], U],
    ) -> U:
        """Exhaustive case analysis over both variants.

        Example:
            >>> success(3).match(success=lambda p: p + 1, failure=lambda e: 0)
            4
        """
        if self._success:
            return success(cast(T, self._value))
        return failure(self._value)

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_dict(self) -> JsonDict:
        """Wire shape: {"success": True, "payload": ...} or {"success": False, "error": ...}."""
        if self._success:
            return {"success": True, "payload": self._value}
        err = self._value.model_dump(exclude_none=True) if isinstance(self._value, ErrorInfo) else self._value
        return {"success": False, "error": err}

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Success."""
        return self._success

    def __repr__(self) -> str:
        variant = "Success" if self._success else "Failure"
        return f"{variant}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Failable):
            return NotImplemented
        return self._success == other._success and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._success, self._value))


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def success(payload: T | None = None) -> Failable[T]:
    """Construct the Success variant. An omitted payload gives an empty success."""
    return Failable(payload, success=True)


def empty_success() -> Failable[T]:
    """Construct a Success with no payload; same as success()."""
    return Failable(None, success=True)


empty = empty_success


def failure(error: object = None) -> Failable[T]:
    """Construct the Failure variant.

    A string is wrapped as ErrorInfo(message=...). Any other value, including
    an ErrorInfo or a mapping, is stored unchanged.
    """
    return Failable(error_info(error) if isinstance(error, str) else error, success=False)


# ═════════════════════════════════════════════════════════════════════════════
# Predicates
# ═════════════════════════════════════════════════════════════════════════════


def is_success(r: Failable[T]) -> bool:
    return r.success


def is_failure(r: Failable[T]) -> bool:
    return not r.success


def is_empty(r: Failable[T]) -> bool:
    """True for a Success whose payload is None."""
    return r.success and r.payload is None


def has_payload(r: Failable[T]) -> bool:
    """True for a Success whose payload is not None. Falsy payloads (0, "", False) count."""
    return r.success and r.payload is not None


def is_failable(value: object) -> bool:
    """Check an arbitrary value returned by a caller-supplied function."""
    return isinstance(value, Failable)
