"""Stage normalization: force any callable into "async, never raises, returns a Failable".

A stage supplied by a caller can be:
    - a plain sync function returning a value
    - a function returning an awaitable (coroutine functions included)
    - either of the above already returning a Failable

normalise_function() composes two adapters:
    make_it_async     resolve whatever the function returns into a concrete value
    make_it_failable  turn exceptions and non-Failable values into tagged Failures

The stage index is fixed when the function is normalised so every failure
produced here points at the stage's position in the caller's list.
"""

from __future__ import annotations

import functools
import inspect
from typing import TYPE_CHECKING, Any, Callable, TypeAlias

from ..foundation.errors import error_info_from_exc
from ..monads import Failable, failure, is_failable
from ..runtime.observability import get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable

StageFunction: TypeAlias = Callable[..., Any]
AsyncStage: TypeAlias = "Callable[..., Awaitable[Any]]"
NormalisedStage: TypeAlias = "Callable[..., Awaitable[Failable[Any]]]"

THREW_MESSAGE = "function at index {index} threw an exception"
NOT_FAILABLE_MESSAGE = "function at index {index} did not return failable"

_log = get_logger("failable.normalize")

# Marks "called with no argument" so None can still be passed through
_MISSING: Any = object()

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def _accepts_argument(fn: Callable[..., object]) -> bool:
    """Whether fn can take a positional argument. Unknown signatures are assumed to."""
    try:
        params = inspect.signature(fn).parameters.values()
    except (TypeError, ValueError):
        return True
    return any(p.kind in _POSITIONAL for p in params)


async def _resolve(value: object) -> object:
    return await value if inspect.isawaitable(value) else value


def make_it_async(fn: StageFunction) -> AsyncStage:
    """Wrap fn so calling it always yields an awaitable of its resolved value.

    Sync return values are treated as already resolved; nothing is offloaded
    to threads. Functions without a positional parameter (zero-argument or
    keyword-only/**kwargs-only) are called without the argument.

    Example:
        >>> lifted = make_it_async(lambda: 12)
        >>> run_sync(lifted())
        12
    """
    takes_arg = _accepts_argument(fn)

    @functools.wraps(fn)
    async def lifted(arg: object = _MISSING) -> object:
        value = fn(arg) if takes_arg and arg is not _MISSING else fn()
        return await _resolve(value)

    return lifted


def make_it_failable(index: int, fn: StageFunction) -> NormalisedStage:
    """Wrap fn so it never raises and always resolves to a Failable.

    - fn raises (or its awaitable raises): Failure "function at index <index> threw an exception",
      with the exception kept as ErrorInfo.cause/details
    - fn resolves to something that is not a Failable: Failure "function at index <index> did not return failable"
    - otherwise the Failable is returned unchanged

    Only Exception subclasses are converted; cancellation and interpreter exits propagate.
    """
    @functools.wraps(fn)
    async def guarded(arg: object = _MISSING) -> Failable[Any]:
        try:
            result = await _resolve(fn() if arg is _MISSING else fn(arg))
        except Exception as exc:
            info = error_info_from_exc(exc, THREW_MESSAGE.format(index=index))
            _log.debug("stage raised", index=index, cause=info.cause)
            return failure(info)
        if not is_failable(result):
            _log.debug("stage returned non-failable", index=index, returned=type(result).__name__)
            return failure(NOT_FAILABLE_MESSAGE.format(index=index))
        return result

    return guarded


def normalise_function(index: int, fn: StageFunction) -> NormalisedStage:
    """Adapt fn at position index into an async, non-raising, Failable-returning stage.

    Example:
        >>> stage = normalise_function(0, lambda: 7)
        >>> run_sync(stage())
        Failure(ErrorInfo(message='function at index 0 did not return failable', cause=None))
    """
    return make_it_failable(index, make_it_async(fn))
