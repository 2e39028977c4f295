"""Sequential composition of stages with short-circuit on the first Failure.

Sequence: every stage gets the same argument, only overall success matters
Pipe:     each stage gets the previous stage's payload

    >>> checks = failable_sequence([has_email, has_name])
    >>> await checks(user)
    Success('all functions succeeded')

    >>> transform = failable_pipe([parse, validate, save])
    >>> await transform(raw)
    Success(<saved record>)

Stages are normalised on demand, one at a time, strictly in list order.
Nothing runs concurrently and no state is kept between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeAlias

from ..monads import Failable, failure, is_failure, success
from ..runtime.observability import get_logger
from .normalize import StageFunction, normalise_function

if TYPE_CHECKING:
    from collections.abc import Awaitable, Iterable

ComposedFunction: TypeAlias = "Callable[[Any], Awaitable[Failable[Any]]]"

NO_FUNCTIONS_MESSAGE = "no functions were supplied"
ALL_SUCCEEDED = "all functions succeeded"

_log = get_logger("failable.pipeline")


def failable_sequence(fns: Iterable[StageFunction]) -> ComposedFunction:
    """Compose stages that all run against the same argument.

    The composed coroutine function returns:
        - failure("no functions were supplied") when there are no stages
        - the first Failure produced, without running later stages
        - success("all functions succeeded") otherwise; individual payloads are discarded

    The stage list is copied here, so later changes to fns do not affect the composition.
    """
    stages = tuple(fns)

    async def run_sequence(arg: Any = None) -> Failable[Any]:
        if not stages:
            _log.debug("no stages supplied", pipeline="sequence")
            return failure(NO_FUNCTIONS_MESSAGE)

        for i, fn in enumerate(stages):
            log = _log.bind_stage("sequence", i)
            log.debug("stage started")
            result = await normalise_function(i, fn)(arg)
            log.debug("stage finished", success=result.success)
            if is_failure(result):
                log.debug("short-circuit", stages=len(stages))
                return result

        _log.debug("all stages succeeded", pipeline="sequence", stages=len(stages))
        return success(ALL_SUCCEEDED)

    return run_sequence


def failable_pipe(fns: Iterable[StageFunction]) -> ComposedFunction:
    """Compose stages threading each stage's payload into the next.

    The composed coroutine function returns:
        - success(arg) when there are no stages (identity)
        - the first Failure produced, without running later stages
        - the last stage's Failable otherwise

    Example:
        >>> pipe = failable_pipe([lambda n: success(n + 1), lambda n: success(n * 2)])
        >>> run_sync(pipe(3))
        Success(8)
    """
    stages = tuple(fns)

    async def run_pipe(arg: Any = None) -> Failable[Any]:
        current: Any = arg
        result: Failable[Any] = success(arg)

        for i, fn in enumerate(stages):
            log = _log.bind_stage("pipe", i)
            log.debug("stage started")
            result = await normalise_function(i, fn)(current)
            log.debug("stage finished", success=result.success)
            if is_failure(result):
                log.debug("short-circuit", stages=len(stages))
                return result
            current = result.payload

        _log.debug("all stages succeeded", pipeline="pipe", stages=len(stages))
        return result

    return run_pipe


def apply_sequentially(*_: object, **__: object) -> None:
    """Removed name kept so old callers get a pointer to the right function."""
    raise TypeError("I think you meant failable_sequence")
