"""Sync/async interoperability utilities.

Composed pipelines are coroutine functions. These helpers let synchronous
callers drive them:
    - run_sync: Run a coroutine from sync context
    - SyncAdapter: Wrap an async callable (e.g. a pipeline) as sync
    - async_to_sync: Decorator form of SyncAdapter

Running inside an existing event loop (e.g. Jupyter, web frameworks) is
handled by running the coroutine on a helper thread with its own loop.

Example:
    >>> pipe = failable_pipe([parse, validate])
    >>> result = run_sync(pipe("42"))

    >>> sync_pipe = SyncAdapter(pipe)
    >>> result = sync_pipe("42")
"""

from __future__ import annotations

import asyncio
import functools
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Coroutine, Generic, ParamSpec, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")
P = ParamSpec("P")


def run_sync(
    coro: Coroutine[object, object, T],
    *,
    loop: asyncio.AbstractEventLoop | None = None,
) -> T:
    """Run async coroutine from synchronous context.

    Handles multiple scenarios:
    1. No running loop → Use asyncio.run()
    2. Called from within event loop → Use a helper thread
    3. Custom loop provided → Run in that loop

    Example:
        >>> run_sync(failable_pipe([lambda n: success(n + 1)])(1))
        Success(2)
    """
    if loop is not None:
        return loop.run_until_complete(coro)

    try:
        asyncio.get_running_loop()
    except RuntimeError:
        # No running loop - simple case
        return asyncio.run(coro)

    # Inside a running loop; blocking it with run_until_complete is not allowed
    return _run_in_thread_loop(coro)


def _run_in_thread_loop(coro: Coroutine[object, object, T]) -> T:
    """Run coroutine in a new thread with its own event loop."""
    result: T | None = None
    error: BaseException | None = None
    done = threading.Event()

    def runner() -> None:
        nonlocal result, error
        try:
            result = asyncio.run(coro)
        except BaseException as e:
            error = e
        finally:
            done.set()

    thread = threading.Thread(target=runner, name="failable-run-sync", daemon=True)
    thread.start()
    done.wait()

    if error is not None:
        raise error
    return result  # type: ignore[return-value]


@dataclass
class SyncAdapter(Generic[P, T]):
    """Wrap an async function to be callable synchronously.

    Example:
        >>> double = failable_pipe([lambda n: success(n * 2)])
        >>> SyncAdapter(double)(4)
        Success(8)
    """

    func: Callable[P, Awaitable[T]]

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> T:
        """Call wrapped async function synchronously."""
        return run_sync(self.func(*args, **kwargs))  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"SyncAdapter({self.func!r})"


def async_to_sync(func: Callable[P, Awaitable[T]]) -> Callable[P, T]:
    """Decorator: Convert async function to sync."""
    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        return run_sync(func(*args, **kwargs))  # type: ignore[arg-type]
    return wrapper
