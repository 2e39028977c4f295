"""Failable - success/failure values and short-circuiting async pipelines.

Compose sync, async and Failable-returning functions into linear pipelines
whose outcome is always a Failable value. Exceptions raised by stages never
escape a pipeline; they come back as Failures tagged with the stage index.

Quick Start:
    >>> from failable import failable_pipe, failable_sequence, success, failure
    >>>
    >>> pipe = failable_pipe([
    ...     lambda n: success(n + 1),
    ...     lambda n: success(n * 2),
    ... ])
    >>> await pipe(3)
    Success(8)

    >>> checks = failable_sequence([
    ...     lambda n: failure("it blew up"),
    ...     lambda n: success(n * 2),   # never runs
    ... ])
    >>> (await checks(3)).error.message
    'it blew up'

From Sync Code:
    >>> from failable import run_sync
    >>> run_sync(pipe(3))
    Success(8)

Logging (silent below INFO by default):
    >>> from failable import configure_logging
    >>> configure_logging(format="console", level="DEBUG")
"""

from __future__ import annotations

__version__ = "0.1.0"

# Errors
from .foundation.errors import ErrorInfo, FailableException, error_message

# Config
from .foundation.config import FailableSettings, get_settings

# Failable values
from .monads import (
    Failable,
    all_failable,
    any_failed,
    empty,
    empty_success,
    failure,
    first_failure,
    has_payload,
    is_empty,
    is_failable,
    is_failure,
    is_success,
    success,
)

# Pipelines
from .pipeline import (
    apply_sequentially,
    failable_pipe,
    failable_sequence,
    make_it_async,
    make_it_failable,
    normalise_function,
)

# Runtime
from .runtime import SyncAdapter, async_to_sync, configure_logging, get_logger, log_context, run_sync

__all__ = [
    "__version__",
    # Errors
    "ErrorInfo",
    "FailableException",
    "error_message",
    # Config
    "FailableSettings",
    "get_settings",
    # Failable values
    "Failable",
    "success",
    "empty_success",
    "empty",
    "failure",
    "is_success",
    "is_failure",
    "is_empty",
    "has_payload",
    "is_failable",
    "any_failed",
    "first_failure",
    "all_failable",
    # Pipelines
    "make_it_async",
    "make_it_failable",
    "normalise_function",
    "failable_sequence",
    "failable_pipe",
    "apply_sequentially",
    # Runtime
    "run_sync",
    "SyncAdapter",
    "async_to_sync",
    "configure_logging",
    "get_logger",
    "log_context",
]
