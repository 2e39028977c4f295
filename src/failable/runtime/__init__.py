"""Runtime support: sync/async interop and observability."""

from .concurrency import SyncAdapter, async_to_sync, run_sync
from .observability import configure_logging, get_logger, log_context

__all__ = [
    "SyncAdapter",
    "async_to_sync",
    "run_sync",
    "configure_logging",
    "get_logger",
    "log_context",
]
