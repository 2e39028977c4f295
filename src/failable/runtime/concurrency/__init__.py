"""Concurrency helpers: driving async pipelines from synchronous code."""

from .interop import SyncAdapter, async_to_sync, run_sync

__all__ = ["SyncAdapter", "async_to_sync", "run_sync"]
