"""Testing utilities for Failable-returning code."""

from .assertions import assert_failure, assert_success

__all__ = ["assert_failure", "assert_success"]
