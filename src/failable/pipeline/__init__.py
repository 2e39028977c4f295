"""Stage normalization and sequential composition.

Sequence: run every stage against one argument, report overall pass/fail
Pipe:     thread each stage's payload into the next stage
"""

from .normalize import (
    NOT_FAILABLE_MESSAGE,
    THREW_MESSAGE,
    NormalisedStage,
    StageFunction,
    make_it_async,
    make_it_failable,
    normalise_function,
)
from .pipe import (
    ALL_SUCCEEDED,
    NO_FUNCTIONS_MESSAGE,
    ComposedFunction,
    apply_sequentially,
    failable_pipe,
    failable_sequence,
)

__all__ = [
    # Normalization
    "StageFunction",
    "NormalisedStage",
    "make_it_async",
    "make_it_failable",
    "normalise_function",
    # Composition
    "ComposedFunction",
    "failable_sequence",
    "failable_pipe",
    "apply_sequentially",
    # Messages
    "THREW_MESSAGE",
    "NOT_FAILABLE_MESSAGE",
    "NO_FUNCTIONS_MESSAGE",
    "ALL_SUCCEEDED",
]
