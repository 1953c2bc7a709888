"""Exception hierarchy for checked summation.

Overflow is never an exception: it is reported as ``None``. The errors below
signal programming mistakes, such as summing a type with no checked-add
conformance.
"""
from __future__ import annotations

from typing import Any


class CheckedSumError(TypeError):
    """Base class for misuse of the checked-sum API."""


class NotSummableError(CheckedSumError):
    """Raised when a type has neither a registered nor a built-in conformance."""

    def __init__(self, kind: Any) -> None:
        self.kind = kind
        name = getattr(kind, "__name__", repr(kind))
        super().__init__(f"{name} does not support checked addition")


class MixedTypesError(CheckedSumError):
    """Raised when two values of different summable types are added."""

    def __init__(self, left: Any, right: Any) -> None:
        self.left = left
        self.right = right
        super().__init__(
            f"cannot add {type(right).__name__} to {type(left).__name__}"
        )


class EmptySequenceError(CheckedSumError):
    """Raised when an empty, untyped input leaves no way to pick a zero."""

    def __init__(self) -> None:
        super().__init__("cannot infer the element type of an empty sequence; pass kind=")
