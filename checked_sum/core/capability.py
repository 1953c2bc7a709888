"""The checked-add capability.

A type is *summable* when it has an additive identity and an addition that
reports overflow as ``None`` instead of wrapping. Types conform in one of two
ways:

* structurally, by providing a ``zero()`` classmethod and a
  ``checked_add(other)`` method (see :class:`Summable`);
* by registration, via :func:`register`, for types that cannot carry the
  methods themselves (NumPy integer scalars are wired in this way).

Registrations take precedence over methods and are inherited by subclasses.
"""
from __future__ import annotations

import functools
from typing import Any, Callable, Dict, Optional, Protocol, TypeVar, runtime_checkable

from .errors import MixedTypesError, NotSummableError

T = TypeVar("T")
S = TypeVar("S", bound="Summable")

_ZEROS: Dict[type, Callable[[type], Any]] = {}


@runtime_checkable
class Summable(Protocol):
    """Structural protocol for values supporting overflow-checked addition."""

    @classmethod
    def zero(cls: type[S]) -> S:
        """Return the additive identity."""
        ...

    def checked_add(self: S, other: S) -> Optional[S]:
        """Return ``self + other``, or ``None`` if the sum is out of range."""
        ...


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


@functools.singledispatch
def checked_add(a: Any, b: Any) -> Any:
    """Add *a* and *b*, returning ``None`` when the sum overflows.

    Raises
    ------
    NotSummableError
        If the type of *a* has no conformance.
    MixedTypesError
        If *b* is not of exactly the same type as *a*.
    """

    method = getattr(a, "checked_add", None)
    if not callable(method):
        raise NotSummableError(type(a))
    _require_same_kind(a, b)
    return method(b)


def zero(kind: type) -> Any:
    """Return the additive identity of *kind*."""

    factory = _registered_zero(kind)
    if factory is not None:
        return factory(kind)

    method = getattr(kind, "zero", None)
    if not callable(method) or not callable(getattr(kind, "checked_add", None)):
        raise NotSummableError(kind)
    return method()


def is_summable(kind: type) -> bool:
    """Return True if *kind* has a registered or structural conformance."""
    if _registered_zero(kind) is not None:
        return True
    return callable(getattr(kind, "zero", None)) and callable(getattr(kind, "checked_add", None))


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register(
    kind: type,
    *,
    zero: Callable[[type], T],
    add: Callable[[T, T], Optional[T]],
) -> None:  # noqa: D401
    """Declare *kind* (and its subclasses) summable.

    Parameters
    ----------
    kind : type
        The type being extended.
    zero : callable
        Called with the concrete type; returns its additive identity.
    add : callable
        Called with two instances; returns the sum or ``None`` on overflow.
    """

    def _checked(a: Any, b: Any) -> Any:
        _require_same_kind(a, b)
        return add(a, b)

    _ZEROS[kind] = zero
    checked_add.register(kind)(_checked)


def _registered_zero(kind: type) -> Optional[Callable[[type], Any]]:
    for klass in getattr(kind, "__mro__", ()):
        factory = _ZEROS.get(klass)
        if factory is not None:
            return factory
    return None


def _require_same_kind(a: Any, b: Any) -> None:
    if type(b) is not type(a):
        raise MixedTypesError(a, b)
