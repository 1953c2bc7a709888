"""Overflow-checked summation over iterables."""
from __future__ import annotations

import functools
import itertools
from typing import Any, Callable, Iterable, Optional, TypeVar

from .capability import checked_add, zero
from .errors import EmptySequenceError
from .log import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _resolve_kind(values: Iterable[Any], kind: Optional[type]) -> Optional[type]:
    if kind is not None:
        return kind
    # Integer NumPy arrays know their element type even when empty; object
    # arrays fall back to the first item
    dtype = getattr(values, "dtype", None)
    if dtype is not None and getattr(dtype, "kind", "") in ("i", "u"):
        return dtype.type
    return None


def checked_sum(values: Iterable[T], kind: Optional[type] = None) -> Optional[T]:
    """Sum *values* left to right, returning ``None`` on overflow.

    The input is consumed once. Accumulation stops at the first addition that
    leaves the element type's range; the remaining items are not pulled.

    Parameters
    ----------
    values : iterable
        Items of a single summable type.
    kind : type, optional
        Element type. Needed only for empty inputs that carry no ``dtype``;
        otherwise inferred from ``values.dtype`` or the first item.

    Returns
    -------
    The exact total, ``zero(kind)`` for an empty input, or ``None`` if any
    intermediate sum overflowed.
    """

    kind = _resolve_kind(values, kind)
    iterator = iter(values)

    if kind is None:
        try:
            first = next(iterator)
        except StopIteration:
            raise EmptySequenceError() from None
        kind = type(first)
        iterator = itertools.chain((first,), iterator)

    total = zero(kind)
    for position, value in enumerate(iterator):
        total = checked_add(total, value)
        if total is None:
            logger.debug("Overflow of %s at item %d", kind.__name__, position)
            return None
    return total


def checked_sum_of(kind: type) -> Callable[[Iterable[T]], Optional[T]]:
    """Return a reducer that applies :func:`checked_sum` with a fixed *kind*."""
    return functools.partial(checked_sum, kind=kind)
