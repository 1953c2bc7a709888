"""Fixed-width integer types with overflow-checked addition.

Python's ``int`` is unbounded, so the machine widths are modelled as small
immutable value classes (``U8`` .. ``U128``, ``I8`` .. ``I128`` and the
pointer-sized ``USize``/``ISize``). NumPy's integer scalars get the same
capability through :func:`~checked_sum.core.capability.register`.
"""
from __future__ import annotations

import operator
import struct
from typing import Any, ClassVar, Dict, List, Optional, Type, TypeVar

import numpy as np

from .capability import register
from .errors import MixedTypesError

POINTER_BITS = struct.calcsize("P") * 8

F = TypeVar("F", bound="FixedInt")


class FixedInt:
    """Base class for immutable integers confined to a fixed bit width."""

    __slots__ = ("_value",)

    name: ClassVar[str] = ""
    bits: ClassVar[int] = 0
    signed: ClassVar[bool] = False
    min: ClassVar[int] = 0
    max: ClassVar[int] = 0

    def __init_subclass__(
        cls,
        *,
        name: Optional[str] = None,
        bits: Optional[int] = None,
        signed: bool = False,
        **kwargs: Any,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if bits is None:
            # newtype over an existing width: keep the parent's bounds
            return
        cls.name = name or cls.__name__.lower()
        cls.bits = bits
        cls.signed = signed
        if signed:
            cls.min = -(1 << (bits - 1))
            cls.max = (1 << (bits - 1)) - 1
        else:
            cls.min = 0
            cls.max = (1 << bits) - 1

    def __init__(self, value: int = 0) -> None:
        value = operator.index(value)
        if not self.min <= value <= self.max:
            raise ValueError(
                f"{value} is out of range for {self.name} [{self.min}, {self.max}]"
            )
        object.__setattr__(self, "_value", value)

    def __setattr__(self, key: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> Any:
        return (type(self), (self._value,))

    def __copy__(self: F) -> F:
        return self

    def __deepcopy__(self: F, memo: Dict[int, Any]) -> F:
        return self

    @property
    def value(self) -> int:
        return self._value

    @classmethod
    def zero(cls: Type[F]) -> F:
        return cls(0)

    @classmethod
    def fits(cls, value: int) -> bool:
        """Return True if *value* lies within this type's range."""
        return cls.min <= value <= cls.max

    def checked_add(self: F, other: F) -> Optional[F]:
        """Return ``self + other``, or ``None`` if the sum leaves the range."""
        if type(other) is not type(self):
            raise MixedTypesError(self, other)
        total = self._value + other._value
        if not self.fits(total):
            return None
        return type(self)(total)

    def __index__(self) -> int:
        return self._value

    def __int__(self) -> int:
        return self._value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._value == other._value  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __str__(self) -> str:
        return str(self._value)


class U8(FixedInt, name="u8", bits=8, signed=False):
    """Unsigned 8-bit integer."""


class U16(FixedInt, name="u16", bits=16, signed=False):
    """Unsigned 16-bit integer."""


class U32(FixedInt, name="u32", bits=32, signed=False):
    """Unsigned 32-bit integer."""


class U64(FixedInt, name="u64", bits=64, signed=False):
    """Unsigned 64-bit integer."""


class U128(FixedInt, name="u128", bits=128, signed=False):
    """Unsigned 128-bit integer."""


class USize(FixedInt, name="usize", bits=POINTER_BITS, signed=False):
    """Unsigned pointer-sized integer."""


class I8(FixedInt, name="i8", bits=8, signed=True):
    """Signed 8-bit integer."""


class I16(FixedInt, name="i16", bits=16, signed=True):
    """Signed 16-bit integer."""


class I32(FixedInt, name="i32", bits=32, signed=True):
    """Signed 32-bit integer."""


class I64(FixedInt, name="i64", bits=64, signed=True):
    """Signed 64-bit integer."""


class I128(FixedInt, name="i128", bits=128, signed=True):
    """Signed 128-bit integer."""


class ISize(FixedInt, name="isize", bits=POINTER_BITS, signed=True):
    """Signed pointer-sized integer."""


INT_TYPES: Dict[str, Type[FixedInt]] = {
    klass.name: klass
    for klass in (U8, U16, U32, U64, U128, USize, I8, I16, I32, I64, I128, ISize)
}


def int_type(name: str) -> Type[FixedInt]:
    """Look up a fixed-width type by its short name (``"u8"``, ``"isize"``...)."""
    try:
        return INT_TYPES[name.lower()]
    except KeyError:
        known = ", ".join(INT_TYPES)
        raise ValueError(f"unknown integer type {name!r}; expected one of: {known}") from None


def describe_types() -> List[Dict[str, Any]]:  # noqa: D401
    """Return name, width and bounds of every built-in fixed-width type."""
    return [
        {"name": klass.name, "bits": klass.bits, "min": klass.min, "max": klass.max}
        for klass in INT_TYPES.values()
    ]


# ---------------------------------------------------------------------------
# NumPy scalars
# ---------------------------------------------------------------------------


def _numpy_zero(kind: type) -> np.integer:
    return kind(0)


def _numpy_checked_add(a: np.integer, b: np.integer) -> Optional[np.integer]:
    # Exact Python ints: numpy scalar addition wraps silently
    info = np.iinfo(type(a))
    total = int(a) + int(b)
    if info.min <= total <= info.max:
        return type(a)(total)
    return None


register(np.integer, zero=_numpy_zero, add=_numpy_checked_add)
