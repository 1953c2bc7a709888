"""Core of checked_sum: capability dispatch, integer types and summation."""

from .capability import Summable, checked_add, is_summable, register, zero  # noqa: F401
from .errors import (  # noqa: F401
    CheckedSumError,
    EmptySequenceError,
    MixedTypesError,
    NotSummableError,
)
from .integers import (  # noqa: F401
    I8,
    I16,
    I32,
    I64,
    I128,
    INT_TYPES,
    ISize,
    U8,
    U16,
    U32,
    U64,
    U128,
    USize,
    FixedInt,
    describe_types,
    int_type,
)
from .summation import checked_sum, checked_sum_of  # noqa: F401

__all__ = [
    "Summable",
    "checked_add",
    "is_summable",
    "register",
    "zero",
    "CheckedSumError",
    "EmptySequenceError",
    "MixedTypesError",
    "NotSummableError",
    "FixedInt",
    "INT_TYPES",
    "int_type",
    "describe_types",
    "U8",
    "U16",
    "U32",
    "U64",
    "U128",
    "USize",
    "I8",
    "I16",
    "I32",
    "I64",
    "I128",
    "ISize",
    "checked_sum",
    "checked_sum_of",
]
