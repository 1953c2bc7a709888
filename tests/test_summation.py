"""Tests for checked summation."""
from __future__ import annotations

import numpy as np
import pytest

from checked_sum import (
    EmptySequenceError,
    I8,
    I64,
    MixedTypesError,
    NotSummableError,
    U8,
    U16,
    U32,
    U64,
    checked_sum,
    checked_sum_of,
)


def test_checked_sum_simple():
    assert checked_sum([U8(1), U8(2), U8(3), U8(4), U8(5)]) == U8(15)


def test_checked_sum_unsigned_overflow():
    assert checked_sum([U8(255), U8(1)]) is None


def test_checked_sum_empty_typed():
    result = checked_sum([], U32)
    assert result == U32(0)
    assert type(result) is U32


def test_checked_sum_signed_overflow():
    assert checked_sum([I8(100), I8(27), I8(1)]) is None


def test_checked_sum_single():
    assert checked_sum([U64(5)]) == U64(5)


def test_checked_sum_many_small_values_overflow():
    assert checked_sum([U8(1)] * 255) == U8(255)
    assert checked_sum([U8(1)] * 256) is None


def test_checked_sum_all_max():
    assert checked_sum([U8(U8.max)] * 3) is None


def test_checked_sum_negative_prefix_overflow():
    # -128 + -1 leaves the range even though +1 would bring it back
    assert checked_sum([I8(-128), I8(-1), I8(1)]) is None
    assert checked_sum([I8(-128), I8(1), I8(-1)]) == I8(-128)


def test_checked_sum_accepts_generators():
    assert checked_sum(U16(n) for n in range(100)) == U16(4950)


def test_checked_sum_short_circuits():
    consumed = []

    def produce():
        for n in (200, 50, 10, 1, 1):
            consumed.append(n)
            yield U8(n)

    assert checked_sum(produce()) is None
    # 200 + 50 + 10 = 260 overflows on the third item
    assert consumed == [200, 50, 10]


def test_checked_sum_is_idempotent():
    values = [I64(2**62), I64(2**62 - 2), I64(1)]
    assert checked_sum(values) == checked_sum(list(values)) == I64(2**63 - 1)


def test_checked_sum_empty_untyped_raises():
    with pytest.raises(EmptySequenceError):
        checked_sum([])


def test_checked_sum_plain_int_not_summable():
    with pytest.raises(NotSummableError):
        checked_sum([1, 2, 3])


def test_checked_sum_float_not_summable():
    with pytest.raises(NotSummableError):
        checked_sum([1.5], float)


def test_checked_sum_mixed_types():
    with pytest.raises(MixedTypesError):
        checked_sum([U8(1), U16(2)])
    with pytest.raises(MixedTypesError):
        checked_sum([U8(1)], U32)


def test_checked_sum_numpy_array():
    values = np.array([1, 2, 3, 4, 5], dtype=np.uint8)
    result = checked_sum(values)
    assert result == 15
    assert type(result) is np.uint8


def test_checked_sum_numpy_overflow():
    assert checked_sum(np.array([255, 1], dtype=np.uint8)) is None
    assert checked_sum([np.int64(2**63 - 1), np.int64(1)]) is None
    assert checked_sum([np.uint64(2**64 - 1), np.uint64(0)]) == np.uint64(2**64 - 1)


def test_checked_sum_numpy_empty_uses_dtype():
    result = checked_sum(np.array([], dtype=np.uint32))
    assert result == 0
    assert type(result) is np.uint32


def test_checked_sum_numpy_float_dtype_not_summable():
    with pytest.raises(NotSummableError):
        checked_sum(np.array([1.0, 2.0]))


def test_checked_sum_of_reducer():
    sum_u8 = checked_sum_of(U8)
    results = list(map(sum_u8, [[], [U8(1), U8(2)], [U8(200), U8(100)]]))
    assert results == [U8(0), U8(3), None]


def test_checked_sum_combines_partial_sums():
    shards = [[U32(1), U32(2)], [U32(3)], []]
    partials = [checked_sum(shard, U32) for shard in shards]
    assert checked_sum(partials) == U32(6)


def test_checked_sum_object_array_uses_items():
    values = np.array([U8(1), U8(2)], dtype=object)
    assert checked_sum(values) == U8(3)
    assert checked_sum(np.array([U8(255), U8(1)], dtype=object)) is None


def test_checked_sum_object_array_empty_needs_kind():
    assert checked_sum(np.array([], dtype=object), U8) == U8(0)
    with pytest.raises(EmptySequenceError):
        checked_sum(np.array([], dtype=object))
