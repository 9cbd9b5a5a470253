from __future__ import annotations

import numpy as np
import pytest

from copeland.tally import PairwiseMatrix


def test_new_matrix_is_zero_filled() -> None:
    m = PairwiseMatrix(3)
    assert m.size == 3
    np.testing.assert_array_equal(m.to_array(), np.zeros((3, 3), dtype=np.int64))


def test_zero_size_is_allowed() -> None:
    assert PairwiseMatrix(0).size == 0


def test_negative_size_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        PairwiseMatrix(-1)


def test_get_set_increment() -> None:
    m = PairwiseMatrix(2)
    m.set(0, 1, 5)
    m.increment(0, 1)
    m.increment(1, 0)
    assert m.get(0, 1) == 6
    assert m.get(1, 0) == 1
    assert m.get(0, 0) == 0


def test_add_is_elementwise_and_returns_self() -> None:
    a = PairwiseMatrix(2)
    b = PairwiseMatrix(2)
    a.set(0, 1, 2)
    b.set(0, 1, 3)
    b.set(1, 0, 1)

    out = a.add(b)

    assert out is a
    np.testing.assert_array_equal(a.to_array(), [[0, 5], [1, 0]])
    np.testing.assert_array_equal(b.to_array(), [[0, 3], [1, 0]])


def test_add_size_mismatch_rejected() -> None:
    with pytest.raises(ValueError, match="sizes are not equal"):
        PairwiseMatrix(2).add(PairwiseMatrix(3))


def test_to_array_returns_copy() -> None:
    m = PairwiseMatrix(2)
    arr = m.to_array()
    arr[0, 1] = 99
    assert m.get(0, 1) == 0


def test_row_is_read_only() -> None:
    m = PairwiseMatrix(3)
    m.set(1, 2, 4)
    row = m.row(1)
    np.testing.assert_array_equal(row, [0, 0, 4])
    with pytest.raises(ValueError):
        row[0] = 1


def test_equality_compares_counts() -> None:
    a = PairwiseMatrix(2)
    b = PairwiseMatrix(2)
    assert a == b
    b.increment(0, 1)
    assert a != b
