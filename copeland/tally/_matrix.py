"""
Square pairwise count matrix.

``PairwiseMatrix`` knows nothing about names or ballots; it is addressed
purely by alternative position. Cell ``(i, j)`` holds how many times
alternative ``i`` was ranked above alternative ``j``.
"""

import numpy as np


class PairwiseMatrix:
    """Zero-initialized ``size x size`` accumulator of ``int64`` counts."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError(f"matrix size must be non-negative, got {size}")
        self._data = np.zeros((size, size), dtype=np.int64)

    @property
    def size(self) -> int:
        return self._data.shape[0]

    def get(self, i: int, j: int) -> int:
        return int(self._data[i, j])

    def set(self, i: int, j: int, value: int) -> None:
        self._data[i, j] = value

    def increment(self, i: int, j: int) -> None:
        self._data[i, j] += 1

    def row(self, i: int) -> np.ndarray:
        """Return a read-only view of row ``i``."""
        view = self._data[i]
        view.flags.writeable = False
        return view

    def add(self, other: "PairwiseMatrix") -> "PairwiseMatrix":
        """
        Add ``other`` elementwise into this matrix.

        Args:
            other: Matrix of the same size.

        Returns:
            ``self``, for chaining.

        Raises:
            ValueError: If the sizes differ.
        """
        if self.size != other.size:
            raise ValueError(
                f"matrix sizes are not equal: {self.size} != {other.size}"
            )
        self._data += other._data
        return self

    def to_array(self) -> np.ndarray:
        """Return a copy of the counts as an ``(size, size)`` array."""
        return self._data.copy()

    def __eq__(self, other):
        if not isinstance(other, PairwiseMatrix):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"PairwiseMatrix(size={self.size})"


__all__ = ["PairwiseMatrix"]
