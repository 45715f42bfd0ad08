"""Vector and matrix containers used by the Viterbi decoder.

Both containers are thin, immutable wrappers around numpy arrays.  Every
operation returns a new container; the wrapped buffers are flagged
read-only so a container can be shared freely once built.
"""

from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from hmmflow.core.errors import DimensionError, NegativeValueError


def _frozen(data: np.ndarray) -> np.ndarray:
    data.setflags(write=False)
    return data


def _minus_log2(data: np.ndarray) -> np.ndarray:
    # log2(0) is -inf; a zero probability becomes an infinite cost.
    with np.errstate(divide="ignore"):
        return -np.log2(data)


class Vector:
    """Fixed-length sequence of real numbers.

    Parameters
    ----------
    values : sequence of float
        The entries of the vector.  The data is copied.
    """

    def __init__(self, values: Union[Sequence[float], np.ndarray]):
        data = np.array(values, dtype=float)
        if data.ndim != 1:
            raise DimensionError(
                f"Vector data must be one-dimensional, got shape {data.shape}"
            )
        self._data = _frozen(data)

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, index):
        value = self._data[index]
        if np.ndim(value) == 0:
            return float(value)
        return Vector(value)

    def __iter__(self) -> Iterator[float]:
        return (float(x) for x in self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Vector({self._data.tolist()!r})"

    def to_numpy(self) -> np.ndarray:
        """Return a writable copy of the entries."""
        return self._data.copy()

    def is_positive(self) -> bool:
        """Return ``True`` if every entry is finite and ``>= 0``."""
        return bool(np.all(np.isfinite(self._data) & (self._data >= 0)))

    def add(self, other: Vector) -> Vector:
        """Elementwise sum.

        When the lengths differ the result is truncated to the shorter
        of the two vectors.
        """
        n = min(len(self), len(other))
        return Vector(self._data[:n] + other._data[:n])

    def minus_log(self) -> Vector:
        """Map every entry ``x`` to ``-log2(x)``.

        Raises
        ------
        NegativeValueError
            If any entry is negative or not finite, since the transform
            is only defined for probabilities.
        """
        if not self.is_positive():
            raise NegativeValueError(
                "Cannot take -log2 of negative or non-finite entries: "
                f"{self._data.tolist()}"
            )
        return Vector(_minus_log2(self._data))

    def argmin(self) -> int:
        """Index of the smallest entry; the first one wins ties."""
        if len(self) == 0:
            raise DimensionError("argmin of an empty vector")
        return int(np.argmin(self._data))


class Matrix:
    """Rectangular table of real numbers.

    Parameters
    ----------
    rows : sequence of sequences of float
        Row-major data.  At least one row is required and every row must
        have the same, non-zero number of entries.

    Raises
    ------
    DimensionError
        If the data is empty or ragged.
    """

    def __init__(self, rows: Union[Sequence[Sequence[float]], np.ndarray]):
        data = [np.array(row, dtype=float) for row in rows]
        if not data:
            raise DimensionError("Matrix needs at least one row")
        width = data[0].shape
        if len(width) != 1 or width[0] == 0:
            raise DimensionError("Matrix rows must be non-empty sequences")
        for i, row in enumerate(data):
            if row.shape != width:
                raise DimensionError(
                    f"Row {i} has {row.size} entries, expected {width[0]}"
                )
        self._data = _frozen(np.vstack(data))

    @classmethod
    def _wrap(cls, data: np.ndarray) -> Matrix:
        # Skips row validation for data that is already rectangular.
        matrix = cls.__new__(cls)
        matrix._data = _frozen(data)
        return matrix

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def __getitem__(self, index):
        value = self._data[index]
        if np.ndim(value) == 0:
            return float(value)
        if np.ndim(value) == 1:
            return Vector(value)
        return Matrix._wrap(value.copy())

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def to_numpy(self) -> np.ndarray:
        """Return a writable copy of the entries."""
        return self._data.copy()

    def is_positive(self) -> bool:
        """Return ``True`` if every entry is finite and ``>= 0``."""
        return bool(np.all(np.isfinite(self._data) & (self._data >= 0)))

    def minus_log(self) -> Matrix:
        """Map every entry ``x`` to ``-log2(x)``, keeping the shape.

        Raises
        ------
        NegativeValueError
            If any entry is negative or not finite.
        """
        if not self.is_positive():
            raise NegativeValueError(
                "Cannot take -log2 of a matrix with negative or non-finite entries"
            )
        return Matrix._wrap(_minus_log2(self._data))

    def column(self, index: int) -> Vector:
        """Copy of column *index* in row order."""
        if not 0 <= index < self.cols:
            raise DimensionError(
                f"Column {index} out of range for matrix with {self.cols} columns"
            )
        return Vector(self._data[:, index])

    def add_to_rows(self, v: Vector) -> Matrix:
        """Add ``v[i]`` to every entry of row ``i``.

        Only the first ``min(rows, len(v))`` rows are shifted; any rows
        past the end of *v* are returned unchanged.
        """
        n = min(self.rows, len(v))
        data = self._data.copy()
        data[:n] += v._data[:n, np.newaxis]
        return Matrix._wrap(data)

    def min_by_column(self) -> Vector:
        """Minimum over rows for each column."""
        return Vector(self._data.min(axis=0))

    def argmin_by_column(self) -> List[int]:
        """Row index of the minimum for each column; lowest row wins ties."""
        return self._data.argmin(axis=0).tolist()
