"""Dense float matrices used by the evaluator, backed by NumPy."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


class MatrixShapeError(ValueError):
    """Operand shapes are not valid for the requested operation."""


class Matrix:
    """An immutable ``rows x cols`` matrix of float64 values.

    The 0x0 matrix returned by :meth:`empty` is the canonical empty matrix.
    """

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray) -> None:
        data = np.array(data, dtype=np.float64)
        if data.ndim != 2:
            raise MatrixShapeError(f"Matrix must be two-dimensional, got {data.ndim} dimension(s)")
        data.setflags(write=False)
        self._data = data

    # -- Constructors ---------------------------------------------------

    @classmethod
    def empty(cls) -> Matrix:
        return cls(np.zeros((0, 0)))

    @classmethod
    def from_row(cls, values: Iterable[float]) -> Matrix:
        """Single-row matrix from a flat sequence."""
        return cls(np.array([list(values)], dtype=np.float64).reshape(1, -1))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Row-major matrix from equal-length rows."""
        if not rows:
            return cls.empty()
        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise MatrixShapeError("Matrix rows must all have the same length")
        return cls(np.array(rows, dtype=np.float64).reshape(len(rows), width))

    # -- Introspection --------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        return self._data

    def tolist(self) -> list[list[float]]:
        return self._data.tolist()

    # -- Algebra --------------------------------------------------------

    def add(self, other: Matrix) -> Matrix:
        if self.shape != other.shape:
            raise MatrixShapeError(
                f"Matrix dimensions {self.rows}x{self.cols} and "
                f"{other.rows}x{other.cols} do not match"
            )
        return Matrix(self._data + other._data)

    def multiply(self, scalar: float) -> Matrix:
        return Matrix(self._data * float(scalar))

    def determinant(self) -> float:
        if self.rows != self.cols:
            raise MatrixShapeError(
                f"Determinant requires a square matrix, got {self.rows}x{self.cols}"
            )
        return float(np.linalg.det(self._data))

    # -- Dunder ---------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix({self.tolist()!r})"

    def __str__(self) -> str:
        if self.rows == 0 or self.cols == 0:
            return "[]"
        return "[" + ", ".join(
            "[" + ", ".join(repr(x) for x in row) + "]" for row in self.tolist()
        ) + "]"
