"""Strict narrowing of runtime values to scalars and matrices."""

from __future__ import annotations

from .errors import ConversionError
from .matrix import Matrix
from .values import Value, VMatrix, VScalar


def as_scalar(value: Value) -> float:
    """Return the float carried by a scalar value."""
    if isinstance(value, VScalar):
        return value.value
    raise ConversionError("scalar", value.kind)


def as_matrix(value: Value) -> Matrix:
    """Return the matrix carried by a matrix value."""
    if isinstance(value, VMatrix):
        return value.matrix
    raise ConversionError("matrix", value.kind)
