"""Value types for MathLang."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from .errors import UnsupportedOperand
from .matrix import Matrix


class Kind(Enum):
    """Discriminant of a runtime value."""

    SCALAR = "scalar"
    LIST = "list"
    MATRIX = "matrix"
    STRING = "string"


@dataclass(frozen=True, slots=True)
class VScalar:
    value: float

    @property
    def kind(self) -> Kind:
        return Kind.SCALAR

    def __str__(self) -> str:
        return repr(float(self.value))


@dataclass(frozen=True, slots=True)
class VList:
    items: tuple[float, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(float(x) for x in self.items))

    @property
    def kind(self) -> Kind:
        return Kind.LIST

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(repr(x) for x in self.items) + "]"


@dataclass(frozen=True, slots=True)
class VMatrix:
    matrix: Matrix

    @property
    def kind(self) -> Kind:
        return Kind.MATRIX

    def __str__(self) -> str:
        return str(self.matrix)


@dataclass(frozen=True, slots=True)
class VText:
    value: str

    @property
    def kind(self) -> Kind:
        return Kind.STRING

    def __str__(self) -> str:
        return self.value


Value = Union[VScalar, VList, VMatrix, VText]


def empty_matrix() -> VMatrix:
    """The canonical 0x0 matrix value."""
    return VMatrix(Matrix.empty())


def negate(value: Value) -> Value:
    """Flip the sign of *value*, keeping its kind."""
    if isinstance(value, VScalar):
        return VScalar(-value.value)
    if isinstance(value, VList):
        return VList(tuple(-x for x in value.items))
    if isinstance(value, VMatrix):
        return VMatrix(value.matrix.multiply(-1))
    raise UnsupportedOperand("NEGATE", value.kind)
