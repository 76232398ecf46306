"""Syntax tree handed to the evaluator.

The node set is closed: :func:`mathlang.evaluator.evaluate` handles every
class defined here and nothing else.  Children are stored in source order,
binary nodes left then right.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Number:
    text: str


@dataclass(frozen=True, slots=True)
class Variable:
    name: str


@dataclass(frozen=True, slots=True)
class Signed:
    sign: str  # "+" or "-"
    operand: Expression


@dataclass(frozen=True, slots=True)
class Group:
    """Parenthesised or otherwise wrapped expression; no semantic effect."""

    inner: Expression


@dataclass(frozen=True, slots=True)
class Sum:
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class Subtract:
    left: Expression
    right: Expression


@dataclass(frozen=True, slots=True)
class ArrayLiteral:
    elements: tuple[Expression, ...] = ()


@dataclass(frozen=True, slots=True)
class MatrixLiteral:
    elements: tuple[Expression, ...] = ()


@dataclass(frozen=True, slots=True)
class Determinant:
    expr: Expression


Expression = Union[
    Number,
    Variable,
    Signed,
    Group,
    Sum,
    Subtract,
    ArrayLiteral,
    MatrixLiteral,
    Determinant,
]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Assign:
    name: str
    expr: Expression


@dataclass(frozen=True, slots=True)
class Print:
    expr: Expression


Statement = Union[Assign, Print]
