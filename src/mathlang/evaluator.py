"""Evaluator: depth-first walk of a MathLang syntax tree."""

from __future__ import annotations

import re

from . import nodes
from .coercion import as_matrix, as_scalar
from .environment import Environment
from .errors import (
    ArrayElementTypeError,
    ConversionError,
    DimensionMismatch,
    MalformedNumber,
    MatrixMemberTypeError,
    NotAMatrixError,
    RaggedMatrixError,
    TypeMismatch,
    UnauthorizedMatrixMemberType,
    UnsupportedOperand,
)
from .matrix import Matrix, MatrixShapeError
from .values import Kind, Value, VList, VMatrix, VScalar, VText, empty_matrix, negate


_NUMBER_RE = re.compile(r"(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def evaluate(node, env: Environment) -> Value:
    """Evaluate *node* against *env* and return the resulting value.

    *node* is normally a statement (:class:`~mathlang.nodes.Assign` or
    :class:`~mathlang.nodes.Print`) but any expression node is accepted.
    Errors abort the walk; an assignment only touches *env* once its
    right-hand side has been evaluated successfully.
    """
    if isinstance(node, nodes.Assign):
        return _eval_assign(node, env)
    if isinstance(node, nodes.Print):
        return _eval_print(node, env)
    if isinstance(node, nodes.Number):
        return _eval_number(node)
    if isinstance(node, nodes.Variable):
        return env.lookup(node.name)
    if isinstance(node, nodes.Signed):
        return _eval_signed(node, env)
    if isinstance(node, nodes.Group):
        return evaluate(node.inner, env)
    if isinstance(node, nodes.Sum):
        return _eval_sum(node, env)
    if isinstance(node, nodes.Subtract):
        return _eval_subtract(node, env)
    if isinstance(node, nodes.ArrayLiteral):
        return _eval_array(node, env)
    if isinstance(node, nodes.MatrixLiteral):
        return _eval_matrix(node, env)
    if isinstance(node, nodes.Determinant):
        return _eval_determinant(node, env)
    raise TypeError(f"Cannot evaluate node of type {type(node).__name__}")


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------

def _eval_assign(node: nodes.Assign, env: Environment) -> Value:
    """name = expr  →  env[name] = value"""
    value = evaluate(node.expr, env)
    env.assign(node.name, value)
    return value


def _eval_print(node: nodes.Print, env: Environment) -> VText:
    return VText(str(evaluate(node.expr, env)))


# ---------------------------------------------------------------------------
# Atoms
# ---------------------------------------------------------------------------

def _eval_number(node: nodes.Number) -> VScalar:
    if not _NUMBER_RE.fullmatch(node.text):
        raise MalformedNumber(node.text)
    try:
        return VScalar(float(node.text))
    except ValueError:
        raise MalformedNumber(node.text) from None


def _eval_signed(node: nodes.Signed, env: Environment) -> Value:
    value = evaluate(node.operand, env)
    if node.sign == "-":
        return negate(value)
    return value


# ---------------------------------------------------------------------------
# Binary arithmetic
# ---------------------------------------------------------------------------

def _eval_sum(node: nodes.Sum, env: Environment) -> Value:
    return _binary("SUM", node.left, node.right, env)


def _eval_subtract(node: nodes.Subtract, env: Environment) -> Value:
    return _binary("SUBTRACT", node.left, node.right, env)


def _binary(op: str, left_node, right_node, env: Environment) -> Value:
    left = evaluate(left_node, env)
    right = evaluate(right_node, env)
    if left.kind != right.kind:
        raise TypeMismatch(op, left.kind, right.kind)

    try:
        if left.kind == Kind.SCALAR:
            a, b = as_scalar(left), as_scalar(right)
            return VScalar(a + b if op == "SUM" else a - b)
        if left.kind == Kind.MATRIX:
            a, b = as_matrix(left), as_matrix(right)
            # Subtraction is addition of the negated right operand.
            return VMatrix(a.add(b if op == "SUM" else b.multiply(-1)))
    except ConversionError as exc:
        raise UnsupportedOperand(op, exc.kind) from exc
    except MatrixShapeError as exc:
        raise DimensionMismatch(op, str(exc)) from exc

    raise UnsupportedOperand(op, left.kind)


# ---------------------------------------------------------------------------
# Array / matrix construction
# ---------------------------------------------------------------------------

def _eval_array(node: nodes.ArrayLiteral, env: Environment) -> Value:
    members = [evaluate(e, env) for e in node.elements]
    if not members:
        return empty_matrix()
    for member in members:
        if member.kind != Kind.SCALAR:
            raise ArrayElementTypeError(member.kind)
    return VList(tuple(as_scalar(m) for m in members))


def _eval_matrix(node: nodes.MatrixLiteral, env: Environment) -> VMatrix:
    members = [evaluate(e, env) for e in node.elements]
    if not members:
        return empty_matrix()

    expected = members[0].kind
    for member in members[1:]:
        if member.kind != expected:
            raise MatrixMemberTypeError(expected, member.kind)

    if expected == Kind.SCALAR:
        return VMatrix(Matrix.from_row(as_scalar(m) for m in members))
    if expected == Kind.LIST:
        return VMatrix(_matrix_from_lists(members))
    raise UnauthorizedMatrixMemberType(expected)


def _matrix_from_lists(members: list[VList]) -> Matrix:
    width = len(members[0])
    if any(len(m) != width for m in members):
        raise RaggedMatrixError([len(m) for m in members])
    return Matrix.from_rows([m.items for m in members])


# ---------------------------------------------------------------------------
# Determinant
# ---------------------------------------------------------------------------

def _eval_determinant(node: nodes.Determinant, env: Environment) -> VScalar:
    value = evaluate(node.expr, env)
    try:
        matrix = as_matrix(value)
    except ConversionError:
        raise NotAMatrixError(value.kind) from None
    try:
        return VScalar(matrix.determinant())
    except MatrixShapeError as exc:
        raise DimensionMismatch("DET", str(exc)) from exc
