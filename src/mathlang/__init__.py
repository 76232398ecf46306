"""MathLang — typed scalar and matrix expression evaluator."""

from .environment import Environment
from .evaluator import evaluate
from .matrix import Matrix, MatrixShapeError
from .values import (
    Kind,
    Value,
    VList,
    VMatrix,
    VScalar,
    VText,
    empty_matrix,
    negate,
)
from .coercion import as_matrix, as_scalar
from .parser import parse, parse_program
from .document import Document
from .errors import MathLangError, EvaluationError, ParseError
from .repl import MathRepl

__all__ = [
    "evaluate",
    "parse",
    "parse_program",
    "Document",
    "Environment",
    "Matrix",
    "MatrixShapeError",
    "Kind",
    "Value",
    "VList",
    "VMatrix",
    "VScalar",
    "VText",
    "empty_matrix",
    "negate",
    "as_matrix",
    "as_scalar",
    "MathLangError",
    "EvaluationError",
    "ParseError",
    "MathRepl",
]
