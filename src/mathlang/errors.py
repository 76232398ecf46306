"""Exceptions raised by MathLang."""

from __future__ import annotations


class MathLangError(Exception):
    """Base class for every error MathLang reports to a caller."""


class ParseError(MathLangError):
    """Source text rejected by the grammar."""

    def __init__(self, message: str, line: int | None = None, column: int | None = None) -> None:
        self.line = line
        self.column = column
        if line is not None:
            message = f"line {line}, column {column}: {message}"
        super().__init__(message)


class ConversionError(MathLangError):
    """A value could not be viewed as the requested kind."""

    def __init__(self, expected: str, kind) -> None:
        self.expected = expected
        self.kind = kind
        super().__init__(f"not a {expected}: got {kind.value}")


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------

class EvaluationError(MathLangError):
    """Raised while walking a syntax tree; aborts the whole statement."""


class MalformedNumber(EvaluationError):
    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Invalid number format '{text}'")


class UndefinedVariable(EvaluationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Variable '{name}' is undefined")


class TypeMismatch(EvaluationError):
    def __init__(self, op: str, left, right, detail: str | None = None) -> None:
        self.op = op
        self.left = left
        self.right = right
        self.detail = detail
        if detail is None:
            message = (
                f"{op} cannot be applied to operands of type {left.value} and {right.value}"
            )
        else:
            message = f"{op} cannot be applied: {detail}"
        super().__init__(message)


class DimensionMismatch(TypeMismatch):
    """A matrix operation failed on the shapes of its operands."""

    def __init__(self, op: str, detail: str) -> None:
        super().__init__(op, None, None, detail)


class UnsupportedOperand(EvaluationError):
    def __init__(self, op: str, kind) -> None:
        self.op = op
        self.kind = kind
        super().__init__(f"{op} is not defined for operands of type {kind.value}")


class ArrayElementTypeError(EvaluationError):
    def __init__(self, kind) -> None:
        self.kind = kind
        super().__init__(f"Array can only contain scalars, found {kind.value}")


class MatrixMemberTypeError(EvaluationError):
    def __init__(self, expected, found) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Matrix definition includes non-identical members: "
            f"{expected.value} and {found.value}"
        )


class RaggedMatrixError(EvaluationError):
    def __init__(self, lengths: list[int]) -> None:
        self.lengths = lengths
        super().__init__(
            "Matrix definition includes lists with different length: "
            + ", ".join(str(n) for n in lengths)
        )


class UnauthorizedMatrixMemberType(EvaluationError):
    def __init__(self, kind) -> None:
        self.kind = kind
        super().__init__(f"Matrix definition includes unauthorized types: {kind.value}")


class NotAMatrixError(EvaluationError):
    def __init__(self, kind) -> None:
        self.kind = kind
        super().__init__(f"Cannot calculate determinant of not a matrix member: {kind.value}")
