"""Grammar-driven parser producing :mod:`mathlang.nodes` trees.

Uses Lark's LALR parser; the transformer below is the only code that sees
Lark trees, so the evaluator stays independent of the grammar.
"""

from __future__ import annotations

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedCharacters, UnexpectedEOF, UnexpectedInput, UnexpectedToken

from . import nodes
from .errors import ParseError


GRAMMAR = r"""
program: (statement? _SEP)* statement?

statement: NAME "=" expression          -> assign
         | expression                   -> print

?expression: expression "+" signed      -> sum
           | expression "-" signed      -> subtract
           | signed

?signed: "+" signed                     -> plus
       | "-" signed                     -> minus
       | atom

?atom: NUMBER                           -> number
     | NAME                             -> variable
     | "(" expression ")"               -> group
     | "det" "(" expression ")"         -> determinant
     | "[" "]"                          -> empty_bracket
     | "[" expression ("," expression)* "]" -> bracket
     | "{" "}"                          -> empty_matrix
     | "{" expression ("," expression)* "}" -> matrix

NAME: /[A-Za-z_][A-Za-z0-9_]*/
NUMBER: /(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?/
COMMENT: /#[^\n]*/
_SEP: /[;\n]/

%ignore /[ \t\f\r]+/
%ignore COMMENT
"""


# ---------------------------------------------------------------------------
# Lark tree → nodes
# ---------------------------------------------------------------------------

@v_args(inline=True)
class TreeBuilder(Transformer):
    def program(self, *statements):
        return list(statements)

    def assign(self, name, expr):
        return nodes.Assign(str(name), expr)

    def print(self, expr):
        return nodes.Print(expr)

    def sum(self, left, right):
        return nodes.Sum(left, right)

    def subtract(self, left, right):
        return nodes.Subtract(left, right)

    def plus(self, operand):
        return nodes.Signed("+", operand)

    def minus(self, operand):
        return nodes.Signed("-", operand)

    def number(self, token):
        return nodes.Number(str(token))

    def variable(self, token):
        return nodes.Variable(str(token))

    def group(self, inner):
        return nodes.Group(inner)

    def determinant(self, expr):
        return nodes.Determinant(expr)

    def empty_bracket(self):
        return nodes.ArrayLiteral(())

    def bracket(self, *elements):
        # Brackets whose members are all brackets describe matrix rows.
        if all(isinstance(e, (nodes.ArrayLiteral, nodes.MatrixLiteral)) for e in elements):
            return nodes.MatrixLiteral(tuple(elements))
        return nodes.ArrayLiteral(tuple(elements))

    def empty_matrix(self):
        return nodes.MatrixLiteral(())

    def matrix(self, *elements):
        return nodes.MatrixLiteral(tuple(elements))


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

_lark: Lark | None = None


def _get_lark() -> Lark:
    global _lark
    if _lark is None:
        _lark = Lark(GRAMMAR, start=["statement", "program"], parser="lalr", lexer="basic")
    return _lark


def parse(text: str) -> nodes.Statement:
    """Parse a single statement."""
    return _parse(text, "statement")


def parse_program(text: str) -> list[nodes.Statement]:
    """Parse statements separated by newlines or ``;``.  Blank ones are skipped."""
    return _parse(text, "program")


def _parse(text: str, start: str):
    try:
        tree = _get_lark().parse(text, start=start)
    except UnexpectedInput as exc:
        raise _parse_error(exc) from exc
    return TreeBuilder().transform(tree)


def _parse_error(exc: UnexpectedInput) -> ParseError:
    if isinstance(exc, UnexpectedCharacters):
        message = f"unexpected character {exc.char!r}"
    elif isinstance(exc, UnexpectedToken):
        if exc.token.type == "$END":
            message = "unexpected end of input"
        else:
            message = f"unexpected token {str(exc.token)!r}"
    elif isinstance(exc, UnexpectedEOF):
        message = "unexpected end of input"
    else:
        message = "invalid syntax"
    line = getattr(exc, "line", None)
    column = getattr(exc, "column", None)
    if line is None or line < 1:
        return ParseError(message)
    return ParseError(message, line, column)
