"""Tests for MathRepl and Document.merge()."""

import pytest

from mathlang import Environment, MathRepl, Matrix, VList, VMatrix, VScalar, VText, parse_program
from mathlang.document import Document
from mathlang.errors import ParseError, TypeMismatch, UndefinedVariable


# ---------------------------------------------------------------------------
# MathRepl.eval() basics
# ---------------------------------------------------------------------------

def test_eval_assignment_returns_value():
    repl = MathRepl()
    assert repl.eval("x = 5.0") == VScalar(5.0)


def test_eval_print_returns_text():
    repl = MathRepl()
    repl.eval("x = 5.0")
    assert repl.eval("x") == VText("5.0")


def test_eval_blank_returns_none():
    repl = MathRepl()
    assert repl.eval("   ") is None


def test_eval_undefined_raises():
    repl = MathRepl()
    with pytest.raises(UndefinedVariable):
        repl.eval("y")


def test_eval_parse_error():
    repl = MathRepl()
    with pytest.raises(ParseError):
        repl.eval("x = ")


# ---------------------------------------------------------------------------
# State accumulation across multiple eval() calls
# ---------------------------------------------------------------------------

def test_variable_persists_across_evals():
    repl = MathRepl()
    repl.eval("a = [[1, 2], [3, 4]]")
    repl.eval("b = a - a")
    assert repl.doc.variables["b"] == VMatrix(Matrix.from_rows([[0.0, 0.0], [0.0, 0.0]]))


def test_multi_statement_eval():
    repl = MathRepl()
    result = repl.eval("x = 1\ny = 2; x + y")
    assert result == VText("3.0")
    assert set(repl.doc.variables) == {"x", "y"}


def test_results_accumulate():
    repl = MathRepl()
    repl.eval("a = 1")
    repl.eval("a")
    repl.eval("a")
    assert len(repl.doc.results) == 3


def test_failed_statement_keeps_state():
    repl = MathRepl()
    repl.eval("x = 1")
    with pytest.raises(TypeMismatch):
        repl.eval("x = x + [1]")
    assert repl.doc.variables["x"] == VScalar(1.0)
    assert repl.doc.last_result == VScalar(1.0)
    assert len(repl.doc.results) == 1


def test_prepopulated_environment():
    env = Environment({"row": VList((1.0, 2.0))})
    repl = MathRepl(env)
    assert repl.value_of("-row") == VList((-1.0, -2.0))


def test_reset():
    repl = MathRepl()
    repl.eval("x = 1")
    repl.reset()
    assert repl.doc.variables == {}
    assert repl.doc.results == []
    with pytest.raises(UndefinedVariable):
        repl.eval("x")


# ---------------------------------------------------------------------------
# value_of()
# ---------------------------------------------------------------------------

def test_value_of_expression():
    repl = MathRepl()
    repl.eval("m = [[2, 0], [0, 2]]")
    assert repl.value_of("det(m)").value == pytest.approx(4.0)


def test_value_of_does_not_record_result():
    repl = MathRepl()
    repl.value_of("1 + 1")
    assert repl.doc.results == []


def test_value_of_assignment():
    repl = MathRepl()
    assert repl.value_of("z = [1, 2]") == VList((1.0, 2.0))
    assert "z" in repl.doc.variables


# ---------------------------------------------------------------------------
# Document.merge() directly
# ---------------------------------------------------------------------------

def test_document_merge():
    doc = Document()
    doc.merge(parse_program("a = 2; b = -a; b"))
    assert doc.variables["b"] == VScalar(-2.0)
    assert doc.last_result == VText("-2.0")
    assert doc.results == [VScalar(2.0), VScalar(-2.0), VText("-2.0")]


def test_document_merge_nothing():
    doc = Document()
    doc.merge([])
    assert doc.last_result is None


def test_reset_keeps_supplied_environment():
    env = Environment({"old": VScalar(1.0)})
    repl = MathRepl(env)
    repl.reset()
    assert env.variables == {}
    repl.eval("x = 1")
    assert env.variables == {"x": VScalar(1.0)}


def test_matrix_rows_from_list_variables():
    env = Environment({"r1": VList((1.0, 0.0)), "r2": VList((0.0, 1.0))})
    repl = MathRepl(env)
    assert repl.value_of("{r1, r2}") == VMatrix(Matrix.from_rows([[1.0, 0.0], [0.0, 1.0]]))
    assert repl.value_of("det({r1, -r2})") == VScalar(-1.0)


def test_matrix_scalar_row():
    repl = MathRepl()
    assert repl.value_of("{1, 2, 3}") == VMatrix(Matrix.from_row([1.0, 2.0, 3.0]))
    assert repl.value_of("{}") == VMatrix(Matrix.empty())


def test_last_result_follows_partial_merge():
    repl = MathRepl()
    repl.eval("1")
    with pytest.raises(UndefinedVariable):
        repl.eval("a = 7; y")
    assert repl.doc.last_result == VScalar(7.0)
    assert repl.doc.results[-1] == repl.doc.last_result
