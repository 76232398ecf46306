"""Tests for mathlang.values."""

import pytest

from mathlang import Kind, Matrix, VList, VMatrix, VScalar, VText, empty_matrix, negate
from mathlang.errors import UnsupportedOperand


class TestKind:
    def test_kind_matches_payload(self):
        assert VScalar(1.0).kind is Kind.SCALAR
        assert VList((1.0,)).kind is Kind.LIST
        assert VMatrix(Matrix.empty()).kind is Kind.MATRIX
        assert VText("x").kind is Kind.STRING

    def test_list_items_are_floats(self):
        lst = VList([1, 2])
        assert lst.items == (1.0, 2.0)
        assert lst == VList((1.0, 2.0))

    def test_empty_matrix(self):
        assert empty_matrix() == VMatrix(Matrix.empty())


class TestNegate:
    def test_scalar(self):
        assert negate(VScalar(2.5)) == VScalar(-2.5)

    def test_double_negation(self):
        x = VScalar(7.25)
        assert negate(negate(x)) == x

    def test_list(self):
        assert negate(VList((1.0, -2.0))) == VList((-1.0, 2.0))

    def test_matrix(self):
        m = VMatrix(Matrix.from_rows([[1.0, -2.0], [3.0, 0.5]]))
        assert negate(m) == VMatrix(Matrix.from_rows([[-1.0, 2.0], [-3.0, -0.5]]))

    def test_original_unchanged(self):
        x = VList((1.0, 2.0))
        negate(x)
        assert x == VList((1.0, 2.0))

    def test_text_is_unsupported(self):
        with pytest.raises(UnsupportedOperand) as info:
            negate(VText("abc"))
        assert info.value.op == "NEGATE"
        assert info.value.kind is Kind.STRING


class TestRendering:
    def test_scalar(self):
        assert str(VScalar(5.0)) == "5.0"
        assert str(VScalar(-0.5)) == "-0.5"

    def test_list(self):
        assert str(VList((1.0, 2.0, 3.0))) == "[1.0, 2.0, 3.0]"

    def test_matrix(self):
        assert str(VMatrix(Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]]))) == "[[1.0, 2.0], [3.0, 4.0]]"

    def test_empty_matrix(self):
        assert str(empty_matrix()) == "[]"

    def test_text(self):
        assert str(VText("hello")) == "hello"
