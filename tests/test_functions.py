import numpy as np
import pytest

from mathfunc.functions import (
    Binary, Const, Kind, Special, Var,
    x, y, e, zero, one, two,
    add, sub, mul, div, power, powr, neg, sqrt,
)
from mathfunc.parser import build
from mathfunc.rational import Rational
from mathfunc.splitter import Op


def test_addition_rules():
    assert add(zero, x) is x
    assert add(x, zero) is x
    assert add(Const(2), Const(3)) == Const(5)
    assert add(x, x) == Binary(Op.MUL, two, x)
    assert add(mul(two, x), x) == Binary(Op.MUL, Const(3), x)
    assert add(Binary(Op.ADD, x, y), x) == Binary(Op.ADD, Binary(Op.MUL, two, x), y)
    assert add(Binary(Op.SUB, x, y), y) is x


def test_subtraction_rules():
    assert sub(x, x) == zero
    assert sub(x, zero) is x
    assert sub(zero, x) == Binary(Op.MUL, Const(-1), x)
    assert sub(Const(5), Const(7)) == Const(-2)
    assert sub(Binary(Op.ADD, x, y), x) is y
    assert sub(Binary(Op.ADD, x, y), y) is x
    assert sub(mul(Const(5), x), mul(two, x)) == Binary(Op.MUL, Const(3), x)


def test_multiplication_rules():
    assert mul(zero, x) == zero
    assert mul(x, zero) == zero
    assert mul(one, x) is x
    assert mul(x, Const(3)) == Binary(Op.MUL, Const(3), x)
    assert mul(Const(2), mul(Const(3), x)) == Binary(Op.MUL, Const(6), x)
    assert mul(x, x) == Binary(Op.POW, x, two)
    assert mul(div(x, y), y) is x
    assert mul(y, div(x, y)) is x
    assert mul(powr(x, 2), powr(x, 3)) == Binary(Op.POW, x, Const(5))
    assert mul(x, powr(x, 2)) == Binary(Op.POW, x, Const(3))


def test_division_rules():
    assert div(x, x) == one
    assert div(x, one) is x
    assert div(zero, x) == zero
    assert div(Const(6), Const(4)) == Const(Rational(3, 2))
    assert div(x, zero) == Binary(Op.DIV, x, zero)


def test_power_rules():
    assert power(x, zero) == one
    assert power(x, one) is x
    assert power(one, x) is one
    assert power(Const(2), Const(10)) == Const(1024)
    assert power(Const(2), Const(-2)) == Const(Rational(1, 4))
    assert power(Const(0), Const(-1)) == Binary(Op.POW, Const(0), Const(-1))
    assert power(e, Special(Kind.LN, x)) is x
    assert power(e, mul(Const(3), Special(Kind.LN, x))) == Binary(Op.POW, x, Const(3))
    assert power(powr(x, 2), Const(3)) == Binary(Op.POW, x, Const(6))
    assert sqrt(powr(x, 2)) is x
    assert power(mul(Const(3), x), two) == Binary(Op.MUL, Const(9), Binary(Op.POW, x, two))


def test_negation():
    assert neg(x) == Binary(Op.MUL, Const(-1), x)
    assert neg(neg(x)) == x
    assert neg(Const(4)) == Const(-4)


def test_operators_build_canonical_trees():
    assert x + 1 == Binary(Op.ADD, x, one)
    assert 2 * x == Binary(Op.MUL, two, x)
    assert x ** 2 == Binary(Op.POW, x, two)
    assert 1.5 * x == Binary(Op.MUL, Const(Rational(3, 2)), x)
    assert -x == neg(x)
    assert x - x == zero
    assert 1 / x == Binary(Op.DIV, one, x)
    with pytest.raises(TypeError):
        x + "y"


def test_constants_are_validated():
    assert Const(3).value == Rational(3)
    with pytest.raises(AssertionError):
        Const(1.5)
    with pytest.raises(AssertionError):
        Binary(Op.ADD, x, 1)


def test_display():
    assert str(build("3x^2+e+7")) == "3*x^2+e+7"
    assert str(build("x-(y-1)", dim=2)) == "x-(y-1)"
    assert str(build("(x+1)^(1/2)")) == "(x+1)^(1/2)"
    assert str(build("-x")) == "(-1)*x"
    assert str(Var(2)) == "z"


def test_subexpressions_and_size():
    f = build("x+sin(y)", dim=2)
    assert list(f.subexpressions()) == [x, Special(Kind.SIN, y)]
    assert f.size() == 4
    assert x.size() == 1


@pytest.mark.parametrize("text", ["x", "x+1", "sin(x)", "x*y", "e^x"])
def test_repeated_operations_do_not_grow(text):
    f = build(text, dim=2)
    doubled = f + f
    g = doubled
    for _ in range(4):
        g = g + g
    assert g.size() == doubled.size()
    squared = f * f
    h = squared
    for _ in range(4):
        h = h * h
    assert h.size() == squared.size()


def test_evaluate():
    assert build("x^2+1").evaluate((3.0, 0.0, 0.0)) == pytest.approx(10.0)
    assert build("xyz", dim=3).evaluate((2.0, 3.0, 4.0)) == pytest.approx(24.0)
    assert Special(Kind.COT, x).evaluate((1.0, 0.0, 0.0)) == pytest.approx(1 / np.tan(1.0))
    assert build("e^ln(x)+pi").evaluate((2.0, 0.0, 0.0)) == pytest.approx(2.0 + np.pi)
    values = build("sin(x)").evaluate((np.array([0.0, np.pi / 2]), 0.0, 0.0))
    assert values == pytest.approx([0.0, 1.0])


@pytest.mark.parametrize("kind, value, expected", [
    (Kind.SEC, 0.5, 1 / np.cos(0.5)),
    (Kind.CSC, 0.5, 1 / np.sin(0.5)),
    (Kind.COTH, 0.5, 1 / np.tanh(0.5)),
    (Kind.SECH, 0.5, 1 / np.cosh(0.5)),
    (Kind.CSCH, 0.5, 1 / np.sinh(0.5)),
    (Kind.ACOSH, 2.0, np.arccosh(2.0)),
    (Kind.ABS, -3.0, 3.0),
    (Kind.LN, np.e, 1.0),
])
def test_evaluate_special(kind, value, expected):
    assert Special(kind, x).evaluate((value, 0.0, 0.0)) == pytest.approx(expected)


def test_division_by_zero_evaluates_to_inf():
    with np.errstate(divide="ignore"):
        assert np.isinf(div(one, zero).evaluate((0.0, 0.0, 0.0)))


def test_composition_marker_is_rejected():
    f = Binary(Op.COMP, x, y)
    with pytest.raises(RuntimeError):
        f.evaluate((1.0, 2.0, 0.0))
    with pytest.raises(RuntimeError):
        str(f)


def test_module_constants():
    assert (x, y) == (Var(0), Var(1))
    assert zero == Const(0)
    assert one == Const(1)
    assert two == Const(2)
    assert e.evaluate((0.0, 0.0, 0.0)) == pytest.approx(np.e)
