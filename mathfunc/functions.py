from dataclasses import dataclass, fields
from enum import Enum
import numpy as np

from .rational import Rational
from .splitter import Op, VARIABLES

DX = (1, 0, 0)
DY = (0, 1, 0)
DZ = (0, 0, 1)
SEEDS = (DX, DY, DZ)

class Kind(Enum):
    SIN   = "sin"
    COS   = "cos"
    TAN   = "tan"
    COT   = "cot"
    SEC   = "sec"
    CSC   = "csc"
    ASIN  = "asin"
    ACOS  = "acos"
    ATAN  = "atan"
    SINH  = "sinh"
    COSH  = "cosh"
    TANH  = "tanh"
    COTH  = "coth"
    SECH  = "sech"
    CSCH  = "csch"
    ASINH = "asinh"
    ACOSH = "acosh"
    ATANH = "atanh"
    ABS   = "abs"
    LN    = "ln"

PRECEDENCE = {Op.ADD: 10, Op.SUB: 10, Op.MUL: 20, Op.DIV: 20, Op.POW: 30}

@dataclass(frozen=True)
class Function:
    precedence = 1000

    def __post_init__(self):
        return validate(self)

    def __str__(self):
        return self.stringify(default_repr)

    def __add__(self, other):
        return add(self, convert(other))

    def __radd__(self, other):
        return add(convert(other), self)

    def __sub__(self, other):
        return sub(self, convert(other))

    def __rsub__(self, other):
        return sub(convert(other), self)

    def __mul__(self, other):
        return mul(self, convert(other))

    def __rmul__(self, other):
        return mul(convert(other), self)

    def __truediv__(self, other):
        return div(self, convert(other))

    def __rtruediv__(self, other):
        return div(convert(other), self)

    def __pow__(self, other):
        return power(self, convert(other))

    def __rpow__(self, other):
        return power(convert(other), self)

    def __neg__(self):
        return neg(self)

    def subexpressions(self):
        for f in fields(self):
            a = getattr(self, f.name)
            if isinstance(a, Function):
                yield a

    def size(self):
        return 1 + sum(a.size() for a in self.subexpressions())

@dataclass(frozen=True)
class Var(Function):
    axis : int

    def stringify(self, s):
        return VARIABLES[self.axis]

    def evaluate(self, point):
        return point[self.axis]

    def derivative(self, seed):
        return Const(seed[self.axis])

@dataclass(frozen=True)
class Euler(Function):
    def stringify(self, s):
        return "e"

    def evaluate(self, point):
        return np.e

    def derivative(self, seed):
        return zero

@dataclass(frozen=True)
class Pi(Function):
    def stringify(self, s):
        return "pi"

    def evaluate(self, point):
        return np.pi

    def derivative(self, seed):
        return zero

@dataclass(frozen=True)
class Const(Function):
    value : Rational

    @property
    def precedence(self):
        if self.value < 0:
            return 5
        if not self.value.is_integer():
            return 20
        return 1000

    def stringify(self, s):
        return str(self.value)

    def evaluate(self, point):
        return np.float64(float(self.value))

    def derivative(self, seed):
        return zero

@dataclass(frozen=True)
class Binary(Function):
    op  : Op
    lhs : Function
    rhs : Function

    @property
    def precedence(self):
        return PRECEDENCE.get(self.op, 0)

    def stringify(self, s):
        if self.op is Op.COMP:
            raise RuntimeError("composition marker in a finished tree")
        p = self.precedence
        return f"{s(self.lhs, p - 1)}{self.op.value}{s(self.rhs, p)}"

    def evaluate(self, point):
        lhs = self.lhs.evaluate(point)
        rhs = self.rhs.evaluate(point)
        if self.op is Op.ADD:
            return lhs + rhs
        elif self.op is Op.SUB:
            return lhs - rhs
        elif self.op is Op.MUL:
            return lhs * rhs
        elif self.op is Op.DIV:
            return np.divide(lhs, rhs)
        elif self.op is Op.POW:
            return np.power(lhs, rhs)
        raise RuntimeError("composition marker in a finished tree")

    def derivative(self, seed):
        f, g = self.lhs, self.rhs
        if self.op is Op.ADD:
            return add(f.derivative(seed), g.derivative(seed))
        elif self.op is Op.SUB:
            return sub(f.derivative(seed), g.derivative(seed))
        elif self.op is Op.MUL:
            return add(mul(f.derivative(seed), g), mul(f, g.derivative(seed)))
        elif self.op is Op.DIV:
            numerator = sub(mul(f.derivative(seed), g), mul(f, g.derivative(seed)))
            return div(numerator, powr(g, 2))
        elif self.op is Op.POW:
            if isinstance(g, Const):
                if isinstance(f, Var) and seed[f.axis] == 1:
                    return mul(g, powr(f, g.value - 1))
                return mul(mul(f.derivative(seed), g), powr(f, g.value - 1))
            if isinstance(f, Euler):
                return mul(g.derivative(seed), self)
            return power(e, mul(g, Special(Kind.LN, f))).derivative(seed)
        raise RuntimeError("composition marker in a finished tree")

@dataclass(frozen=True)
class Special(Function):
    kind     : Kind
    argument : Function

    def stringify(self, s):
        return f"{self.kind.value}({s(self.argument)})"

    def evaluate(self, point):
        return EVALUATORS[self.kind](self.argument.evaluate(point))

    def derivative(self, seed):
        return mul(self.argument.derivative(seed), OUTER_DERIVATIVES[self.kind](self.argument))

def derivative(f, seed):
    assert seed in SEEDS, seed
    return f.derivative(seed)

def is_const(f, value=None):
    return isinstance(f, Const) and (value is None or f.value == value)

def is_op(f, op):
    return isinstance(f, Binary) and f.op is op

def is_special(f, kind):
    return isinstance(f, Special) and f.kind is kind

def coefficient(u):
    if is_op(u, Op.MUL) and isinstance(u.lhs, Const):
        return u.lhs.value, u.rhs
    return Rational(1), u

def base(u):
    if is_op(u, Op.POW):
        return u.lhs
    return u

def exponent(u):
    if is_op(u, Op.POW):
        return u.rhs
    return one

def add(f, g):
    if is_const(f, 0):
        return g
    if is_const(g, 0):
        return f
    if isinstance(f, Const) and isinstance(g, Const):
        return Const(f.value + g.value)
    if f == g:
        return mul(two, f)
    if is_op(f, Op.ADD):
        if f.lhs == g:
            return add(mul(two, g), f.rhs)
        if f.rhs == g:
            return add(mul(two, g), f.lhs)
    if is_op(f, Op.SUB):
        if f.lhs == g:
            return sub(mul(two, g), f.rhs)
        if f.rhs == g:
            return f.lhs
    c, t = coefficient(f)
    d, u = coefficient(g)
    if t == u:
        return mul(Const(c + d), t)
    return Binary(Op.ADD, f, g)

def sub(f, g):
    if isinstance(f, Const) and isinstance(g, Const):
        return Const(f.value - g.value)
    if is_const(g, 0):
        return f
    if f == g:
        return zero
    if is_const(f, 0):
        return neg(g)
    if is_op(f, Op.ADD):
        if f.lhs == g:
            return f.rhs
        if f.rhs == g:
            return f.lhs
    if is_op(f, Op.SUB):
        if f.lhs == g:
            return neg(f.rhs)
        if f.rhs == g:
            return sub(f.lhs, mul(two, g))
    c, t = coefficient(f)
    d, u = coefficient(g)
    if t == u:
        return mul(Const(c - d), t)
    return Binary(Op.SUB, f, g)

def neg(f):
    return mul(Const(-1), f)

def mul(f, g):
    if f == g:
        return powr(f, 2)
    if isinstance(g, Const) and not isinstance(f, Const):
        f, g = g, f
    if isinstance(f, Const):
        if f.value == 0:
            return zero
        if f.value == 1:
            return g
        if isinstance(g, Const):
            return Const(f.value * g.value)
        if is_op(g, Op.MUL) and isinstance(g.lhs, Const):
            return mul(Const(f.value * g.lhs.value), g.rhs)
    if is_op(g, Op.DIV) and g.rhs == f:
        return g.lhs
    if is_op(f, Op.DIV) and f.rhs == g:
        return f.lhs
    if is_op(g, Op.DIV):
        return div(mul(f, g.lhs), g.rhs)
    if is_op(g, Op.MUL) and isinstance(g.lhs, Const):
        return mul(g.lhs, mul(f, g.rhs))
    if is_op(f, Op.MUL) and isinstance(f.lhs, Const):
        return mul(f.lhs, mul(f.rhs, g))
    if base(f) == base(g) and isinstance(exponent(f), Const) and isinstance(exponent(g), Const):
        return powr(base(f), exponent(f).value + exponent(g).value)
    return Binary(Op.MUL, f, g)

def div(f, g):
    if is_const(g, 0):
        return Binary(Op.DIV, f, g)
    if f == g:
        return one
    if is_const(g, 1):
        return f
    if is_const(f, 0):
        return zero
    if isinstance(f, Const) and isinstance(g, Const):
        return Const(f.value / g.value)
    return Binary(Op.DIV, f, g)

def power(f, g):
    if is_const(g, 0):
        return one
    if is_const(g, 1) or is_const(f, 1):
        return f
    if isinstance(f, Const) and isinstance(g, Const) and g.value.is_integer():
        if f.value != 0 or g.value > 0:
            return Const(f.value ** g.value.num)
    if isinstance(f, Euler):
        if is_special(g, Kind.LN):
            return g.argument
        if is_op(g, Op.MUL) and isinstance(g.lhs, Const) and is_special(g.rhs, Kind.LN):
            return powr(g.rhs.argument, g.lhs.value)
    if is_op(f, Op.POW) and isinstance(f.rhs, Const) and isinstance(g, Const):
        return powr(f.lhs, f.rhs.value * g.value)
    if is_op(f, Op.MUL) and isinstance(f.lhs, Const) and is_const(g) and g.value.is_integer():
        return mul(power(f.lhs, g), power(f.rhs, g))
    return Binary(Op.POW, f, g)

def powr(f, r):
    return power(f, Const(r))

def sqrt(f):
    return power(f, half)

OUTER_DERIVATIVES = {
    Kind.SIN:   lambda a: Special(Kind.COS, a),
    Kind.COS:   lambda a: neg(Special(Kind.SIN, a)),
    Kind.TAN:   lambda a: powr(Special(Kind.SEC, a), 2),
    Kind.COT:   lambda a: neg(powr(Special(Kind.CSC, a), 2)),
    Kind.SEC:   lambda a: mul(Special(Kind.SEC, a), Special(Kind.TAN, a)),
    Kind.CSC:   lambda a: neg(mul(Special(Kind.CSC, a), Special(Kind.COT, a))),
    Kind.ASIN:  lambda a: div(one, sqrt(sub(one, powr(a, 2)))),
    Kind.ACOS:  lambda a: div(Const(-1), sqrt(sub(one, powr(a, 2)))),
    Kind.ATAN:  lambda a: div(one, add(one, powr(a, 2))),
    Kind.SINH:  lambda a: Special(Kind.COSH, a),
    Kind.COSH:  lambda a: Special(Kind.SINH, a),
    Kind.TANH:  lambda a: powr(Special(Kind.SECH, a), 2),
    Kind.COTH:  lambda a: neg(powr(Special(Kind.CSCH, a), 2)),
    Kind.SECH:  lambda a: neg(mul(Special(Kind.SECH, a), Special(Kind.TANH, a))),
    Kind.CSCH:  lambda a: neg(mul(Special(Kind.CSCH, a), Special(Kind.COTH, a))),
    Kind.ASINH: lambda a: div(one, sqrt(add(powr(a, 2), one))),
    Kind.ACOSH: lambda a: div(one, sqrt(sub(powr(a, 2), one))),
    Kind.ATANH: lambda a: div(one, sub(one, powr(a, 2))),
    Kind.ABS:   lambda a: div(a, Special(Kind.ABS, a)),
    Kind.LN:    lambda a: div(one, a),
}

EVALUATORS = {
    Kind.SIN:   np.sin,
    Kind.COS:   np.cos,
    Kind.TAN:   np.tan,
    Kind.COT:   lambda v: 1 / np.tan(v),
    Kind.SEC:   lambda v: 1 / np.cos(v),
    Kind.CSC:   lambda v: 1 / np.sin(v),
    Kind.ASIN:  np.arcsin,
    Kind.ACOS:  np.arccos,
    Kind.ATAN:  np.arctan,
    Kind.SINH:  np.sinh,
    Kind.COSH:  np.cosh,
    Kind.TANH:  np.tanh,
    Kind.COTH:  lambda v: 1 / np.tanh(v),
    Kind.SECH:  lambda v: 1 / np.cosh(v),
    Kind.CSCH:  lambda v: 1 / np.sinh(v),
    Kind.ASINH: np.arcsinh,
    Kind.ACOSH: np.arccosh,
    Kind.ATANH: np.arctanh,
    Kind.ABS:   np.abs,
    Kind.LN:    np.log,
}

def convert(obj):
    if isinstance(obj, Function):
        return obj
    elif isinstance(obj, (int, Rational)):
        return Const(obj)
    elif isinstance(obj, float):
        return Const(Rational.from_float(obj))
    else:
        raise TypeError(f"cannot use {obj!r} as a Function")

def default_repr(expr, precedence=0):
    if precedence < expr.precedence:
        return expr.stringify(default_repr)
    else:
        return "(" + expr.stringify(default_repr) + ")"

def validate(obj):
    for f in fields(obj):
        a = getattr(obj, f.name)
        if f.type is Rational and isinstance(a, int):
            object.__setattr__(obj, f.name, a := Rational(a))
        if isinstance(f.type, type):
            assert isinstance(a, f.type), f".{f.name} = {a!r} ? {f.type.__name__}"

x = Var(0)
y = Var(1)
z = Var(2)
e = Euler()
pi = Pi()
zero = Const(Rational(0))
one  = Const(Rational(1))
two  = Const(Rational(2))
half = Const(Rational(1, 2))
