from fractions import Fraction
from functools import total_ordering
import math
import re

DECIMAL = re.compile(r"(\d+)(?:\.(\d+))?$")

def gcd(n, m):
    if n == 0 and m == 0:
        raise ValueError("gcd(0, 0) is undefined")
    return math.gcd(n, m)

def lcm(n, m):
    return abs(n * m) // gcd(n, m)

@total_ordering
class Rational:
    """Exact fraction kept in lowest terms, sign on the numerator."""
    __slots__ = ("value",)

    def __init__(self, num, den=1):
        if den == 0:
            raise ZeroDivisionError(f"Rational({num}, 0)")
        self.value = Fraction(num, den)

    @classmethod
    def wrap(cls, value):
        return cls(value.numerator, value.denominator)

    @property
    def num(self):
        return self.value.numerator

    @property
    def den(self):
        return self.value.denominator

    @classmethod
    def parse(cls, text):
        m = DECIMAL.match(text)
        if m is None:
            return None
        whole, frac = m.groups()
        if frac is None:
            return cls(int(whole))
        return cls(int(whole + frac), 10 ** len(frac))

    @classmethod
    def from_float(cls, value):
        value = float(value)
        text = repr(value)
        sign = -1 if text.startswith("-") else 1
        exact = cls.parse(text.lstrip("-"))
        if exact is not None:
            return exact * sign
        return cls.wrap(Fraction(value))

    def is_integer(self):
        return self.den == 1

    def __float__(self):
        return float(self.value)

    def __hash__(self):
        return hash(self.value)

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == other
        if isinstance(other, Rational):
            return self.value == other.value
        return NotImplemented

    def __lt__(self, other):
        return self.value < convert(other).value

    def __neg__(self):
        return Rational.wrap(-self.value)

    def __abs__(self):
        return Rational.wrap(abs(self.value))

    def __add__(self, other):
        return Rational.wrap(self.value + convert(other).value)

    def __radd__(self, other):
        return convert(other) + self

    def __sub__(self, other):
        return Rational.wrap(self.value - convert(other).value)

    def __rsub__(self, other):
        return convert(other) - self

    def __mul__(self, other):
        return Rational.wrap(self.value * convert(other).value)

    def __rmul__(self, other):
        return convert(other) * self

    def __truediv__(self, other):
        return Rational.wrap(self.value / convert(other).value)

    def __rtruediv__(self, other):
        return convert(other) / self

    def __pow__(self, exponent):
        assert isinstance(exponent, int), exponent
        return Rational.wrap(self.value ** exponent)

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return f"Rational({self.num}, {self.den})"

def convert(obj):
    if isinstance(obj, Rational):
        return obj
    elif isinstance(obj, int):
        return Rational(obj)
    else:
        raise TypeError(f"cannot use {obj!r} as a Rational")
