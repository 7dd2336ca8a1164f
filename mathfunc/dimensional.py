from dataclasses import dataclass
from typing import ClassVar

from .functions import Function, DX, DY, DZ, derivative, powr
from .integrate import DEFAULT_STEPS, midpoint
from .matrix import Matrix, Vec2, Vec3
from .parser import build

@dataclass(frozen=True)
class Tagged:
    """A Function together with the number of variables it may use."""
    function : Function
    dim : ClassVar[int] = 0
    seeds : ClassVar[tuple] = ()

    @classmethod
    def from_str(cls, text):
        return cls(build(text, None, cls.dim))

    @classmethod
    def build(cls, text, ctx):
        return cls(build(text, ctx, cls.dim))

    def __str__(self):
        return str(self.function)

    def combine(self, other, fn):
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(fn(self.function, other.function))

    def __add__(self, other):
        return self.combine(other, Function.__add__)

    def __sub__(self, other):
        return self.combine(other, Function.__sub__)

    def __mul__(self, other):
        return self.combine(other, Function.__mul__)

    def __truediv__(self, other):
        return self.combine(other, Function.__truediv__)

    def powr(self, exponent):
        return type(self)(powr(self.function, exponent))

    def partial(self, seed):
        return type(self)(derivative(self.function, seed))

    def gradient(self):
        return [self.partial(seed) for seed in self.seeds]

    def hessian(self):
        first = self.gradient()
        values = [d.partial(seed) for d in first for seed in self.seeds]
        return Matrix(values, self.dim, self.dim)

    def evaluate_at(self, x, y=0.0, z=0.0):
        return self.function.evaluate((x, y, z))

@dataclass(frozen=True)
class F1D(Tagged):
    dim = 1
    seeds = (DX,)

    def eval(self, x):
        return self.evaluate_at(x)

    def derivative(self):
        return self.partial(DX)

    def integrate(self, a, b, steps=DEFAULT_STEPS):
        return midpoint(self.function, a, b, steps)

@dataclass(frozen=True)
class F2D(Tagged):
    dim = 2
    seeds = (DX, DY)

    def eval(self, x, y):
        return self.evaluate_at(x, y)

    def derivative(self):
        return Vec2(*self.gradient())

@dataclass(frozen=True)
class F3D(Tagged):
    dim = 3
    seeds = (DX, DY, DZ)

    def eval(self, x, y, z):
        return self.evaluate_at(x, y, z)

    def derivative(self):
        return Vec3(*self.gradient())
