from itertools import zip_longest

class Polynomial:
    """Univariate polynomial, coefficients in ascending powers."""
    __slots__ = ("coeffs",)

    def __init__(self, coeffs=()):
        coeffs = list(coeffs)
        while len(coeffs) > 1 and coeffs[-1] == 0:
            coeffs.pop()
        if not coeffs:
            coeffs.append(0.0)
        self.coeffs = tuple(coeffs)

    @property
    def degree(self):
        return len(self.coeffs) - 1

    def __hash__(self):
        return hash(self.coeffs)

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.coeffs == other.coeffs

    def __add__(self, other):
        other = convert(other)
        return Polynomial(a + b for a, b in zip_longest(self.coeffs, other.coeffs, fillvalue=0))

    def __radd__(self, other):
        return convert(other) + self

    def __sub__(self, other):
        other = convert(other)
        return Polynomial(a - b for a, b in zip_longest(self.coeffs, other.coeffs, fillvalue=0))

    def __rsub__(self, other):
        return convert(other) - self

    def __neg__(self):
        return Polynomial(-a for a in self.coeffs)

    def __mul__(self, other):
        other = convert(other)
        res = [0] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                res[i+j] += a * b
        return Polynomial(res)

    def __rmul__(self, other):
        return convert(other) * self

    def evaluate(self, value):
        total = 0
        for c in reversed(self.coeffs):
            total = total * value + c
        return total

    def __repr__(self):
        return f"Polynomial({list(self.coeffs)})"

def convert(obj):
    if isinstance(obj, Polynomial):
        return obj
    return Polynomial([obj])
