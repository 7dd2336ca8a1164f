from dataclasses import dataclass
from typing import Any, List
import numpy as np

from .polynomials import Polynomial

@dataclass
class Vec2:
    x : Any
    y : Any

    def __iter__(self):
        yield self.x
        yield self.y

    def __str__(self):
        return f"({self.x}, {self.y})"

@dataclass
class Vec3:
    x : Any
    y : Any
    z : Any

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __str__(self):
        return f"({self.x}, {self.y}, {self.z})"

@dataclass
class Matrix:
    values : List[Any]
    n_row  : int
    n_col  : int

    def __post_init__(self):
        self.values = list(self.values)
        assert len(self.values) == self.n_row * self.n_col, (len(self.values), self.n_row, self.n_col)

    def get(self, row, col):
        return self.values[(row - 1) * self.n_col + col - 1]

    def is_square(self):
        return self.n_row == self.n_col

    def trace(self):
        assert self.is_square(), "trace of a non-square matrix"
        result = self.get(1, 1)
        for i in range(2, self.n_row + 1):
            result = result + self.get(i, i)
        return result

    def is_symmetric(self):
        assert self.is_square(), "symmetry of a non-square matrix"
        for i in range(1, self.n_row + 1):
            for j in range(i + 1, self.n_col + 1):
                if self.get(i, j) != self.get(j, i):
                    return False
        return True

    def evaluate(self, *point):
        return Matrix([value.eval(*point) for value in self.values], self.n_row, self.n_col)

    def to_array(self):
        return np.array(self.values, float).reshape(self.n_row, self.n_col)

    def determinant(self):
        assert self.is_square(), "determinant of a non-square matrix"
        if all(isinstance(value, Polynomial) for value in self.values):
            return polynomial_determinant(self)
        return float(np.linalg.det(self.to_array()))

    def characteristic_polynomial(self):
        assert self.is_square(), "characteristic polynomial of a non-square matrix"
        values = []
        for i, value in enumerate(self.values):
            if i % (self.n_col + 1) == 0:
                values.append(Polynomial([value, -1]))
            else:
                values.append(Polynomial([value]))
        return Matrix(values, self.n_row, self.n_col).determinant()

    def __str__(self):
        rows = []
        for i in range(1, self.n_row + 1):
            cells = (f"{str(self.get(i, j)):^20}" for j in range(1, self.n_col + 1))
            rows.append("|" + "|".join(cells) + "|")
        return "\n".join(rows)

def polynomial_determinant(m):
    g = m.get
    if m.n_row == 2:
        return g(1, 1) * g(2, 2) - g(1, 2) * g(2, 1)
    elif m.n_row == 3:
        return (g(1, 1) * g(2, 2) * g(3, 3)
              + g(1, 2) * g(2, 3) * g(3, 1)
              + g(1, 3) * g(2, 1) * g(3, 2)
              - g(3, 1) * g(2, 2) * g(1, 3)
              - g(3, 2) * g(2, 3) * g(1, 1)
              - g(3, 3) * g(2, 1) * g(1, 2))
    assert False, f"symbolic determinant of a {m.n_row}x{m.n_col} matrix"
