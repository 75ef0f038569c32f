# FILE: core/matrix.py
"""
Square matrices (2x2 to 4x4) with cofactor based inversion
"""
from typing import Iterable, List, Sequence

from .errors import DimensionMismatchError, NonInvertibleMatrixError
from .tuples import EPSILON, Tuple4


class Matrix:
    """Immutable NxN matrix stored as a flat row-major tuple"""
    __slots__ = ['size', '_elements']

    def __init__(self, size: int, elements: Iterable[float]):
        elements = tuple(float(e) for e in elements)
        if len(elements) != size * size:
            raise DimensionMismatchError(
                f"A {size}x{size} matrix needs {size * size} elements, got {len(elements)}"
            )
        self.size = size
        self._elements = elements

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> 'Matrix':
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise DimensionMismatchError("Matrix rows must form a square")
        return cls(size, [value for row in rows for value in row])

    @classmethod
    def identity(cls, size: int = 4) -> 'Matrix':
        return cls(size, [1.0 if r == c else 0.0 for r in range(size) for c in range(size)])

    def at(self, row: int, col: int) -> float:
        return self._elements[row * self.size + col]

    def __getitem__(self, index):
        row, col = index
        return self.at(row, col)

    def with_value(self, row: int, col: int, value: float) -> 'Matrix':
        """Copy of this matrix with a single element replaced"""
        elements = list(self._elements)
        elements[row * self.size + col] = value
        return Matrix(self.size, elements)

    def rows(self) -> List[List[float]]:
        n = self.size
        return [list(self._elements[r * n:(r + 1) * n]) for r in range(n)]

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.size == other.size and all(
            abs(a - b) < EPSILON for a, b in zip(self._elements, other._elements)
        )

    __hash__ = None

    def __repr__(self):
        return f"Matrix({self.size}, {self.rows()})"

    def __mul__(self, other):
        if isinstance(other, Matrix):
            return self._multiply_matrix(other)
        if isinstance(other, Tuple4):
            return self._multiply_tuple(other)
        return NotImplemented

    def _multiply_matrix(self, other: 'Matrix') -> 'Matrix':
        if self.size != other.size:
            raise DimensionMismatchError(
                f"Cannot multiply {self.size}x{self.size} by {other.size}x{other.size}"
            )
        n = self.size
        return Matrix(n, [
            sum(self.at(r, k) * other.at(k, c) for k in range(n))
            for r in range(n) for c in range(n)
        ])

    def _multiply_tuple(self, t: Tuple4) -> Tuple4:
        if self.size != 4:
            raise DimensionMismatchError("Only 4x4 matrices can transform a tuple")
        e = self._elements
        x, y, z, w = t.x, t.y, t.z, t.w
        return Tuple4(
            e[0] * x + e[1] * y + e[2] * z + e[3] * w,
            e[4] * x + e[5] * y + e[6] * z + e[7] * w,
            e[8] * x + e[9] * y + e[10] * z + e[11] * w,
            e[12] * x + e[13] * y + e[14] * z + e[15] * w,
        )

    def transpose(self) -> 'Matrix':
        n = self.size
        return Matrix(n, [self.at(c, r) for r in range(n) for c in range(n)])

    def submatrix(self, row: int, col: int) -> 'Matrix':
        """Drop one row and one column"""
        n = self.size
        return Matrix(n - 1, [
            self.at(r, c) for r in range(n) if r != row for c in range(n) if c != col
        ])

    def minor(self, row: int, col: int) -> float:
        return self.submatrix(row, col).determinant()

    def cofactor(self, row: int, col: int) -> float:
        minor = self.minor(row, col)
        return -minor if (row + col) % 2 else minor

    def determinant(self) -> float:
        if self.size == 1:
            return self._elements[0]
        if self.size == 2:
            a, b, c, d = self._elements
            return a * d - b * c
        return sum(self.at(0, c) * self.cofactor(0, c) for c in range(self.size))

    def invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> 'Matrix':
        det = self.determinant()
        if det == 0:
            raise NonInvertibleMatrixError(f"Matrix is not invertible: {self!r}")
        n = self.size
        # Element (r, c) takes cofactor (c, r): the adjugate is the transposed cofactor matrix
        return Matrix(n, [self.cofactor(c, r) / det for r in range(n) for c in range(n)])


IDENTITY = Matrix.identity(4)
