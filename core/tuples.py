# FILE: core/tuples.py
"""
Four component tuple used for points, vectors and colors
"""
import math

import numpy as np

EPSILON = 1e-5


def approx_equal(a: float, b: float) -> bool:
    return abs(a - b) < EPSILON


class Tuple4:
    """Immutable (x, y, z, w) value. w=1 is a point, w=0 a vector or color"""
    __slots__ = ['x', 'y', 'z', 'w']

    def __init__(self, x=0.0, y=0.0, z=0.0, w=0.0):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))
        object.__setattr__(self, 'z', float(z))
        object.__setattr__(self, 'w', float(w))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (Tuple4, (self.x, self.y, self.z, self.w))

    # Color channel aliases
    @property
    def red(self) -> float:
        return self.x

    @property
    def green(self) -> float:
        return self.y

    @property
    def blue(self) -> float:
        return self.z

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __eq__(self, other):
        if not isinstance(other, Tuple4):
            return NotImplemented
        return (approx_equal(self.x, other.x) and approx_equal(self.y, other.y) and
                approx_equal(self.z, other.z) and approx_equal(self.w, other.w))

    # Epsilon equality cannot be made consistent with a hash
    __hash__ = None

    def __repr__(self):
        return f"Tuple4({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"

    def __add__(self, other):
        return Tuple4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other):
        return Tuple4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self):
        return Tuple4(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Tuple4(self.x * other, self.y * other, self.z * other, self.w * other)
        if isinstance(other, Tuple4):
            # Hadamard product, used to blend colors
            return Tuple4(self.x * other.x, self.y * other.y, self.z * other.z, self.w * other.w)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, scalar):
        return Tuple4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other) -> 'Tuple4':
        """Cross product of the xyz parts; the result is always a vector"""
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> 'Tuple4':
        """Unit length copy. A zero vector raises ZeroDivisionError."""
        return self / self.magnitude()

    def reflect(self, normal: 'Tuple4') -> 'Tuple4':
        return self - normal * (2 * self.dot(normal))

    def with_w(self, w: float) -> 'Tuple4':
        return Tuple4(self.x, self.y, self.z, w)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z, self.w])


def point(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(x, y, z, 1.0)


def vector(x: float, y: float, z: float) -> Tuple4:
    return Tuple4(x, y, z, 0.0)


def color(red: float, green: float, blue: float) -> Tuple4:
    return Tuple4(red, green, blue, 0.0)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
