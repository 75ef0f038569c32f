# FILE: core/rays.py
from dataclasses import dataclass

from .matrix import Matrix
from .tuples import Tuple4


@dataclass(frozen=True)
class Ray:
    origin: Tuple4  # point
    direction: Tuple4  # vector

    def position(self, t: float) -> Tuple4:
        """Point at parameter t; negative t lies behind the origin"""
        return self.origin + self.direction * t

    def transform(self, m: Matrix) -> 'Ray':
        # w=0 on the direction drops the translation column
        return Ray(m * self.origin, m * self.direction)
