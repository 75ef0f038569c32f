# FILE: core/spheres.py
"""
Unit sphere primitive with an attached transform and material
"""
import math
from typing import List, Optional

from .errors import NonInvertibleMatrixError
from .intersections import Intersection, intersections
from .materials import Material
from .matrix import IDENTITY, Matrix
from .rays import Ray
from .tuples import Tuple4, point


class Sphere:
    """Sphere of radius 1 centered at the object space origin"""
    __slots__ = ['origin', 'radius', 'material', 'name', '_transform', '_inverse', '_inverse_transpose']

    def __init__(self, transform: Matrix = IDENTITY, material: Optional[Material] = None,
                 name: str = "sphere"):
        self.origin = point(0.0, 0.0, 0.0)
        self.radius = 1.0
        self.material = material if material is not None else Material()
        self.name = name
        self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix):
        # Inverses are cached on assignment; None marks a singular transform
        self._transform = m
        if m.invertible():
            self._inverse = m.inverse()
            self._inverse_transpose = self._inverse.transpose()
        else:
            self._inverse = None
            self._inverse_transpose = None

    @property
    def inverse_transform(self) -> Matrix:
        if self._inverse is None:
            raise NonInvertibleMatrixError(
                f"Transform of {self.name!r} is not invertible: {self._transform!r}"
            )
        return self._inverse

    def __repr__(self):
        return f"Sphere(name={self.name!r}, transform={self._transform!r}, material={self.material!r})"

    def intersect(self, world_ray: Ray) -> List[Intersection]:
        ray = world_ray.transform(self.inverse_transform)

        sphere_to_ray = ray.origin - self.origin
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0

        discriminant = b * b - 4 * a * c
        if discriminant < 0:
            return []

        sqrt_d = math.sqrt(discriminant)
        t1 = (-b - sqrt_d) / (2.0 * a)
        t2 = (-b + sqrt_d) / (2.0 * a)
        return intersections(Intersection(t1, self), Intersection(t2, self))

    def normal_at(self, world_point: Tuple4) -> Tuple4:
        object_point = self.inverse_transform * world_point
        object_normal = object_point - self.origin
        # The inverse-transpose keeps normals perpendicular under non-uniform scaling
        world_normal = self._inverse_transpose * object_normal
        return world_normal.with_w(0.0).normalize()
