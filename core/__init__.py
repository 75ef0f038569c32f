"""
Geometric core: tuples, matrices, rays, spheres and Phong shading
"""
from .canvas import Canvas
from .errors import (DimensionMismatchError, ImageFileError, NonInvertibleMatrixError,
                     PixelOutOfBoundsError, RayTracerError, UnsupportedImageFormatError)
from .intersections import Intersection, hit, intersections
from .lights import PointLight
from .materials import Material
from .matrix import IDENTITY, Matrix
from .rays import Ray
from .spheres import Sphere
from .transformations import chain, rotation_x, rotation_y, rotation_z, scaling, shearing, translation
from .tuples import BLACK, EPSILON, WHITE, Tuple4, color, point, vector
