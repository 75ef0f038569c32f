# FILE: core/transformations.py
"""
Builders for affine transformation matrices
"""
import math
from functools import reduce

from .matrix import IDENTITY, Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    return IDENTITY.with_value(0, 3, x).with_value(1, 3, y).with_value(2, 3, z)


def scaling(x: float, y: float, z: float) -> Matrix:
    return IDENTITY.with_value(0, 0, x).with_value(1, 1, y).with_value(2, 2, z)


def rotation_x(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return (IDENTITY
            .with_value(1, 1, cos_r).with_value(1, 2, -sin_r)
            .with_value(2, 1, sin_r).with_value(2, 2, cos_r))


def rotation_y(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return (IDENTITY
            .with_value(0, 0, cos_r).with_value(0, 2, sin_r)
            .with_value(2, 0, -sin_r).with_value(2, 2, cos_r))


def rotation_z(radians: float) -> Matrix:
    cos_r, sin_r = math.cos(radians), math.sin(radians)
    return (IDENTITY
            .with_value(0, 0, cos_r).with_value(0, 1, -sin_r)
            .with_value(1, 0, sin_r).with_value(1, 1, cos_r))


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """Each coefficient moves one axis in proportion to another, e.g. xy moves x by y"""
    return (IDENTITY
            .with_value(0, 1, xy).with_value(0, 2, xz)
            .with_value(1, 0, yx).with_value(1, 2, yz)
            .with_value(2, 0, zx).with_value(2, 1, zy))


def chain(*transforms: Matrix) -> Matrix:
    """
    Compose transforms listed in the order they should be applied.

    chain(A, B, C) == C * B * A, so A acts on a point first.
    """
    return reduce(lambda acc, m: m * acc, transforms, IDENTITY)
