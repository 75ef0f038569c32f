# FILE: core/lights.py
from dataclasses import dataclass

from .tuples import Tuple4


@dataclass(frozen=True)
class PointLight:
    """Light source with no size, shared read-only across render workers"""
    position: Tuple4
    intensity: Tuple4
