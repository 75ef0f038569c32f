# FILE: core/intersections.py
"""
Intersection records and visible hit selection
"""
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional


@dataclass(frozen=True)
class Intersection:
    t: float
    object: Any  # the shape that was hit, compared by identity

    def __repr__(self):
        return f"Intersection(t={self.t:g}, object={type(self.object).__name__})"


def intersections(*xs: Intersection) -> List[Intersection]:
    """Aggregate intersections sorted ascending by t (stable for ties)"""
    return sorted(xs, key=lambda i: i.t)


def hit(xs: Iterable[Intersection]) -> Optional[Intersection]:
    """Nearest intersection with t >= 0, or None. Input need not be sorted."""
    visible = [i for i in xs if i.t >= 0]
    if not visible:
        return None
    return min(visible, key=lambda i: i.t)
