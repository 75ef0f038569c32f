"""
Small drivers exercising tuples and transforms without any ray casting
"""
import logging
import math
from dataclasses import dataclass
from typing import List, Tuple

from core.canvas import Canvas
from core.transformations import rotation_y
from core.tuples import Tuple4, color, point, vector

logger = logging.getLogger(__name__)

MAX_TICKS = 1000


@dataclass(frozen=True)
class Projectile:
    position: Tuple4  # point
    velocity: Tuple4  # vector


@dataclass(frozen=True)
class Environment:
    gravity: Tuple4  # vector
    wind: Tuple4  # vector


def tick(env: Environment, proj: Projectile) -> Projectile:
    """Advance the projectile by one time step"""
    return Projectile(proj.position + proj.velocity,
                      proj.velocity + env.gravity + env.wind)


def launch(speed: float = 11.25) -> Tuple[Projectile, Environment]:
    proj = Projectile(point(0.0, 1.0, 0.0), vector(1.0, 1.8, 0.0).normalize() * speed)
    env = Environment(vector(0.0, -0.1, 0.0), vector(-0.01, 0.0, 0.0))
    return proj, env


def trajectory(proj: Projectile, env: Environment, max_ticks: int = MAX_TICKS) -> List[Projectile]:
    """Positions until the projectile drops to the ground (y <= 0)"""
    path = []
    while proj.position.y > 0 and len(path) < max_ticks:
        path.append(proj)
        proj = tick(env, proj)
    return path


def plot_projectile(canvas: Canvas, proj: Projectile, env: Environment) -> int:
    """Plot a trajectory with canvas y flipped; returns the number of plotted points"""
    plotted = 0
    for step, p in enumerate(trajectory(proj, env), 1):
        # Tint by speed: slow points turn green, fast points stay blue
        mag = 1.0 / p.velocity.magnitude() * 4.0
        px = round(p.position.x)
        py = canvas.height - round(p.position.y)
        logger.debug(f"Tick {step}, x:{p.position.x:.2f}, y: {p.position.y:.2f}")
        if canvas.contains(px, py):
            canvas.write_pixel(px, py, color(1.0, mag, 1.0 - mag))
            plotted += 1
    return plotted


def clock_positions(radius: float, center_x: float, center_y: float) -> List[Tuple[int, int]]:
    """Canvas coordinates of the twelve hour marks, twelve o'clock first"""
    twelve = point(0.0, 0.0, 1.0)
    positions = []
    for hour in range(12):
        p = rotation_y(hour * math.pi / 6) * twelve
        # The clock face lies in the xz plane
        positions.append((round(p.x * radius + center_x), round(p.z * radius + center_y)))
    return positions


def draw_clock(canvas: Canvas, mark_color: Tuple4 = color(1.0, 0.0, 0.0)) -> List[Tuple[int, int]]:
    radius = 3.0 / 8.0 * min(canvas.width, canvas.height)
    positions = clock_positions(radius, canvas.width / 2, canvas.height / 2)
    for x, y in positions:
        canvas.write_pixel(x, y, mark_color)
    return positions
