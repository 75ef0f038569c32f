"""
Pinhole viewport: an eye point looking through a virtual wall
"""
from typing import Tuple

from config import RENDER_SETTINGS, SCENE_SETTINGS
from core.rays import Ray
from core.tuples import Tuple4, point


class Viewport:
    """Maps canvas pixels onto a square wall placed in front of the eye"""

    def __init__(self,
                 width: int = RENDER_SETTINGS['width'],
                 height: int = RENDER_SETTINGS['height'],
                 ray_origin: Tuple4 = None,
                 wall_z: float = SCENE_SETTINGS['wall_z'],
                 wall_size: float = SCENE_SETTINGS['wall_size']):
        self.width = width
        self.height = height
        self.ray_origin = ray_origin if ray_origin else point(*SCENE_SETTINGS['ray_origin'])
        self.wall_z = wall_z
        self.wall_size = wall_size

        # Square pixels; the wall spans the longer canvas side
        self.pixel_size = wall_size / max(width, height)
        self.half_width = self.pixel_size * width / 2
        self.half_height = self.pixel_size * height / 2

    def wall_position(self, x: int, y: int) -> Tuple[float, float]:
        """World (x, y) on the wall for a pixel; wall y points up, canvas y down"""
        world_x = -self.half_width + self.pixel_size * x
        world_y = self.half_height - self.pixel_size * y
        return world_x, world_y

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        world_x, world_y = self.wall_position(x, y)
        target = point(world_x, world_y, self.wall_z)
        return Ray(self.ray_origin, (target - self.ray_origin).normalize())
