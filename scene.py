"""
Scene description and per-row shading
"""
from dataclasses import dataclass, field
from typing import List, Optional

from camera import Viewport
from config import SCENE_SETTINGS
from core.intersections import Intersection, hit, intersections
from core.lights import PointLight
from core.materials import Material
from core.rays import Ray
from core.spheres import Sphere
from core.tuples import Tuple4, color, point


@dataclass(frozen=True)
class Pixel:
    x: int
    y: int
    color: Tuple4


@dataclass
class Scene:
    """Spheres lit by one point light, seen through a viewport"""
    spheres: List[Sphere] = field(default_factory=list)
    light: PointLight = None
    viewport: Viewport = field(default_factory=Viewport)

    def __post_init__(self):
        if self.light is None:
            self.light = PointLight(point(*SCENE_SETTINGS['light_position']),
                                    color(*SCENE_SETTINGS['light_intensity']))

    @property
    def width(self) -> int:
        return self.viewport.width

    @property
    def height(self) -> int:
        return self.viewport.height

    def add_sphere(self, sphere: Sphere) -> int:
        """Add a sphere and return its index in the scene"""
        self.spheres.append(sphere)
        return len(self.spheres) - 1

    def intersect(self, ray: Ray) -> List[Intersection]:
        xs = []
        for sphere in self.spheres:
            xs.extend(sphere.intersect(ray))
        return intersections(*xs)

    def shade_hit(self, ray: Ray, h: Intersection) -> Tuple4:
        world_point = ray.position(h.t)
        normal = h.object.normal_at(world_point)
        eye = -ray.direction
        return h.object.material.lighting(self.light, world_point, eye, normal)

    def color_at(self, ray: Ray) -> Optional[Tuple4]:
        """Shaded color of the visible surface, None when the ray misses"""
        h = hit(self.intersect(ray))
        if h is None:
            return None
        return self.shade_hit(ray, h)

    def render_row(self, y: int) -> List[Pixel]:
        pixels = []
        for x in range(self.viewport.width):
            c = self.color_at(self.viewport.ray_for_pixel(x, y))
            if c is not None:
                pixels.append(Pixel(x, y, c))
        return pixels


@dataclass
class SilhouetteScene(Scene):
    """Paints every hit with one flat color: the shadow a sphere casts on the wall"""
    flat_color: Tuple4 = field(default_factory=lambda: color(*SCENE_SETTINGS['silhouette_color']))

    def shade_hit(self, ray: Ray, h: Intersection) -> Tuple4:
        return self.flat_color


def default_scene(viewport: Viewport = None, sphere_transform=None,
                  sphere_color: Tuple4 = None) -> Scene:
    """One purple-ish sphere lit from the upper left, as in the demo renders"""
    viewport = viewport if viewport else Viewport()
    material = Material(color=sphere_color if sphere_color else color(*SCENE_SETTINGS['sphere_color']))
    sphere = Sphere(material=material)
    if sphere_transform is not None:
        sphere.transform = sphere_transform
    return Scene(spheres=[sphere], viewport=viewport)
