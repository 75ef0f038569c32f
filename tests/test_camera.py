"""Tests for mapping pixels to rays through the viewport wall."""
import pytest

from camera import Viewport
from core.tuples import point, vector
from scene import default_scene


def test_viewport_defaults() -> None:
    vp = Viewport(100, 100)
    assert vp.ray_origin == point(0, 0, -5)
    assert vp.wall_z == 10.0
    assert vp.pixel_size == pytest.approx(0.07)
    assert vp.half_width == pytest.approx(3.5)
    assert vp.half_height == pytest.approx(3.5)


def test_wall_position_corners() -> None:
    vp = Viewport(100, 100)
    assert vp.wall_position(0, 0) == pytest.approx((-3.5, 3.5))
    assert vp.wall_position(50, 50) == pytest.approx((0.0, 0.0))
    assert vp.wall_position(100, 100) == pytest.approx((3.5, -3.5))


def test_ray_through_the_wall_center() -> None:
    vp = Viewport(100, 100)
    r = vp.ray_for_pixel(50, 50)
    assert r.origin == point(0, 0, -5)
    assert r.direction == vector(0, 0, 1)


def test_rays_are_normalized_and_point_at_the_wall() -> None:
    vp = Viewport(20, 20)
    r = vp.ray_for_pixel(0, 0)
    assert r.direction.magnitude() == pytest.approx(1.0)
    assert r.direction.x < 0
    assert r.direction.y > 0


@pytest.mark.parametrize("width, height", [(40, 20), (20, 40)])
def test_non_square_viewport_is_centered(width, height) -> None:
    vp = Viewport(width, height)
    assert vp.pixel_size == pytest.approx(7.0 / 40)
    assert vp.wall_position(width // 2, height // 2) == pytest.approx((0.0, 0.0))
    assert vp.wall_position(width, height) == pytest.approx((vp.half_width, -vp.half_height))


def test_tall_render_keeps_the_sphere_centered() -> None:
    scene = default_scene(Viewport(20, 40))
    rows = [y for y in range(scene.height) if scene.render_row(y)]
    # Sphere silhouette spans about 3.06 wall units either side of the center row
    assert rows[0] > 0
    assert rows[-1] < scene.height - 1
    assert rows[0] + rows[-1] == scene.height
