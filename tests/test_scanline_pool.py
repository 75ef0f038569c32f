"""Tests for the thread pool scanline renderer."""
import numpy as np

from accelerators.scanline_pool import ScanlineRenderer
from camera import Viewport
from core.canvas import Canvas
from core.transformations import scaling
from core.tuples import color
from scene import default_scene


def make_scene(size=16):
    return default_scene(Viewport(size, size), sphere_transform=scaling(1, 0.5, 1))


def test_threaded_render_matches_serial_render() -> None:
    scene = make_scene()
    threaded = ScanlineRenderer(scene, workers=4).render()
    serial = ScanlineRenderer(scene, workers=1).render_serial()
    assert threaded.width == 16 and threaded.height == 16
    assert np.array_equal(threaded.pixels, serial.pixels)
    assert threaded.pixels.any()


def test_render_into_existing_canvas_keeps_background() -> None:
    scene = make_scene(8)
    background = color(0.2, 0.2, 0.2)
    canvas = Canvas(8, 8, fill=background)
    result = ScanlineRenderer(scene, workers=2).render(canvas)
    assert result is canvas
    # Corners miss the sphere
    assert canvas.pixel_at(0, 0) == background
    assert canvas.pixel_at(7, 7) == background


def test_on_rows_receives_every_row() -> None:
    scene = make_scene(10)
    seen = []

    def on_rows(batches):
        seen.extend(batches)

    renderer = ScanlineRenderer(scene, workers=3, poll_interval=0.01)
    renderer.render(on_rows=on_rows)
    assert len(seen) == 10
    assert renderer.rows_done == 10


def test_stop_from_callback_ends_the_render_early() -> None:
    scene = make_scene(64)
    renderer = ScanlineRenderer(scene, workers=1, poll_interval=0.01)

    def on_rows(batches):
        if batches:
            renderer.stop()

    renderer.render(on_rows=on_rows)
    assert renderer.stopped
    assert renderer.rows_done < 64


def test_default_worker_count_is_positive() -> None:
    assert ScanlineRenderer(make_scene(2)).workers >= 1
