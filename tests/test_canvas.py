"""Tests for the pixel buffer and PPM serialization."""
import numpy as np
import pytest

from core.canvas import Canvas
from core.errors import PixelOutOfBoundsError
from core.tuples import color


def test_creating_a_canvas() -> None:
    c = Canvas(10, 20)
    assert c.width == 10
    assert c.height == 20
    assert c.pixels.shape == (20, 10, 3)
    assert not c.pixels.any()


def test_writing_pixels_to_a_canvas() -> None:
    c = Canvas(10, 20)
    red = color(1, 0, 0)
    c.write_pixel(2, 3, red)
    assert c.pixel_at(2, 3) == red
    assert c.pixel_at(3, 2) == color(0, 0, 0)


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (10, 0), (0, 20)])
def test_out_of_bounds_access_raises(x, y) -> None:
    c = Canvas(10, 20)
    with pytest.raises(PixelOutOfBoundsError):
        c.write_pixel(x, y, color(1, 1, 1))
    with pytest.raises(IndexError):
        c.pixel_at(x, y)


def test_to_rgb8_clamps_and_scales() -> None:
    c = Canvas(3, 1)
    c.write_pixel(0, 0, color(1.5, 0, 0))
    c.write_pixel(1, 0, color(0, 0.5, 0))
    c.write_pixel(2, 0, color(-0.5, 0, 1))
    rgb = c.to_rgb8()
    assert rgb.dtype == np.uint8
    assert rgb[0].tolist() == [[255, 0, 0], [0, 128, 0], [0, 0, 255]]


def test_ppm_header() -> None:
    lines = Canvas(5, 3).to_ppm().splitlines()
    assert lines[:3] == ["P3", "5 3", "255"]


def test_ppm_pixel_data() -> None:
    c = Canvas(5, 3)
    c.write_pixel(0, 0, color(1.5, 0, 0))
    c.write_pixel(2, 1, color(0, 0.5, 0))
    c.write_pixel(4, 2, color(-0.5, 0, 1))
    lines = c.to_ppm().splitlines()
    assert lines[3:6] == [
        "255 0 0 0 0 0 0 0 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 128 0 0 0 0 0 0 0",
        "0 0 0 0 0 0 0 0 0 0 0 0 0 0 255",
    ]


def test_ppm_splits_long_lines() -> None:
    c = Canvas(10, 2, fill=color(1, 0.8, 0.6))
    lines = c.to_ppm().splitlines()
    assert lines[3:7] == [
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
        "255 204 153 255 204 153 255 204 153 255 204 153 255 204 153 255 204",
        "153 255 204 153 255 204 153 255 204 153 255 204 153",
    ]
    assert all(len(line) <= 70 for line in lines)


def test_ppm_ends_with_a_newline() -> None:
    assert Canvas(5, 3).to_ppm().endswith("\n")


def test_to_rgb8_rounds_halves_up() -> None:
    c = Canvas(5, 1)
    for x, value in enumerate([0.3, 0.1, 0.7, 0.9, 0.5]):
        c.write_pixel(x, 0, color(value, value, value))
    assert c.to_rgb8()[0, :, 0].tolist() == [77, 26, 179, 230, 128]
