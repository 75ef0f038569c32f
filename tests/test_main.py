"""Tests for the command line driver."""
import os

from image_io import read_png
from main import build_parser, canvas_size, main, make_scene
from scene import SilhouetteScene


def test_canvas_size_defaults_per_command() -> None:
    parser = build_parser()
    assert canvas_size(parser.parse_args(['projectile'])) == (900, 550)
    assert canvas_size(parser.parse_args(['clock'])) == (550, 550)
    assert canvas_size(parser.parse_args(['sphere'])) == (200, 200)
    assert canvas_size(parser.parse_args(['sphere', '--width', '40', '--height', '30'])) == (40, 30)


def test_make_scene_applies_transform() -> None:
    args = build_parser().parse_args(['silhouette', '--width', '8', '--transform', 'squash'])
    scene = make_scene(args)
    assert isinstance(scene, SilhouetteScene)
    assert scene.spheres[0].transform.at(1, 1) == 0.5


def test_sphere_render_to_png(tmp_path) -> None:
    out = str(tmp_path / "sphere.png")
    assert main(['sphere', '--width', '12', '--height', '12', '--workers', '2', '--output', out]) == 0
    image = read_png(out)
    assert image.shape == (12, 12, 3)
    assert image.any()


def test_silhouette_serial_to_ppm(tmp_path) -> None:
    out = str(tmp_path / "silhouette.ppm")
    assert main(['silhouette', '--width', '10', '--height', '10', '--transform', 'shear',
                 '--serial', '--output', out]) == 0
    with open(out, encoding='ascii') as f:
        assert f.read().startswith("P3\n10 10\n255\n")


def test_clock_and_projectile(tmp_path) -> None:
    clock = str(tmp_path / "clock.ppm")
    projectile = str(tmp_path / "projectile.png")
    assert main(['clock', '--width', '40', '--height', '40', '--output', clock]) == 0
    assert main(['projectile', '--output', projectile]) == 0
    assert os.path.exists(clock)
    assert read_png(projectile).shape == (550, 900, 3)


def test_errors_exit_with_status_1(tmp_path) -> None:
    assert main(['clock', '--width', '40', '--output', str(tmp_path / "clock.bmp")]) == 1


def test_unwritable_output_exits_with_status_1(tmp_path) -> None:
    assert main(['clock', '--width', '40', '--height', '40',
                 '--output', str(tmp_path / "missing" / "clock.ppm")]) == 1


def test_clock_on_a_wide_canvas(tmp_path) -> None:
    out = str(tmp_path / "clock.ppm")
    assert main(['clock', '--width', '550', '--height', '300', '--output', out]) == 0
