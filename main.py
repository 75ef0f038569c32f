#!/usr/bin/env python3
"""
Ray tracer command line driver
"""
import argparse
import logging
import math
import sys
from typing import List, Optional, Tuple

from accelerators.scanline_pool import ScanlineRenderer
from camera import Viewport
from config import RENDER_SETTINGS, SCENE_SETTINGS
from core.canvas import Canvas
from core.errors import RayTracerError
from core.spheres import Sphere
from core.transformations import chain, rotation_z, scaling, shearing
from core.tuples import color
from demos import draw_clock, launch, plot_projectile
from image_io import save_canvas, timestamped_path
from scene import Scene, SilhouetteScene, default_scene

logger = logging.getLogger(__name__)

# Demos plot in canvas pixels, so they need room
CANVAS_SIZES = {
    'projectile': (900, 550),
    'clock': (550, 550),
}

TRANSFORMS = {
    'none': None,
    'squash': scaling(1.0, 0.5, 1.0),
    'stretch': scaling(0.5, 1.0, 1.0),
    'shear': chain(scaling(0.5, 1.0, 1.0), shearing(1.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
    'tilt': chain(rotation_z(math.pi / 4), scaling(0.5, 1.0, 1.0)),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sphere ray tracer")
    parser.add_argument('command', choices=['sphere', 'silhouette', 'projectile', 'clock', 'live'],
                        help="what to render")
    parser.add_argument('--width', type=int, default=None)
    parser.add_argument('--height', type=int, default=None)
    parser.add_argument('--workers', type=int, default=RENDER_SETTINGS['workers'],
                        help="render threads (default: one per CPU)")
    parser.add_argument('--transform', choices=sorted(TRANSFORMS), default='none',
                        help="transform applied to the sphere")
    parser.add_argument('--output', default=None,
                        help="output file; .ppm or .png (default: timestamped file in the temp dir)")
    parser.add_argument('--format', choices=['ppm', 'png'], default=RENDER_SETTINGS['output_format'],
                        help="format used when --output is omitted")
    parser.add_argument('--serial', action='store_true', help="render in a single thread")
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser


def canvas_size(args) -> Tuple[int, int]:
    default_width, default_height = CANVAS_SIZES.get(
        args.command, (RENDER_SETTINGS['width'], RENDER_SETTINGS['height']))
    return args.width or default_width, args.height or default_height


def make_scene(args) -> Scene:
    width, height = canvas_size(args)
    viewport = Viewport(width, height)
    if args.command == 'silhouette':
        scene = SilhouetteScene(spheres=[Sphere(name="silhouette")], viewport=viewport)
    else:
        scene = default_scene(viewport)
    transform = TRANSFORMS[args.transform]
    if transform is not None:
        scene.spheres[0].transform = transform
    return scene


def render_scene(args) -> Canvas:
    scene = make_scene(args)
    renderer = ScanlineRenderer(scene, workers=args.workers)
    if args.command == 'live':
        from gui.preview import LivePreview

        preview = LivePreview(scene.width, scene.height)
        preview.show()

        def on_rows(batches):
            if not preview.is_open:
                renderer.stop()
                return
            preview.apply_rows(batches)

        canvas = renderer.render(on_rows=on_rows)
        if preview.is_open:
            preview.finish()
            preview.wait()
        return canvas
    if args.serial:
        return renderer.render_serial()
    return renderer.render()


def run(args) -> str:
    if args.command == 'projectile':
        canvas = Canvas(*canvas_size(args))
        proj, env = launch()
        plotted = plot_projectile(canvas, proj, env)
        logger.info(f"Plotted {plotted} projectile positions")
    elif args.command == 'clock':
        canvas = Canvas(*canvas_size(args))
        draw_clock(canvas, color(*SCENE_SETTINGS['silhouette_color']))
    else:
        canvas = render_scene(args)

    path = args.output or timestamped_path(args.command, args.format, RENDER_SETTINGS['output_dir'])
    return save_canvas(canvas, path)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info(f"Starting {args.command}...")
    try:
        path = run(args)
    except RayTracerError as e:
        logger.error(f"Render failed: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Ray tracer stopped by user")
        return 130

    logger.info(f"Finished - image saved to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
