#
# PROJECT: wireframe-ppm
# MODULE: wireframe_ppm/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from .config import RenderConfig
from .canvas import Canvas
from .color import Color
from .logging_config import setup_logging
from .mesh import Mesh
from .ppm import write_ppm
from .renderer import Renderer
from .scene import Scene

logger = logging.getLogger(__name__)


def build_demo_scene() -> Scene:
    """Base cube, the cube shifted by (+3, 0, +1), and the cube scaled 1.5x."""
    cube = Mesh.cube()
    scene = Scene()
    scene.add(cube)
    scene.add(cube.translated(3.0, 0.0, 1.0))
    scene.add(cube.scaled(1.5))
    return scene


def render_demo(config: RenderConfig = None) -> Canvas:
    """Render the demo scene into a fresh canvas and return it."""
    config = config if config is not None else RenderConfig()
    canvas = config.make_canvas()
    scene = build_demo_scene()
    Renderer(config.make_camera()).render(canvas, scene)
    logger.debug("Rendered %d objects into %dx%d canvas",
                 len(scene), canvas.w, canvas.h)
    return canvas


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render the wireframe cube demo to a plain-text PPM image")
    parser.add_argument("-o", "--output", default=RenderConfig.output,
                        help=f"Output PPM path (default: {RenderConfig.output})")
    parser.add_argument("--bg-color", type=Color.from_hex, default=RenderConfig.background,
                        help=f"Background color in hex #RRGGBB (default: {RenderConfig.background.to_hex()})")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log pipeline progress to stderr")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Render the demo, write the PPM, print its filename. Returns exit code."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    config = RenderConfig(output=args.output, background=args.bg_color)
    canvas = render_demo(config)
    try:
        write_ppm(canvas, config.output)
    except OSError as e:
        logger.error("Could not write '%s': %s", config.output, e)
        return 1

    print(config.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
