# main.py
import argparse
import logging
import sys
from camera.camera import Projection
from config import RENDER_SETTINGS, LOGGING_SETTINGS
from geometry.scene_file import SceneFormatError, load_scene, dump_scene
from renderer.image import Renderer, write_ppm

logger = logging.getLogger("raytrace")

# Each bounce is one Python stack frame.
MAX_DEPTH_LIMIT = 500


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def depth_limit(value: str) -> int:
    number = positive_int(value)
    if number > MAX_DEPTH_LIMIT:
        raise argparse.ArgumentTypeError(f"reflection depth must be at most {MAX_DEPTH_LIMIT}, got {value}")
    return number


def positive_float(value: str) -> float:
    number = float(value)
    if not number > 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Render a scene file to a PPM image by recursive ray tracing')
    parser.add_argument('width', type=positive_int, help='Image width in pixels')
    parser.add_argument('height', type=positive_int, help='Image height in pixels')
    parser.add_argument('-i', '--input', type=str, default=None,
                        help='Scene file (default: read from stdin)')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Output PPM file (default: write to stdout)')
    parser.add_argument('-s', '--samples', type=positive_int, default=RENDER_SETTINGS['samples'],
                        help='Jittered samples per pixel (default: %(default)s)')
    parser.add_argument('--seed', type=int, default=RENDER_SETTINGS['seed'],
                        help='Seed for the anti-aliasing jitter')
    parser.add_argument('--max-dist', type=positive_float, default=RENDER_SETTINGS['max_dist'],
                        help='Distance after which rays stop contributing (default: %(default)s)')
    parser.add_argument('--max-depth', type=depth_limit, default=RENDER_SETTINGS['max_depth'],
                        help='Maximum number of reflections (default: %(default)s)')
    parser.add_argument('--dump', action='store_true',
                        help='Dump the projection and scene objects to stderr')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    return parser


def setup_logging(verbose: bool = False):
    level = logging.DEBUG if verbose else LOGGING_SETTINGS['level']
    logging.basicConfig(level=level, format=LOGGING_SETTINGS['format'], stream=sys.stderr)


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    try:
        if args.input:
            with open(args.input, 'r') as f:
                description = load_scene(f)
        else:
            description = load_scene(sys.stdin)
        projection = Projection(args.width, args.height,
                                description.world_size, description.view_point)
    except (SceneFormatError, OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    if args.dump:
        sys.stderr.write(projection.dump())
        dump_scene(description.scene, sys.stderr)

    renderer = Renderer(projection, samples=args.samples, seed=args.seed,
                        max_dist=args.max_dist, max_depth=args.max_depth)
    image = renderer.render(description.scene)

    if args.output:
        with open(args.output, 'wb') as f:
            write_ppm(image, f)
        logger.info("Wrote %s", args.output)
    else:
        write_ppm(image, sys.stdout.buffer)
        sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
