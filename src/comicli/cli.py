import argparse
import logging
import sys
from dataclasses import dataclass

from comicli.converter import image_to_ascii
from comicli.errors import ComicliError
from comicli.image import decode
from comicli.sources import fetch_image_bytes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    image: str
    color: bool = False
    braille: bool = False
    width: int = 80
    depth: int = 70
    height: int | None = None
    background: bool = False
    trim_border: bool = True
    verbose: bool = False


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _depth(value: str) -> int:
    number = int(value)
    if not 0 <= number <= 255:
        raise argparse.ArgumentTypeError(f"must be between 0 and 255, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    # -h is taken by --height, so help is only available as --help
    parser = argparse.ArgumentParser(prog="comicli", description="Render a comic as ASCII art", add_help=False)
    parser.add_argument("image", help="Image source: xkcd, xkcd:<id>, or a path to an image file")
    parser.add_argument("-c", "--color", action="store_true", default=False, help="Enable truecolor ANSI output")
    parser.add_argument("-b", "--braille", action="store_true", default=False, help="Draw with 2x4 braille dots")
    parser.add_argument("-w", "--width", type=_positive_int, default=80, help="Width in characters (default: 80)")
    parser.add_argument(
        "-d",
        "--depth",
        type=_depth,
        default=70,
        help="Luminance depth; above 10 selects the 70 character ramp (default: 70)",
    )
    parser.add_argument(
        "-h", "--height", type=_positive_int, default=None, help="Height in characters (default: keep aspect ratio)"
    )
    parser.add_argument("--bg", dest="background", action="store_true", default=False, help="Colour the background")
    parser.add_argument(
        "--no-trim",
        dest="trim_border",
        action="store_false",
        default=True,
        help="Keep the outermost row and column of cells",
    )
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    parser.add_argument("--help", action="help", help="Show this help message and exit")
    return parser


def parse_options(argv: list[str] | None = None) -> Options:
    args = build_parser().parse_args(argv)
    return Options(**vars(args))


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )


def run(options: Options) -> str:
    data = fetch_image_bytes(options.image)
    image = decode(data)
    logger.debug("Decoded %dx%d image", image.width, image.height)
    return image_to_ascii(
        image,
        width=options.width,
        height=options.height,
        colour=options.color,
        background=options.background,
        depth=options.depth,
        trim_border=options.trim_border,
        braille=options.braille,
    )


def main(argv: list[str] | None = None) -> None:
    options = parse_options(argv)
    setup_logging(options.verbose)
    try:
        output = run(options)
    except ComicliError as e:
        print(f"comicli: {e}", file=sys.stderr)
        sys.exit(1)
    print(output)
