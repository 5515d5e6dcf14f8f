from pathlib import Path

from PIL import Image

from comicli.grid import OutputGrid
from comicli.image import RasterImage
from comicli.mapper import map_tiles
from comicli.terminal import render
from comicli.tiler import OutputDimensions, sample_tiles


def convert(
    image: RasterImage,
    dims: OutputDimensions,
    *,
    colour: bool = False,
    depth: int = 70,
    trim_border: bool = True,
    braille: bool = False,
) -> OutputGrid:
    """Convert an image into a grid of (glyph, colour) cells.

    Pure and deterministic. ``trim_border`` keeps the historical behaviour of
    dropping the outermost ring of requested cells.
    """
    tiles = sample_tiles(image, dims, trim_border=trim_border)
    return map_tiles(tiles, colour=colour, depth=depth, braille=braille)


def image_to_ascii(
    image: RasterImage | Image.Image | str | Path,
    width: int = 80,
    height: int | None = None,
    colour: bool = False,
    background: bool = False,
    depth: int = 70,
    trim_border: bool = True,
    braille: bool = False,
) -> str:
    if not isinstance(image, RasterImage):
        if not isinstance(image, Image.Image):
            image = Image.open(image)
        image = RasterImage.from_pil(image)

    dims = OutputDimensions.for_image(image, width, height)
    grid = convert(image, dims, colour=colour, depth=depth, trim_border=trim_border, braille=braille)
    return render(grid, colour=colour, background=background)
