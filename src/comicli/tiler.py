from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from comicli.errors import InvalidDimensions
from comicli.image import RasterImage

# Smallest grid side that still leaves one interior cell once the border is trimmed
MIN_TRIMMED_SIDE = 3


@dataclass(frozen=True)
class OutputDimensions:
    """Size of the requested character grid, in cells."""

    width: int
    height: int

    def __post_init__(self):
        if self.width < 1 or self.height < 1:
            raise InvalidDimensions(f"Output dimensions must be positive, got {self.width}x{self.height}")

    @classmethod
    def for_image(cls, image: RasterImage, width: int, height: int | None = None) -> OutputDimensions:
        """Use ``height`` if given, otherwise derive it from the image aspect ratio."""
        if height is None:
            height = round(width * image.height / image.width)
        return cls(width, height)


def tile_size(image: RasterImage, dims: OutputDimensions) -> tuple[int, int]:
    """Pixel (width, height) of one tile. Remainder pixels at the edges are dropped."""
    tile_w = image.width // dims.width
    tile_h = image.height // dims.height
    if tile_w == 0 or tile_h == 0:
        raise InvalidDimensions(
            f"A {dims.width}x{dims.height} grid does not fit a {image.width}x{image.height} image: "
            "tiles would be empty"
        )
    return tile_w, tile_h


def sample_tiles(image: RasterImage, dims: OutputDimensions, trim_border: bool = True) -> np.ndarray:
    """Split the image into tiles.

    Returns a uint8 array of shape (rows, cols, tile_h, tile_w, 3), rows top to
    bottom and columns left to right.

    With ``trim_border`` the outermost ring of requested cells is dropped, so a
    WxH request yields (H-2) rows of (W-2) tiles. Both sides must then be at
    least 3.
    """
    if trim_border and (dims.width < MIN_TRIMMED_SIDE or dims.height < MIN_TRIMMED_SIDE):
        raise InvalidDimensions(
            f"Output must be at least {MIN_TRIMMED_SIDE}x{MIN_TRIMMED_SIDE} when trimming the border, "
            f"got {dims.width}x{dims.height}"
        )
    tile_w, tile_h = tile_size(image, dims)

    trimmed = image.pixels[: dims.height * tile_h, : dims.width * tile_w]
    # (rows, cols, tile_h, tile_w, 3)
    tiles = trimmed.reshape(dims.height, tile_h, dims.width, tile_w, 3).transpose(0, 2, 1, 3, 4)

    if trim_border:
        tiles = tiles[1:-1, 1:-1]
    return tiles
