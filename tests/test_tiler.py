import numpy as np
import pytest

from comicli.errors import InvalidDimensions
from comicli.image import RasterImage
from comicli.tiler import OutputDimensions, sample_tiles, tile_size


def test_trimmed_tile_grid_shape(solid_image):
    image = solid_image(100, 60)
    tiles = sample_tiles(image, OutputDimensions(10, 6))
    assert tiles.shape == (4, 8, 10, 10, 3)


def test_untrimmed_tile_grid_shape(solid_image):
    image = solid_image(100, 60)
    tiles = sample_tiles(image, OutputDimensions(10, 6), trim_border=False)
    assert tiles.shape == (6, 10, 10, 10, 3)


def test_tiles_are_row_major():
    pixels = np.zeros((4, 6, 3), dtype=np.uint8)
    # Mark each 2x2 tile with its index in the red channel
    for ty in range(2):
        for tx in range(3):
            pixels[ty * 2 : ty * 2 + 2, tx * 2 : tx * 2 + 2, 0] = ty * 3 + tx
    tiles = sample_tiles(RasterImage(pixels), OutputDimensions(3, 2), trim_border=False)
    assert tiles[:, :, 0, 0, 0].tolist() == [[0, 1, 2], [3, 4, 5]]
    assert np.all(tiles[1, 2, :, :, 0] == 5)


def test_remainder_pixels_dropped():
    assert tile_size(RasterImage(np.zeros((11, 35, 3))), OutputDimensions(3, 2)) == (11, 5)


def test_tile_wider_than_image_raises(solid_image):
    with pytest.raises(InvalidDimensions, match="empty"):
        tile_size(solid_image(5, 50), OutputDimensions(10, 10))


def test_tile_taller_than_image_raises(solid_image):
    with pytest.raises(InvalidDimensions):
        sample_tiles(solid_image(50, 5), OutputDimensions(10, 10))


def test_trimming_needs_three_cells(solid_image):
    image = solid_image(100, 100)
    with pytest.raises(InvalidDimensions, match="at least 3x3"):
        sample_tiles(image, OutputDimensions(2, 10))
    with pytest.raises(InvalidDimensions, match="at least 3x3"):
        sample_tiles(image, OutputDimensions(10, 2))
    assert sample_tiles(image, OutputDimensions(2, 2), trim_border=False).shape[:2] == (2, 2)


def test_dimensions_must_be_positive():
    with pytest.raises(InvalidDimensions):
        OutputDimensions(0, 5)


def test_height_derived_from_aspect_ratio(solid_image):
    dims = OutputDimensions.for_image(solid_image(200, 100), 10)
    assert dims == OutputDimensions(10, 5)


def test_derived_height_rounds(solid_image):
    # 7 * 52 / 100 = 3.64
    assert OutputDimensions.for_image(solid_image(100, 52), 7).height == 4


def test_explicit_height_kept(solid_image):
    dims = OutputDimensions.for_image(solid_image(200, 100), 10, height=20)
    assert dims == OutputDimensions(10, 20)
