import numpy as np

from comicli.charsets import BRAILLE, BRAILLE_DOT_BITS, ramp_for_depth
from comicli.colour import Grayscale, Rgb, SampleColour, lightness, truncated_mean
from comicli.errors import InvalidDimensions
from comicli.grid import OutputCell, OutputGrid

BRAILLE_COLS = 2
BRAILLE_ROWS = 4


def average_tiles(tiles: np.ndarray, colour: bool) -> np.ndarray:
    """Representative value of each tile, truncated to integers.

    In colour mode this is the per-channel mean RGB, shape (rows, cols, 3).
    Otherwise every pixel is first reduced to its lightness byte and the mean
    of those bytes is returned, shape (rows, cols).
    """
    if colour:
        return truncated_mean(tiles, axis=(2, 3))
    return truncated_mean(lightness(tiles), axis=(2, 3))


def tile_colours(tiles: np.ndarray, colour: bool) -> list[list[SampleColour]]:
    averages = average_tiles(tiles, colour).tolist()
    if colour:
        return [[Rgb(*v) for v in row] for row in averages]
    return [[Grayscale(v) for v in row] for row in averages]


def ramp_glyphs(colours: list[list[SampleColour]], depth: int) -> list[str]:
    """One string of glyphs per row; colour averages are re-run through the lightness curve."""
    ramp = ramp_for_depth(depth)
    return ["".join(ramp.glyph_for(c.to_luminance()) for c in row) for row in colours]


def braille_glyphs(tiles: np.ndarray) -> list[str]:
    """Encode each tile as a 2x4 braille cell.

    A dot is raised where its sub-block is at least as bright as the tile
    mean, so bright areas draw ink on a dark terminal. Black tiles stay blank.
    """
    tile_h, tile_w = tiles.shape[2], tiles.shape[3]
    if tile_w < BRAILLE_COLS or tile_h < BRAILLE_ROWS:
        raise InvalidDimensions(
            f"Braille needs tiles of at least {BRAILLE_COLS}x{BRAILLE_ROWS} pixels, got {tile_w}x{tile_h}"
        )
    luma = lightness(tiles).astype(np.float64)
    threshold = luma.mean(axis=(2, 3))

    bits = np.zeros(luma.shape[:2], dtype=np.int64)
    for ry in range(BRAILLE_ROWS):
        y0, y1 = ry * tile_h // BRAILLE_ROWS, (ry + 1) * tile_h // BRAILLE_ROWS
        for cx in range(BRAILLE_COLS):
            x0, x1 = cx * tile_w // BRAILLE_COLS, (cx + 1) * tile_w // BRAILLE_COLS
            block = luma[:, :, y0:y1, x0:x1].mean(axis=(2, 3))
            raised = (block >= threshold) & (block > 0)
            bits |= np.where(raised, BRAILLE_DOT_BITS[ry][cx], 0)

    return ["".join(BRAILLE[b] for b in row) for row in bits.tolist()]


def assemble(glyph_rows: list[str], colours: list[list[SampleColour]]) -> OutputGrid:
    return tuple(
        tuple(OutputCell(g, c) for g, c in zip(glyphs, row)) for glyphs, row in zip(glyph_rows, colours)
    )


def map_tiles(tiles: np.ndarray, colour: bool = False, depth: int = 70, braille: bool = False) -> OutputGrid:
    """Turn a (rows, cols, tile_h, tile_w, 3) tile array into an OutputGrid."""
    colours = tile_colours(tiles, colour)
    if braille:
        glyph_rows = braille_glyphs(tiles)
    else:
        glyph_rows = ramp_glyphs(colours, depth)
    return assemble(glyph_rows, colours)
