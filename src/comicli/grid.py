from typing import NamedTuple

from comicli.colour import SampleColour


class OutputCell(NamedTuple):
    glyph: str
    colour: SampleColour


# Rows top to bottom, cells left to right
OutputGrid = tuple[tuple[OutputCell, ...], ...]


def grid_shape(grid: OutputGrid) -> tuple[int, int]:
    """Return (rows, cols) of a grid."""
    return len(grid), len(grid[0]) if grid else 0
