from comicli.grid import OutputGrid

RESET = "\033[0m"


def fg_escape(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def bg_escape(r: int, g: int, b: int) -> str:
    return f"\033[48;2;{r};{g};{b}m"


def _colour_prefix(rgb: tuple[int, int, int], with_background: bool) -> str:
    r, g, b = rgb
    if with_background:
        return fg_escape(255 - r, 255 - g, 255 - b) + bg_escape(r, g, b)
    return fg_escape(r, g, b)


def render(grid: OutputGrid, colour: bool = False, background: bool = False) -> str:
    """Render a grid as text, one line per row.

    With ``colour`` every glyph is preceded by an ANSI truecolor escape. With
    ``background`` as well, the cell colour fills the background and the glyph
    is drawn in its inverse.
    """
    out = []
    for row in grid:
        if not colour:
            out.append("".join(cell.glyph for cell in row))
            continue
        parts = [_colour_prefix(cell.colour.to_rgb(), background) + cell.glyph for cell in row]
        parts.append(RESET)
        out.append("".join(parts))
    return "\n".join(out)
