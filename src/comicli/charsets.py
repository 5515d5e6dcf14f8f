from dataclasses import dataclass


@dataclass(frozen=True)
class GlyphRamp:
    """Glyphs ordered from darkest to brightest.

    ``scale`` is the multiplier applied to ``luminance / 255`` to get an index.
    It may be smaller than ``len(glyphs) - 1``; indices are always clamped.
    """

    glyphs: str
    scale: int

    def __post_init__(self):
        if not self.glyphs:
            raise ValueError("Glyph ramp must not be empty")

    def __len__(self) -> int:
        return len(self.glyphs)

    def index_for(self, luminance: int) -> int:
        index = int((luminance / 255.0) * self.scale)
        return min(max(index, 0), len(self.glyphs) - 1)

    def glyph_for(self, luminance: int) -> str:
        return self.glyphs[self.index_for(luminance)]


# 10 levels of grayscale
RAMP_10 = GlyphRamp(" .:-=+*#%@", scale=9)

# Despite the name this ramp holds 68 glyphs; index 67 is the brightest
RAMP_70 = GlyphRamp(' ."`^",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$', scale=67)

# Depths above this use the 70-glyph ramp
DEPTH_THRESHOLD = 10


def ramp_for_depth(depth: int) -> GlyphRamp:
    return RAMP_70 if depth > DEPTH_THRESHOLD else RAMP_10


# Braille patterns: U+2800 to U+28FF (256 characters, 2x4 dot grid)
BRAILLE_BASE = 0x2800
BRAILLE = "".join(chr(i) for i in range(BRAILLE_BASE, BRAILLE_BASE + 0x100))

# Dot bit for each (row, column) of the 2x4 braille cell:
#  1 4
#  2 5
#  3 6
#  7 8
BRAILLE_DOT_BITS = (
    (0x01, 0x08),
    (0x02, 0x10),
    (0x04, 0x20),
    (0x40, 0x80),
)
