from __future__ import annotations

import io
from dataclasses import dataclass

import numpy as np
from PIL import Image, UnidentifiedImageError

from comicli.errors import DecodeError


@dataclass(frozen=True)
class RasterImage:
    """Decoded RGB bitmap. ``pixels`` is a read-only (height, width, 3) uint8 array."""

    pixels: np.ndarray

    def __post_init__(self):
        pixels = np.asarray(self.pixels, dtype=np.uint8)
        if pixels.ndim != 3 or pixels.shape[2] != 3:
            raise ValueError(f"Expected a (height, width, 3) array, got shape {pixels.shape}")
        pixels = pixels.copy()
        pixels.flags.writeable = False
        object.__setattr__(self, "pixels", pixels)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    @classmethod
    def from_pil(cls, image: Image.Image) -> RasterImage:
        return cls(np.asarray(image.convert("RGB"), dtype=np.uint8))


def decode(data: bytes) -> RasterImage:
    """Decode encoded image bytes (PNG, JPEG, GIF, ...) into a RasterImage."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            return RasterImage.from_pil(image)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
        raise DecodeError(f"Cannot decode image: {e}") from e
