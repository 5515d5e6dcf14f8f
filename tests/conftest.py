import io

import numpy as np
import pytest
from PIL import Image

from comicli.image import RasterImage


@pytest.fixture
def solid_image():
    """Factory for a single-colour RasterImage."""

    def make(width, height, colour=(0, 0, 0)):
        return RasterImage(np.full((height, width, 3), colour, dtype=np.uint8))

    return make


@pytest.fixture
def png_bytes():
    """Encode a Pillow image as PNG bytes."""

    def encode(image: Image.Image) -> bytes:
        buf = io.BytesIO()
        image.save(buf, format="PNG")
        return buf.getvalue()

    return encode
