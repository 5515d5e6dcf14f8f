from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import numpy as np

from comicli.errors import InvalidDimensions

GAMMA = 2.2

# Rec. 709 luminance weights for R, G, B
LUMA_WEIGHTS = (0.2126, 0.7152, 0.0722)


def _saturating_u8(values: np.ndarray) -> np.ndarray:
    """Truncate toward zero, then pin to 0..255 like a saturating float-to-u8 cast."""
    return np.clip(np.trunc(values), 0, 255).astype(np.uint8)


def lightness(rgb) -> np.ndarray:
    """Perceptual lightness byte for each RGB triple in ``rgb`` (shape ``(..., 3)``).

    Channels are raised to GAMMA without normalising to 0-1 first, so Y grows
    into the hundreds of thousands and L* passes 255 for almost any non-black
    pixel. Callers rely on exactly this curve for glyph selection.
    """
    rgb = np.asarray(rgb, dtype=np.float64)
    if rgb.shape[-1:] != (3,):
        raise ValueError(f"Expected RGB triples, got shape {rgb.shape}")
    linear = rgb**GAMMA
    y = LUMA_WEIGHTS[0] * linear[..., 0] + LUMA_WEIGHTS[1] * linear[..., 1] + LUMA_WEIGHTS[2] * linear[..., 2]
    l_star = 116.0 * y ** (1.0 / 3.0) - 16.0
    if not np.all(np.isfinite(l_star)):
        raise ValueError("Lightness is not finite for the given colours")
    return _saturating_u8(l_star)


def truncated_mean(samples, axis) -> np.ndarray:
    """Integer mean of ``samples`` over ``axis``, truncated toward zero. Empty input is InvalidDimensions."""
    samples = np.asarray(samples)
    axes = axis if isinstance(axis, tuple) else (axis,)
    count = int(np.prod([samples.shape[a] for a in axes]))
    if count == 0:
        raise InvalidDimensions("Cannot average an empty set of samples")
    return samples.sum(axis=axis, dtype=np.int64) // count


def _check_channel(name: str, value: int) -> int:
    value = int(value)
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")
    return value


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, _check_channel(name, getattr(self, name)))

    def to_luminance(self) -> int:
        return int(lightness((self.r, self.g, self.b)))

    def to_rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @classmethod
    def average_of(cls, colours: Iterable[Rgb]) -> Rgb:
        """Channel-wise mean, truncated to integers."""
        rgb = np.array([c.to_rgb() for c in colours], dtype=np.int64).reshape(-1, 3)
        return cls(*truncated_mean(rgb, axis=0).tolist())


@dataclass(frozen=True)
class Grayscale:
    value: int

    def __post_init__(self):
        object.__setattr__(self, "value", _check_channel("value", self.value))

    def to_luminance(self) -> int:
        return self.value

    def to_rgb(self) -> tuple[int, int, int]:
        return (self.value, self.value, self.value)

    @classmethod
    def average_of(cls, colours: Iterable[Grayscale]) -> Grayscale:
        values = np.array([c.value for c in colours], dtype=np.int64)
        return cls(int(truncated_mean(values, axis=0)))


SampleColour = Rgb | Grayscale
