from __future__ import annotations

import io
import os

# Settings are cached on first use; keep tests fast and offline.
os.environ.setdefault("ANALYSIS_DELAY_SECONDS", "0")
os.environ.setdefault("ANALYSIS_ENDPOINT", "")

import numpy as np  # noqa: E402
import pytest  # noqa: E402
from PIL import Image  # noqa: E402

from cropcare.services.decoding import DecodedImage, ImageDecoder, Raster, sample_size  # noqa: E402

GREEN = (0, 200, 0, 255)
RED = (200, 50, 50, 255)


def png_bytes(size=(300, 300), color=GREEN, mode="RGBA") -> bytes:
    buf = io.BytesIO()
    Image.new(mode, size, color[: len(mode)]).save(buf, format="PNG")
    return buf.getvalue()


def noise_png_bytes(size=(300, 300), seed=7) -> bytes:
    pixels = np.random.default_rng(seed).integers(0, 256, size=(size[1], size[0], 3), dtype=np.uint8)
    buf = io.BytesIO()
    Image.fromarray(pixels, "RGB").save(buf, format="PNG")
    return buf.getvalue()


class UniformImage(DecodedImage):
    """Decoded image of a single colour; no real pixels are kept."""

    def __init__(self, width, height, rgba):
        self.width = width
        self.height = height
        self.rgba = bytes(rgba)
        self.closed = False

    def raster(self, max_side):
        w, h = sample_size(self.width, self.height, max_side)
        return Raster(width=w, height=h, rgba=self.rgba * (w * h))

    def close(self):
        self.closed = True


class UniformDecoder(ImageDecoder):
    name = "uniform"

    def __init__(self, width, height, rgba=GREEN):
        self.image = UniformImage(width, height, rgba)
        self.calls = 0

    async def decode(self, data):
        self.calls += 1
        return self.image


@pytest.fixture
def green_png():
    return png_bytes()


@pytest.fixture
def red_png():
    return png_bytes(color=RED)
