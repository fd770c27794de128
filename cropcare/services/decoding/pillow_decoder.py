"""Pillow-backed image decoder.

Decoding runs in a worker thread so the event loop is never blocked by a
large upload.
"""
from __future__ import annotations

import asyncio
import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from .base import DecodedImage, ImageDecodeError, ImageDecoder, Raster, sample_size

logger = logging.getLogger(__name__)


class PillowImage(DecodedImage):
    def __init__(self, img: Image.Image) -> None:
        self._img = img
        self.width, self.height = img.size

    def raster(self, max_side: int) -> Raster:
        size = sample_size(self.width, self.height, max_side)
        try:
            rgba = self._img.convert("RGBA")
        except (OSError, ValueError) as exc:
            raise ImageDecodeError(str(exc)) from exc
        try:
            if rgba.size != size:
                resized = rgba.resize(size, Image.Resampling.BILINEAR)
                rgba.close()
                rgba = resized
            return Raster(width=size[0], height=size[1], rgba=rgba.tobytes())
        finally:
            rgba.close()

    def close(self) -> None:
        self._img.close()


class PillowDecoder(ImageDecoder):
    name = "pillow"

    async def decode(self, data: bytes) -> DecodedImage:
        return await asyncio.to_thread(self._decode, data)

    @staticmethod
    def _decode(data: bytes) -> PillowImage:
        try:
            img = Image.open(io.BytesIO(data))
            img.load()  # force a full decode so truncated data fails here
            transposed = ImageOps.exif_transpose(img)
        except (UnidentifiedImageError, OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            logger.debug("Image decode failed: %s", exc)
            raise ImageDecodeError(str(exc)) from exc
        if transposed is not img:
            img.close()
        return PillowImage(transposed)
