from .base import DecodedImage, ImageDecodeError, ImageDecoder, Raster, sample_size
from .registry import get_decoder, register_decoder

__all__ = [
    "DecodedImage",
    "ImageDecodeError",
    "ImageDecoder",
    "Raster",
    "get_decoder",
    "register_decoder",
    "sample_size",
]
