from __future__ import annotations

from functools import lru_cache

from .base import ImageDecoder
from .pillow_decoder import PillowDecoder

_DECODERS: dict[str, type[ImageDecoder]] = {
    "pillow": PillowDecoder,
}


def register_decoder(name: str, decoder_cls: type[ImageDecoder]) -> None:
    _DECODERS[name.lower()] = decoder_cls
    _get_decoder.cache_clear()


def get_decoder(name: str = "pillow") -> ImageDecoder:
    """Return the shared decoder registered under *name* (case insensitive)."""

    return _get_decoder(name.lower())


@lru_cache()
def _get_decoder(key: str) -> ImageDecoder:
    if key not in _DECODERS:
        raise ValueError(f"Unsupported image decoder: {key}")
    return _DECODERS[key]()
