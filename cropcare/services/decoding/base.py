from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ImageDecodeError(Exception):
    """Raised when image bytes cannot be decoded (corrupt or unsupported data)."""


@dataclass(frozen=True)
class Raster:
    """RGBA samples, four bytes per pixel, row-major."""

    width: int
    height: int
    rgba: bytes

    def __post_init__(self) -> None:
        if len(self.rgba) != self.width * self.height * 4:
            raise ValueError(
                "RGBA buffer holds %d bytes, expected %d for %dx%d"
                % (len(self.rgba), self.width * self.height * 4, self.width, self.height)
            )


def sample_size(width: int, height: int, max_side: int) -> tuple[int, int]:
    """Return the downscaled (width, height) whose longer side is at most *max_side*."""

    scale = min(1.0, max_side / max(width, height))
    return max(1, int(width * scale)), max(1, int(height * scale))


class DecodedImage(ABC):
    """A decoded image of known pixel dimensions."""

    width: int
    height: int

    @abstractmethod
    def raster(self, max_side: int) -> Raster:
        """Return RGBA samples downscaled so the longer side is <= *max_side*."""

    def close(self) -> None:  # noqa: B027
        """Release decode buffers."""

    def __enter__(self) -> "DecodedImage":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class ImageDecoder(ABC):
    """Abstract interface for an image decoding backend."""

    name: str = "abstract"

    @abstractmethod
    async def decode(self, data: bytes) -> DecodedImage:
        """Decode *data*.

        Raises
        ------
        ImageDecodeError
            If the bytes are not a readable image.
        """
