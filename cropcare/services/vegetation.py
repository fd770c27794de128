"""Green-dominance heuristic used to tell plant photos from everything else.

A sample counts as vegetation when its green channel beats both red and blue
by a relative margin and clears an absolute floor, which keeps near-black
noise out of the count. The result is the fraction of opaque samples that
are green-dominant.
"""
from __future__ import annotations

import numpy as np

from cropcare.services.decoding import Raster


def sample_stride(pixel_count: int, target_samples: int) -> int:
    return max(1, pixel_count // target_samples)


def vegetation_score(
    raster: Raster,
    *,
    target_samples: int = 10000,
    alpha_floor: int = 50,
    green_margin: float = 1.1,
    green_floor: int = 60,
) -> float:
    """Return the green-dominant share of roughly *target_samples* opaque pixels, in [0, 1]."""

    pixels = np.frombuffer(raster.rgba, dtype=np.uint8).reshape(-1, 4)
    sampled = pixels[:: sample_stride(len(pixels), target_samples)]
    opaque = sampled[sampled[:, 3] >= alpha_floor].astype(np.float64)
    if not len(opaque):
        return 0.0

    red, green, blue = opaque[:, 0], opaque[:, 1], opaque[:, 2]
    greenish = (green > red * green_margin) & (green > blue * green_margin) & (green > green_floor)
    return float(np.count_nonzero(greenish)) / len(opaque)
