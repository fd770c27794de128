"""Image plausibility check run before an upload is analysed.

Checks run in order and stop at the first failure:

    media type -> size -> decode -> dimensions -> vegetation score

Every failure becomes a :class:`~cropcare.models.Rejected` verdict carrying a
reason the UI can show as-is; nothing is raised to the caller for bad input.
"""
from __future__ import annotations

import logging

from cropcare.models import (
    Accepted,
    CandidateImage,
    ImageDetails,
    Rejected,
    RejectionCode,
    ValidatorConfig,
    Verdict,
)
from cropcare.services.decoding import ImageDecodeError, ImageDecoder, get_decoder
from cropcare.services.vegetation import vegetation_score

logger = logging.getLogger(__name__)

_VALID_IMAGE_PREFIX = "image/"

NOT_AN_IMAGE_REASON = "File is not an image."
DECODE_FAILED_REASON = "Could not read the image. Try another file."
LOW_VEGETATION_REASON = "Wrong image: looks unlike a crop/leaf. Please upload a clear leaf/plant photo."


def _fmt_limit(value: float) -> str:
    return f"{value:g}"


class ImageValidator:
    """Accepts or rejects a candidate image according to a :class:`ValidatorConfig`."""

    def __init__(self, config: ValidatorConfig | None = None, decoder: ImageDecoder | None = None) -> None:
        self.config = config or ValidatorConfig()
        self._decoder = decoder or get_decoder()

    async def validate(self, candidate: CandidateImage) -> Verdict:
        cfg = self.config

        if not candidate.media_type.startswith(_VALID_IMAGE_PREFIX):
            return self._reject(RejectionCode.NOT_AN_IMAGE, NOT_AN_IMAGE_REASON)

        size_mb = candidate.size_mb
        if size_mb > cfg.max_image_mb:
            return self._reject(
                RejectionCode.TOO_LARGE,
                f"Image is too large ({size_mb:.1f} MB). Max {_fmt_limit(cfg.max_image_mb)} MB.",
            )

        try:
            decoded = await self._decoder.decode(candidate.content)
        except ImageDecodeError:
            return self._reject(RejectionCode.DECODE_FAILED, DECODE_FAILED_REASON)

        with decoded:
            width, height = decoded.width, decoded.height
            if width < cfg.min_dimension_px or height < cfg.min_dimension_px:
                minimum = cfg.min_dimension_px
                return self._reject(
                    RejectionCode.TOO_SMALL,
                    f"Image is too small ({width}x{height}). Minimum {minimum}x{minimum}.",
                )
            try:
                raster = decoded.raster(cfg.max_sample_side)
            except ImageDecodeError:
                return self._reject(RejectionCode.DECODE_FAILED, DECODE_FAILED_REASON)
            score = vegetation_score(
                raster,
                target_samples=cfg.target_sample_count,
                alpha_floor=cfg.alpha_floor,
                green_margin=cfg.green_margin,
                green_floor=cfg.green_floor,
            )

        details = ImageDetails(
            width=width,
            height=height,
            size_mb=size_mb,
            media_type=candidate.media_type,
            vegetation_score=score,
        )
        logger.debug("Vegetation score %.3f for %dx%d %s", score, width, height, candidate.media_type)
        if score < cfg.min_vegetation_score:
            return self._reject(RejectionCode.LOW_VEGETATION_SCORE, LOW_VEGETATION_REASON, details)
        return Accepted(details=details)

    @staticmethod
    def _reject(code: RejectionCode, reason: str, details: ImageDetails | None = None) -> Rejected:
        logger.info("Image rejected (%s): %s", code.value, reason)
        return Rejected(code=code, reason=reason, details=details)
