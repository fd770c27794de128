from __future__ import annotations

from enum import Enum
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ValidatorConfig(BaseModel):
    """Thresholds used by the image plausibility check."""

    model_config = ConfigDict(frozen=True)

    max_image_mb: float = Field(10, gt=0)
    min_dimension_px: int = Field(256, ge=1)
    min_vegetation_score: float = Field(0.08, ge=0, le=1)
    max_sample_side: int = Field(512, ge=1)
    target_sample_count: int = Field(10000, ge=1)
    # Empirical constants of the green-dominance heuristic.
    green_margin: float = Field(1.1, gt=0)
    green_floor: int = Field(60, ge=0, le=255)
    alpha_floor: int = Field(50, ge=0, le=255)


class CandidateImage(BaseModel):
    """Uploaded file as handed to the validator."""

    content: bytes
    media_type: str = ""
    filename: str = ""
    size: int = Field(-1, description="Byte size; defaults to len(content).")

    @model_validator(mode="after")
    def _default_size(self) -> "CandidateImage":
        if self.size < 0:
            self.size = len(self.content)
        return self

    @property
    def size_mb(self) -> float:
        return self.size / (1024 * 1024)


class RejectionCode(str, Enum):
    NOT_AN_IMAGE = "not_an_image"
    TOO_LARGE = "too_large"
    DECODE_FAILED = "decode_failed"
    TOO_SMALL = "too_small"
    LOW_VEGETATION_SCORE = "low_vegetation_score"


class ImageDetails(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    width: int = Field(..., ge=1)
    height: int = Field(..., ge=1)
    size_mb: float = Field(..., ge=0, alias="sizeMB")
    media_type: str = Field(..., alias="mediaType")
    vegetation_score: float = Field(..., ge=0, le=1, alias="vegetationScore")


class Accepted(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    details: ImageDetails


class Rejected(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    code: RejectionCode
    reason: str
    details: Optional[ImageDetails] = None


Verdict = Union[Accepted, Rejected]
