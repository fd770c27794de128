from __future__ import annotations

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from cropcare.models.validation import ValidatorConfig

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # General
    app_title: str = Field("CropCare AI", description="Title shown by the API and the web page.")
    log_level: str = Field("INFO", description="Root logging level.")

    # Image validation
    max_image_mb: float = Field(10, gt=0, description="Largest accepted upload, in megabytes.")
    min_dimension_px: int = Field(256, ge=1, description="Minimum width and height of an upload (pixels).")
    min_vegetation_score: float = Field(0.08, ge=0, le=1, description="Minimum green-dominant pixel ratio.")
    max_sample_side: int = Field(512, ge=1, description="Longer side of the raster scanned for vegetation.")
    target_sample_count: int = Field(10000, ge=1, description="Approximate number of pixels inspected.")
    green_margin: float = Field(1.1, gt=0, description="Relative margin green must exceed red and blue by.")
    green_floor: int = Field(60, ge=0, le=255, description="Absolute floor for the green channel.")
    alpha_floor: int = Field(50, ge=0, le=255, description="Samples below this alpha are ignored.")
    image_decoder: str = Field("pillow", description="Name of the registered image decoder.")

    # Analysis flow
    analysis_delay_seconds: float = Field(1.2, ge=0, description="Simulated processing time before a diagnosis.")

    # Result submission
    analysis_endpoint: Optional[str] = Field(
        "http://localhost:5000/api/analysis",
        description="URL results are POSTed to as form data. Empty disables submission.",
    )
    analysis_timeout: float = Field(10.0, gt=0, description="Timeout for the submission request (seconds).")

    def validator_config(self) -> ValidatorConfig:
        return ValidatorConfig(
            max_image_mb=self.max_image_mb,
            min_dimension_px=self.min_dimension_px,
            min_vegetation_score=self.min_vegetation_score,
            max_sample_side=self.max_sample_side,
            target_sample_count=self.target_sample_count,
            green_margin=self.green_margin,
            green_floor=self.green_floor,
            alpha_floor=self.alpha_floor,
        )


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
