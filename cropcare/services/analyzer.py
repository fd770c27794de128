"""Image and symptom analysis flow.

Mirrors what the results view needs: validate the upload (image mode only),
simulate processing, pick a diagnosis for the crop and hand it to the
results backend. Backend failures never hide the diagnosis; they are
reported through ``AnalysisOutcome.error`` instead.
"""
from __future__ import annotations

import asyncio
import logging
import random

import httpx

from cropcare.config import get_settings
from cropcare.models import AnalysisOutcome, AnalysisRecord, CandidateImage, Rejected
from cropcare.services.analysis_client import AnalysisClient, AnalysisSubmitError, analysis_client
from cropcare.services.decoding import get_decoder
from cropcare.services.diseases import get_random_disease
from cropcare.services.validator import ImageValidator

logger = logging.getLogger(__name__)
settings = get_settings()

SAVED_MESSAGE = "Analysis saved successfully!"
SAVE_FAILED_MESSAGE = "Failed to save analysis to backend. Please try again."


class MissingInputError(ValueError):
    """Raised when a symptom analysis has neither symptoms nor a crop type."""


class Analyzer:
    """Runs one analysis request end to end."""

    def __init__(
        self,
        validator: ImageValidator,
        client: AnalysisClient,
        *,
        delay_seconds: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self.validator = validator
        self.client = client
        self.delay_seconds = delay_seconds
        self._rng = rng

    async def analyze_image(
        self,
        candidate: CandidateImage,
        crop_type: str = "",
        symptoms: str = "",
    ) -> AnalysisOutcome:
        verdict = await self.validator.validate(candidate)
        if isinstance(verdict, Rejected):
            return AnalysisOutcome(mode="image", crop_type=crop_type, verdict=verdict, error=verdict.reason)

        outcome = await self._diagnose("image", crop_type, symptoms, image=candidate)
        outcome.verdict = verdict
        return outcome

    async def analyze_text(self, symptoms: str, crop_type: str = "") -> AnalysisOutcome:
        if not symptoms and not crop_type:
            raise MissingInputError("Describe the symptoms or choose a crop type.")
        return await self._diagnose("text", crop_type, symptoms)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _diagnose(
        self,
        mode: str,
        crop_type: str,
        symptoms: str,
        *,
        image: CandidateImage | None = None,
    ) -> AnalysisOutcome:
        if self.delay_seconds:
            await asyncio.sleep(self.delay_seconds)

        disease = get_random_disease(crop_type, self._rng)
        logger.info("%s analysis for crop %r -> %s", mode, crop_type, disease.name)
        outcome = AnalysisOutcome(mode=mode, crop_type=crop_type, disease=disease)

        if not self.client.enabled:
            return outcome

        record = AnalysisRecord(crop_name=crop_type, symptoms=symptoms, disease=disease)
        try:
            await self.client.submit(record, image)
        except AnalysisSubmitError as exc:
            outcome.error = str(exc)
        except httpx.HTTPError as exc:
            logger.error("Error saving to backend: %s", exc)
            outcome.error = SAVE_FAILED_MESSAGE
        else:
            outcome.saved = True
            outcome.info = SAVED_MESSAGE
        return outcome


# Singleton instance
analyzer = Analyzer(
    ImageValidator(settings.validator_config(), get_decoder(settings.image_decoder)),
    analysis_client,
    delay_seconds=settings.analysis_delay_seconds,
)
