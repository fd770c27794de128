"""Results backend client.

Posts a finished diagnosis, and the uploaded image when there is one, to the
configured analysis endpoint as multipart form data.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from cropcare.config import get_settings
from cropcare.models import AnalysisRecord, CandidateImage

logger = logging.getLogger(__name__)
settings = get_settings()


class AnalysisSubmitError(Exception):
    """Raised when the results backend answers with an error status."""

    def __init__(self, status: int, message: str):
        super().__init__(f"Backend error: {status} {message}")
        self.status = status


class AnalysisClient:  # pylint: disable=too-few-public-methods
    """Minimal async client for the analysis results backend."""

    def __init__(
        self,
        *,
        endpoint: str | None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint = endpoint or None
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport, follow_redirects=True)

    @property
    def enabled(self) -> bool:
        return self._endpoint is not None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def submit(self, record: AnalysisRecord, image: CandidateImage | None = None) -> dict[str, Any]:
        """POST *record* (and *image*) and return the backend's JSON reply."""

        if self._endpoint is None:
            raise RuntimeError("Analysis submission is disabled (no endpoint configured)")

        files = None
        if image is not None:
            media_type = image.media_type or "application/octet-stream"
            files = {"image": (image.filename or "upload", image.content, media_type)}

        logger.debug("POST %s -> %s", self._endpoint, record.disease.name)
        resp = await self._client.post(self._endpoint, data=record.form_fields(), files=files)
        if not resp.is_success:
            logger.error("Backend error: %s %s", resp.status_code, resp.text)
            raise AnalysisSubmitError(resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError:
            data = {}
        logger.info("Saved analysis to backend: %s", data)
        return data

    async def close(self) -> None:
        await self._client.aclose()


# ------------------------------------------------------------------
# Singleton instance
# ------------------------------------------------------------------

analysis_client = AnalysisClient(
    endpoint=settings.analysis_endpoint,
    timeout=settings.analysis_timeout,
)
