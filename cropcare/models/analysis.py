from __future__ import annotations

import json
from typing import Literal, Optional

from pydantic import BaseModel

from .disease import Disease
from .validation import Accepted, Rejected


class AnalysisRecord(BaseModel):
    """Diagnosis as submitted to the results backend."""

    crop_name: str = ""
    symptoms: str = ""
    disease: Disease

    def form_fields(self) -> dict[str, str]:
        """Return the multipart form fields understood by the backend."""

        def _dump(treatment_type):
            return json.dumps([t.model_dump() for t in self.disease.treatments_of(treatment_type)])

        return {
            "cropName": self.crop_name,
            "diseaseDetected": self.disease.name,
            "confidence": str(self.disease.confidence),
            "severity": self.disease.severity,
            "description": self.disease.description,
            "fertilizer": _dump("fertilizer"),
            "pesticide": _dump("pesticide"),
            "organic": _dump("organic"),
            "symptoms": self.symptoms,
        }


class AnalysisOutcome(BaseModel):
    """What the results view shows after an analysis request."""

    mode: Literal["image", "text"]
    crop_type: str = ""
    verdict: Accepted | Rejected | None = None
    disease: Disease | None = None
    saved: bool = False
    info: Optional[str] = None
    error: Optional[str] = None
