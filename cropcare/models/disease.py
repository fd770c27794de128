from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field

TreatmentType = Literal["fertilizer", "pesticide", "organic"]


class Treatment(BaseModel):
    type: TreatmentType
    name: str
    dosage: str
    application: str
    timing: str


class Disease(BaseModel):
    """A diagnosis card: what was found and how to treat and prevent it."""

    name: str
    confidence: int = Field(..., ge=0, le=100)  # percent
    severity: Literal["Low", "Medium", "High"]
    description: str
    treatments: List[Treatment] = []
    prevention: List[str] = []

    def treatments_of(self, treatment_type: TreatmentType) -> List[Treatment]:
        return [t for t in self.treatments if t.type == treatment_type]
