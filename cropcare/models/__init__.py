from .analysis import AnalysisOutcome, AnalysisRecord
from .disease import Disease, Treatment
from .validation import (
    Accepted,
    CandidateImage,
    ImageDetails,
    Rejected,
    RejectionCode,
    ValidatorConfig,
    Verdict,
)

__all__ = [
    "Accepted",
    "AnalysisOutcome",
    "AnalysisRecord",
    "CandidateImage",
    "Disease",
    "ImageDetails",
    "Rejected",
    "RejectionCode",
    "Treatment",
    "ValidatorConfig",
    "Verdict",
]
