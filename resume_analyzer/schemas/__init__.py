from .analysis import (
    AnalysisRequest,
    AnalysisResponse,
    AnalysisResult,
    SampleJobDescriptionResponse,
    ScoreBands,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisResponse",
    "ScoreBands",
    "SampleJobDescriptionResponse",
]
