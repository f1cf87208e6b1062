from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from resume_analyzer.core.config import settings
from resume_analyzer.features.rubric import MAX_MATCHES, MAX_MISSING
from resume_analyzer.features.score_bands import ScoreBand


class AnalysisRequest(BaseModel):
    resume_text: str = Field(default="", max_length=settings.max_resume_chars)
    job_description: str = Field(default="", max_length=settings.max_job_description_chars)


class AnalysisResult(BaseModel):
    overall_score: int = Field(ge=0, le=100)
    keyword_matches: list[str] = Field(default_factory=list, max_length=MAX_MATCHES)
    missing_keywords: list[str] = Field(default_factory=list, max_length=MAX_MISSING)
    suggestions: list[str] = Field(default_factory=list)
    structure_score: int = Field(ge=0, le=100)
    content_score: int = Field(ge=0, le=100)
    formatting_score: int = Field(ge=0, le=100)


class ScoreBands(BaseModel):
    overall: ScoreBand
    structure: ScoreBand
    content: ScoreBand
    formatting: ScoreBand


class AnalysisResponse(BaseModel):
    result: AnalysisResult
    score_bands: ScoreBands
    generated_at: datetime


class SampleJobDescriptionResponse(BaseModel):
    job_description: str
