from __future__ import annotations

import logging
from datetime import datetime, timezone

from resume_analyzer.features import (
    build_keyword_alignment,
    clamp_score,
    generate_suggestions,
    score_band,
    score_content,
    score_formatting,
    score_structure,
)
from resume_analyzer.schemas.analysis import AnalysisResponse, AnalysisResult, ScoreBands

logger = logging.getLogger(__name__)

NO_RESUME_TEXT_MESSAGE = "No resume text to analyze."

SAMPLE_JOB_DESCRIPTION = """Senior Software Engineer

We are seeking a highly skilled Senior Software Engineer to join our dynamic team. The ideal candidate will have 5+ years of experience in full-stack development.

Key Responsibilities:
• Design and develop scalable web applications using React, Node.js, and Python
• Collaborate with cross-functional teams in an Agile environment
• Implement CI/CD pipelines and DevOps best practices
• Mentor junior developers and conduct code reviews
• Optimize application performance and ensure high availability

Required Skills:
• Proficiency in JavaScript, TypeScript, Python
• Experience with React, Angular, or Vue.js
• Strong knowledge of databases (SQL and NoSQL)
• Familiarity with cloud platforms (AWS, GCP, or Azure)
• Experience with Git, Docker, and Kubernetes
• Understanding of software design patterns and clean architecture

Preferred Qualifications:
• Bachelor's degree in Computer Science or related field
• AWS/GCP certifications
• Experience with microservices architecture
• Strong problem-solving and communication skills"""


class InvalidInputError(ValueError):
    def __init__(self, message: str = NO_RESUME_TEXT_MESSAGE, *, status_code: int = 422):
        super().__init__(message)
        self.status_code = status_code


def analyze(resume_text: str | None, job_description: str | None = "") -> AnalysisResult:
    if resume_text is None or not resume_text.strip():
        raise InvalidInputError()
    job_description = job_description or ""

    structure_score = score_structure(resume_text)
    content_score = score_content(resume_text)
    formatting_score = score_formatting(resume_text)
    alignment = build_keyword_alignment(resume_text, job_description)
    suggestions = generate_suggestions(
        structure_score,
        content_score,
        formatting_score,
        len(alignment.missing),
        has_job_description=alignment.has_job_description,
    )
    overall_score = clamp_score((structure_score + content_score + formatting_score) / 3)

    logger.info(
        "resume_analysis_complete overall=%s structure=%s content=%s formatting=%s matched=%s missing=%s",
        overall_score,
        structure_score,
        content_score,
        formatting_score,
        len(alignment.matched),
        len(alignment.missing),
    )
    return AnalysisResult(
        overall_score=overall_score,
        keyword_matches=alignment.matched,
        missing_keywords=alignment.missing,
        suggestions=suggestions,
        structure_score=structure_score,
        content_score=content_score,
        formatting_score=formatting_score,
    )


def run_analysis(resume_text: str | None, job_description: str | None = "") -> AnalysisResponse:
    result = analyze(resume_text, job_description)
    return AnalysisResponse(
        result=result,
        score_bands=ScoreBands(
            overall=score_band(result.overall_score),
            structure=score_band(result.structure_score),
            content=score_band(result.content_score),
            formatting=score_band(result.formatting_score),
        ),
        generated_at=datetime.now(timezone.utc),
    )
