from __future__ import annotations

from pydantic import BaseModel, Field

from .keyword_counts import count_keywords
from .rubric import KeywordLimits, load_rubric


class KeywordAlignment(BaseModel):
    resume_counts: dict[str, int] = Field(default_factory=dict)
    job_counts: dict[str, int] = Field(default_factory=dict)
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    has_job_description: bool = False


def has_job_description(job_description: str | None) -> bool:
    return bool(job_description and job_description.strip())


def _rank_resume_only(resume_counts: dict[str, int], limit: int) -> list[str]:
    # sorted() is stable, so equal counts keep catalog order
    ranked = sorted(resume_counts, key=lambda keyword: -resume_counts[keyword])
    return ranked[:limit]


def _rank_matched(resume_counts: dict[str, int], job_counts: dict[str, int], limit: int) -> list[str]:
    shared = [keyword for keyword in resume_counts if job_counts.get(keyword, 0) > 0]
    shared.sort(key=lambda keyword: (-job_counts[keyword], -resume_counts[keyword]))
    return shared[:limit]


def _rank_missing(resume_counts: dict[str, int], job_counts: dict[str, int], limit: int) -> list[str]:
    missing = [keyword for keyword in job_counts if keyword not in resume_counts]
    missing.sort(key=lambda keyword: -job_counts[keyword])
    return missing[:limit]


def build_keyword_alignment(
    resume_text: str,
    job_description: str = "",
    *,
    limits: KeywordLimits | None = None,
) -> KeywordAlignment:
    limits = limits or load_rubric().keywords
    resume_counts = count_keywords(resume_text)

    if not has_job_description(job_description):
        return KeywordAlignment(
            resume_counts=resume_counts,
            matched=_rank_resume_only(resume_counts, limits.resume_only_matches),
        )

    job_counts = count_keywords(job_description)
    return KeywordAlignment(
        resume_counts=resume_counts,
        job_counts=job_counts,
        matched=_rank_matched(resume_counts, job_counts, limits.matches),
        missing=_rank_missing(resume_counts, job_counts, limits.missing),
        has_job_description=True,
    )


def find_keyword_matches(resume_text: str, job_description: str = "") -> list[str]:
    return build_keyword_alignment(resume_text, job_description).matched


def find_missing_keywords(resume_text: str, job_description: str = "") -> list[str]:
    return build_keyword_alignment(resume_text, job_description).missing
