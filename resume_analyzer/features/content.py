from __future__ import annotations

import re

from pydantic import BaseModel, Field

from .rubric import ContentRubric, clamp_score, load_rubric

NUMBER_RE = re.compile(r"\b\d+[%+]?\b")


class ContentReport(BaseModel):
    word_count: int = 0
    action_verbs_found: list[str] = Field(default_factory=list)
    has_numbers: bool = False
    professional_terms_found: list[str] = Field(default_factory=list)
    score: int = Field(ge=0, le=100)


def _word_count_points(word_count: int, rubric: ContentRubric) -> float:
    if rubric.word_count_ideal_min <= word_count <= rubric.word_count_ideal_max:
        return rubric.word_count_ideal_points
    if word_count >= rubric.word_count_minimum:
        return rubric.word_count_minimum_points
    return 0.0


def _coverage_points(found: int, total: int, multiplier: float, cap: float) -> float:
    if total <= 0:
        return 0.0
    return min(cap, (found / total) * multiplier)


def build_content_report(resume_text: str, rubric: ContentRubric | None = None) -> ContentReport:
    rubric = rubric or load_rubric().content
    lowered = resume_text.lower()
    word_count = len(resume_text.split())
    action_verbs_found = [verb for verb in rubric.action_verbs if verb in lowered]
    professional_terms_found = [term for term in rubric.professional_terms if term in lowered]
    has_numbers = bool(NUMBER_RE.search(resume_text))

    score = _word_count_points(word_count, rubric)
    score += _coverage_points(
        len(action_verbs_found),
        len(rubric.action_verbs),
        rubric.action_verb_multiplier,
        rubric.action_verb_cap,
    )
    if has_numbers:
        score += rubric.number_points
    score += _coverage_points(
        len(professional_terms_found),
        len(rubric.professional_terms),
        rubric.professional_term_multiplier,
        rubric.professional_term_cap,
    )

    return ContentReport(
        word_count=word_count,
        action_verbs_found=action_verbs_found,
        has_numbers=has_numbers,
        professional_terms_found=professional_terms_found,
        score=clamp_score(score),
    )


def score_content(resume_text: str) -> int:
    return build_content_report(resume_text).score
