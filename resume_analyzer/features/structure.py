from __future__ import annotations

import re

from pydantic import BaseModel, Field

from .rubric import StructureRubric, clamp_score, load_rubric

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_RE = re.compile(r"(\+\d{1,3}[- ]?)?\d{10}")
BULLET_RE = re.compile(r"[•\-*]")
YEAR_RE = re.compile(r"\b(20\d{2}|19\d{2})\b")


class StructureReport(BaseModel):
    sections_found: list[str] = Field(default_factory=list)
    has_email: bool = False
    has_phone: bool = False
    has_bullets: bool = False
    has_dates: bool = False
    score: int = Field(ge=0, le=100)


def build_structure_report(resume_text: str, rubric: StructureRubric | None = None) -> StructureReport:
    rubric = rubric or load_rubric().structure
    lowered = resume_text.lower()
    sections_found = [section for section in rubric.sections if section in lowered]
    has_email = bool(EMAIL_RE.search(resume_text))
    has_phone = bool(PHONE_RE.search(resume_text))
    has_bullets = bool(BULLET_RE.search(resume_text))
    has_dates = bool(YEAR_RE.search(resume_text))

    score = 0.0
    if rubric.sections:
        score += (len(sections_found) / len(rubric.sections)) * rubric.section_points
    if has_email:
        score += rubric.email_points
    if has_phone:
        score += rubric.phone_points
    if has_bullets:
        score += rubric.bullet_points
    if has_dates:
        score += rubric.date_points

    return StructureReport(
        sections_found=sections_found,
        has_email=has_email,
        has_phone=has_phone,
        has_bullets=has_bullets,
        has_dates=has_dates,
        score=clamp_score(score),
    )


def score_structure(resume_text: str) -> int:
    return build_structure_report(resume_text).score
