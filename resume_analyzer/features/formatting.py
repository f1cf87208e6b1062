from __future__ import annotations

import re

from pydantic import BaseModel, Field

from .rubric import FormattingRubric, clamp_score, load_rubric

UPPERCASE_RE = re.compile(r"[A-Z]")
# the bullet and the "\n" must share a line; "\r" ends the line too, so CRLF text never qualifies
ORGANIZED_LIST_RE = re.compile(r"[•\-*][^\r\n\u2028\u2029]*\n")


class FormattingReport(BaseModel):
    has_blank_lines: bool = False
    has_capitalization: bool = False
    has_organization: bool = False
    uppercase_ratio: float = 0.0
    too_many_capitals: bool = False
    average_line_length: float = 0.0
    score: int = Field(ge=0, le=100)


def build_formatting_report(resume_text: str, rubric: FormattingRubric | None = None) -> FormattingReport:
    rubric = rubric or load_rubric().formatting
    score = rubric.base

    has_blank_lines = "\n\n" in resume_text
    if has_blank_lines:
        score += rubric.blank_line_points

    uppercase_count = len(UPPERCASE_RE.findall(resume_text))
    has_capitalization = uppercase_count > 0
    if has_capitalization:
        score += rubric.capitalization_points

    has_organization = bool(ORGANIZED_LIST_RE.search(resume_text))
    if has_organization:
        score += rubric.organization_points

    total_chars = len(resume_text)
    uppercase_ratio = uppercase_count / total_chars if total_chars else 0.0
    too_many_capitals = uppercase_count > total_chars * rubric.excessive_caps_ratio
    if too_many_capitals:
        score -= rubric.excessive_caps_penalty

    lines = resume_text.split("\n")
    average_line_length = sum(len(line) for line in lines) / len(lines)
    if rubric.line_length_min_exclusive < average_line_length < rubric.line_length_max_exclusive:
        score += rubric.line_length_points

    return FormattingReport(
        has_blank_lines=has_blank_lines,
        has_capitalization=has_capitalization,
        has_organization=has_organization,
        uppercase_ratio=uppercase_ratio,
        too_many_capitals=too_many_capitals,
        average_line_length=average_line_length,
        score=clamp_score(score),
    )


def score_formatting(resume_text: str) -> int:
    return build_formatting_report(resume_text).score
