from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from resume_analyzer.core.config.scoring import get_scoring_value

RESUME_SECTIONS = (
    "experience",
    "education",
    "skills",
    "projects",
    "achievements",
    "certifications",
    "summary",
    "objective",
)

ACTION_VERBS = (
    "developed",
    "implemented",
    "designed",
    "created",
    "managed",
    "led",
    "improved",
    "optimized",
    "achieved",
    "collaborated",
    "delivered",
    "built",
    "established",
    "executed",
    "maintained",
    "analyzed",
)

PROFESSIONAL_TERMS = (
    "professional",
    "experience",
    "responsible",
    "collaborate",
    "contribute",
    "achieve",
    "deliver",
    "support",
)

SECTION_POINTS = 40
EMAIL_POINTS = 15
PHONE_POINTS = 15
BULLET_POINTS = 15
DATE_POINTS = 15

WORD_COUNT_IDEAL_MIN = 200
WORD_COUNT_IDEAL_MAX = 800
WORD_COUNT_IDEAL_POINTS = 25
WORD_COUNT_MINIMUM = 100
WORD_COUNT_MINIMUM_POINTS = 15
ACTION_VERB_MULTIPLIER = 50
ACTION_VERB_CAP = 25
NUMBER_POINTS = 20
PROFESSIONAL_TERM_MULTIPLIER = 30
PROFESSIONAL_TERM_CAP = 30

FORMATTING_BASE = 60
BLANK_LINE_POINTS = 10
CAPITALIZATION_POINTS = 10
ORGANIZATION_POINTS = 10
EXCESSIVE_CAPS_RATIO = 0.15
EXCESSIVE_CAPS_PENALTY = 15
LINE_LENGTH_MIN_EXCLUSIVE = 20
LINE_LENGTH_MAX_EXCLUSIVE = 100
LINE_LENGTH_POINTS = 10

SUGGESTION_SCORE_THRESHOLD = 70
MISSING_KEYWORD_THRESHOLD = 5

MATCHES_LIMIT = 20
RESUME_ONLY_MATCHES_LIMIT = 15
MISSING_LIMIT = 10
# result lists never grow past these, whatever config/scoring.yaml says
MAX_MATCHES = 20
MAX_MISSING = 10

BAND_SUCCESS_MIN = 80
BAND_WARNING_MIN = 60


@dataclass(frozen=True)
class StructureRubric:
    sections: tuple[str, ...] = RESUME_SECTIONS
    section_points: float = SECTION_POINTS
    email_points: float = EMAIL_POINTS
    phone_points: float = PHONE_POINTS
    bullet_points: float = BULLET_POINTS
    date_points: float = DATE_POINTS


@dataclass(frozen=True)
class ContentRubric:
    action_verbs: tuple[str, ...] = ACTION_VERBS
    professional_terms: tuple[str, ...] = PROFESSIONAL_TERMS
    word_count_ideal_min: int = WORD_COUNT_IDEAL_MIN
    word_count_ideal_max: int = WORD_COUNT_IDEAL_MAX
    word_count_ideal_points: float = WORD_COUNT_IDEAL_POINTS
    word_count_minimum: int = WORD_COUNT_MINIMUM
    word_count_minimum_points: float = WORD_COUNT_MINIMUM_POINTS
    action_verb_multiplier: float = ACTION_VERB_MULTIPLIER
    action_verb_cap: float = ACTION_VERB_CAP
    number_points: float = NUMBER_POINTS
    professional_term_multiplier: float = PROFESSIONAL_TERM_MULTIPLIER
    professional_term_cap: float = PROFESSIONAL_TERM_CAP


@dataclass(frozen=True)
class FormattingRubric:
    base: float = FORMATTING_BASE
    blank_line_points: float = BLANK_LINE_POINTS
    capitalization_points: float = CAPITALIZATION_POINTS
    organization_points: float = ORGANIZATION_POINTS
    excessive_caps_ratio: float = EXCESSIVE_CAPS_RATIO
    excessive_caps_penalty: float = EXCESSIVE_CAPS_PENALTY
    line_length_min_exclusive: float = LINE_LENGTH_MIN_EXCLUSIVE
    line_length_max_exclusive: float = LINE_LENGTH_MAX_EXCLUSIVE
    line_length_points: float = LINE_LENGTH_POINTS


@dataclass(frozen=True)
class SuggestionRubric:
    score_threshold: int = SUGGESTION_SCORE_THRESHOLD
    missing_keyword_threshold: int = MISSING_KEYWORD_THRESHOLD


@dataclass(frozen=True)
class KeywordLimits:
    matches: int = MATCHES_LIMIT
    resume_only_matches: int = RESUME_ONLY_MATCHES_LIMIT
    missing: int = MISSING_LIMIT


@dataclass(frozen=True)
class ScoreBands:
    success_min: int = BAND_SUCCESS_MIN
    warning_min: int = BAND_WARNING_MIN


@dataclass(frozen=True)
class Rubric:
    structure: StructureRubric = StructureRubric()
    content: ContentRubric = ContentRubric()
    formatting: FormattingRubric = FormattingRubric()
    suggestions: SuggestionRubric = SuggestionRubric()
    keywords: KeywordLimits = KeywordLimits()
    bands: ScoreBands = ScoreBands()


def _number(path: str, default: float) -> float:
    value: Any = get_scoring_value(path, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise RuntimeError(f"Scoring config value '{path}' must be numeric, got {value!r}.") from None


def _integer(path: str, default: int) -> int:
    return int(_number(path, default))


def _limit(path: str, default: int, maximum: int) -> int:
    value = _integer(path, default)
    if value < 0 or value > maximum:
        raise RuntimeError(f"Scoring config value '{path}' must be between 0 and {maximum}, got {value}.")
    return value


def build_rubric() -> Rubric:
    """Build the scoring rubric from named defaults and config/scoring.yaml overrides."""
    return Rubric(
        structure=StructureRubric(
            section_points=_number("structure.points.sections", SECTION_POINTS),
            email_points=_number("structure.points.email", EMAIL_POINTS),
            phone_points=_number("structure.points.phone", PHONE_POINTS),
            bullet_points=_number("structure.points.bullets", BULLET_POINTS),
            date_points=_number("structure.points.dates", DATE_POINTS),
        ),
        content=ContentRubric(
            word_count_ideal_min=_integer("content.word_count.ideal_min", WORD_COUNT_IDEAL_MIN),
            word_count_ideal_max=_integer("content.word_count.ideal_max", WORD_COUNT_IDEAL_MAX),
            word_count_ideal_points=_number("content.word_count.ideal_points", WORD_COUNT_IDEAL_POINTS),
            word_count_minimum=_integer("content.word_count.minimum", WORD_COUNT_MINIMUM),
            word_count_minimum_points=_number("content.word_count.minimum_points", WORD_COUNT_MINIMUM_POINTS),
            action_verb_multiplier=_number("content.action_verbs.multiplier", ACTION_VERB_MULTIPLIER),
            action_verb_cap=_number("content.action_verbs.cap", ACTION_VERB_CAP),
            number_points=_number("content.numbers.points", NUMBER_POINTS),
            professional_term_multiplier=_number(
                "content.professional_terms.multiplier", PROFESSIONAL_TERM_MULTIPLIER
            ),
            professional_term_cap=_number("content.professional_terms.cap", PROFESSIONAL_TERM_CAP),
        ),
        formatting=FormattingRubric(
            base=_number("formatting.base", FORMATTING_BASE),
            blank_line_points=_number("formatting.blank_line_points", BLANK_LINE_POINTS),
            capitalization_points=_number("formatting.capitalization_points", CAPITALIZATION_POINTS),
            organization_points=_number("formatting.organization_points", ORGANIZATION_POINTS),
            excessive_caps_ratio=_number("formatting.excessive_caps.ratio", EXCESSIVE_CAPS_RATIO),
            excessive_caps_penalty=_number("formatting.excessive_caps.penalty", EXCESSIVE_CAPS_PENALTY),
            line_length_min_exclusive=_number("formatting.line_length.min_exclusive", LINE_LENGTH_MIN_EXCLUSIVE),
            line_length_max_exclusive=_number("formatting.line_length.max_exclusive", LINE_LENGTH_MAX_EXCLUSIVE),
            line_length_points=_number("formatting.line_length.points", LINE_LENGTH_POINTS),
        ),
        suggestions=SuggestionRubric(
            score_threshold=_integer("suggestions.score_threshold", SUGGESTION_SCORE_THRESHOLD),
            missing_keyword_threshold=_integer("suggestions.missing_keyword_threshold", MISSING_KEYWORD_THRESHOLD),
        ),
        keywords=KeywordLimits(
            matches=_limit("keywords.matches_limit", MATCHES_LIMIT, MAX_MATCHES),
            resume_only_matches=_limit("keywords.resume_only_limit", RESUME_ONLY_MATCHES_LIMIT, MAX_MATCHES),
            missing=_limit("keywords.missing_limit", MISSING_LIMIT, MAX_MISSING),
        ),
        bands=ScoreBands(
            success_min=_integer("bands.success", BAND_SUCCESS_MIN),
            warning_min=_integer("bands.warning", BAND_WARNING_MIN),
        ),
    )


@lru_cache(maxsize=1)
def load_rubric() -> Rubric:
    return build_rubric()


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round half up."""
    bounded = min(100.0, max(0.0, float(value)))
    return int(bounded + 0.5)
