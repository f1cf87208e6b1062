from .content import ContentReport, build_content_report, score_content
from .formatting import FormattingReport, build_formatting_report, score_formatting
from .keyword_alignment import (
    KeywordAlignment,
    build_keyword_alignment,
    find_keyword_matches,
    find_missing_keywords,
    has_job_description,
)
from .keyword_counts import count_keywords
from .rubric import Rubric, clamp_score, load_rubric
from .score_bands import ScoreBand, score_band
from .structure import StructureReport, build_structure_report, score_structure
from .suggestions import generate_suggestions

__all__ = [
    "ContentReport",
    "build_content_report",
    "score_content",
    "FormattingReport",
    "build_formatting_report",
    "score_formatting",
    "KeywordAlignment",
    "build_keyword_alignment",
    "find_keyword_matches",
    "find_missing_keywords",
    "has_job_description",
    "count_keywords",
    "Rubric",
    "clamp_score",
    "load_rubric",
    "ScoreBand",
    "score_band",
    "StructureReport",
    "build_structure_report",
    "score_structure",
    "generate_suggestions",
]
