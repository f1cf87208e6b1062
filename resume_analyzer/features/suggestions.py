from __future__ import annotations

from .rubric import SuggestionRubric, load_rubric

STRUCTURE_SUGGESTIONS = (
    "Consider adding clear sections for Experience, Education, and Skills to improve resume structure.",
    "Include contact information (email and phone number) for easy communication.",
)

CONTENT_SUGGESTIONS = (
    "Use more action verbs (developed, implemented, managed) to make your achievements more impactful.",
    "Include quantifiable achievements with specific numbers and percentages.",
    "Ensure your resume has sufficient content (200-800 words) to adequately showcase your experience.",
)

FORMATTING_SUGGESTIONS = (
    "Improve formatting consistency with proper bullet points and section headers.",
    "Use consistent capitalization and avoid excessive use of capital letters.",
)

KEYWORD_SUGGESTION = (
    "Consider incorporating more relevant keywords from the job description to improve ATS compatibility."
)

FALLBACK_SUGGESTIONS = (
    "Your resume looks good! Consider tailoring it further for specific job applications.",
    "Regularly update your resume with new achievements and skills.",
)


def generate_suggestions(
    structure_score: int,
    content_score: int,
    formatting_score: int,
    missing_count: int,
    *,
    has_job_description: bool,
    rubric: SuggestionRubric | None = None,
) -> list[str]:
    rubric = rubric or load_rubric().suggestions
    suggestions: list[str] = []

    if structure_score < rubric.score_threshold:
        suggestions.extend(STRUCTURE_SUGGESTIONS)
    if content_score < rubric.score_threshold:
        suggestions.extend(CONTENT_SUGGESTIONS)
    if formatting_score < rubric.score_threshold:
        suggestions.extend(FORMATTING_SUGGESTIONS)
    if has_job_description and missing_count > rubric.missing_keyword_threshold:
        suggestions.append(KEYWORD_SUGGESTION)

    if not suggestions:
        suggestions.extend(FALLBACK_SUGGESTIONS)
    return suggestions
