from __future__ import annotations

from typing import Sequence

from resume_analyzer.taxonomy import PatternRule, get_pattern_rules


def count_keywords(text: str, rules: Sequence[PatternRule] | None = None) -> dict[str, int]:
    """Map each canonical keyword found in ``text`` to its occurrence count.

    Keys follow catalog order and keywords that never occur are left out.
    """
    active_rules = get_pattern_rules() if rules is None else rules
    counts: dict[str, int] = {}
    if not text:
        return counts
    for rule in active_rules:
        count = rule.count(text)
        if count > 0:
            counts[rule.keyword] = count
    return counts
