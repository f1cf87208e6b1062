from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class PatternKind(str, Enum):
    OVERRIDE = "override"
    PHRASE = "phrase"
    HYPHENATED = "hyphenated"
    LITERAL = "literal"


# Ambiguous catalog entries whose plain literal form would under- or over-count.
_OVERRIDE_PATTERNS: dict[str, str] = {
    "node.js": r"\bnode\.?js\b",
    "ci/cd": r"\bci\s*/?\s*cd\b",
    "full-stack": r"\bfull[-\s]?stack\b",
    "machine learning": r"\bmachine\s+learning\b",
    "data science": r"\bdata\s+science\b",
    "api": r"\bapis?\b",
    "rest": r"\brest(ful)?\b",
    "java": r"\bjava\b(?!\s*script)",
}


@dataclass(frozen=True)
class KeywordRule:
    keyword: str
    kind: PatternKind


@dataclass(frozen=True)
class PatternRule:
    keyword: str
    kind: PatternKind
    pattern: re.Pattern[str]

    def count(self, text: str) -> int:
        return sum(1 for _ in self.pattern.finditer(text))


def classify_keyword(keyword: str) -> PatternKind:
    if keyword in _OVERRIDE_PATTERNS:
        return PatternKind.OVERRIDE
    if " " in keyword:
        return PatternKind.PHRASE
    if "-" in keyword:
        return PatternKind.HYPHENATED
    return PatternKind.LITERAL


def build_rule_table(keywords: Iterable[str]) -> tuple[KeywordRule, ...]:
    """Declarative ``{keyword, kind}`` table, one entry per distinct keyword."""
    seen: set[str] = set()
    table: list[KeywordRule] = []
    for keyword in keywords:
        if keyword in seen:
            continue
        seen.add(keyword)
        table.append(KeywordRule(keyword=keyword, kind=classify_keyword(keyword)))
    return tuple(table)


def pattern_source(rule: KeywordRule) -> str:
    if rule.kind is PatternKind.OVERRIDE:
        return _OVERRIDE_PATTERNS[rule.keyword]
    if rule.kind is PatternKind.PHRASE:
        phrase = r"\s+".join(re.escape(word) for word in rule.keyword.split())
        return rf"\b{phrase}\b"
    if rule.kind is PatternKind.HYPHENATED:
        parts = r"[-\s]?".join(re.escape(part) for part in rule.keyword.split("-"))
        return rf"\b{parts}\b"
    return rf"\b{re.escape(rule.keyword)}\b"


def compile_rule(rule: KeywordRule) -> PatternRule:
    return PatternRule(
        keyword=rule.keyword,
        kind=rule.kind,
        pattern=re.compile(pattern_source(rule), re.IGNORECASE),
    )


def compile_patterns(keywords: Iterable[str]) -> tuple[PatternRule, ...]:
    return tuple(compile_rule(rule) for rule in build_rule_table(keywords))
