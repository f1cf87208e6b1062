from functools import lru_cache

from .local_taxonomy import LocalTaxonomy
from .patterns import KeywordRule, PatternKind, PatternRule, build_rule_table, compile_patterns
from .provider import TaxonomyProvider


@lru_cache(maxsize=1)
def get_default_taxonomy_provider() -> TaxonomyProvider:
    return LocalTaxonomy()


@lru_cache(maxsize=1)
def get_pattern_rules() -> tuple[PatternRule, ...]:
    return compile_patterns(get_default_taxonomy_provider().keywords())


__all__ = [
    "TaxonomyProvider",
    "LocalTaxonomy",
    "KeywordRule",
    "PatternKind",
    "PatternRule",
    "build_rule_table",
    "compile_patterns",
    "get_default_taxonomy_provider",
    "get_pattern_rules",
]
