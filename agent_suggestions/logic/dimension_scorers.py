"""
Dimension Scorers

Individual scoring functions for each admissions dimension.
Each scorer produces an integer score between 0 and 5.
All logic is deterministic - no AI/ML components.

Every dimension is an ordered rule table of (predicate, score) pairs,
evaluated top-to-bottom; the first predicate that holds decides the score.
"""

from typing import Any, Callable, NamedTuple, Optional, Pattern, Sequence, Tuple

from .contracts import ScoringRules
from .constants import MIN_DIMENSION_SCORE, MAX_DIMENSION_SCORE
from .text_utils import normalize_text, whole_word_pattern, vocabulary_pattern

Rule = Tuple[Callable[[Any], bool], int]


class DimensionRuleTables(NamedTuple):
    """Compiled rule tables for all five dimensions."""
    title_score: int
    career_alignment: Tuple[Rule, ...]
    leadership: Tuple[Rule, ...]
    leadership_default: int
    ownership_pattern: Pattern[str]
    ownership: Tuple[Rule, ...]
    impact: Tuple[Rule, ...]
    impact_default: int
    spike_pattern: Pattern[str]
    spike: Tuple[Rule, ...]


# =============================================================================
# RULE TABLES
# =============================================================================

def first_match(rules: Sequence[Rule], value: Any, default: int) -> int:
    """Score of the first rule whose predicate holds for `value`, else `default`."""
    for predicate, score in rules:
        if predicate(value):
            return score
    return default


def threshold_rules(thresholds: Sequence[Tuple[int, int]]) -> Tuple[Rule, ...]:
    """(minimum count, score) pairs -> count predicates."""
    return tuple(
        ((lambda count, minimum=minimum: count >= minimum), score)
        for minimum, score in thresholds
    )


def bucket_rules(buckets: Sequence[Tuple[Sequence[str], int]]) -> Tuple[Rule, ...]:
    """(vocabulary, score) pairs -> text predicates."""
    return tuple(
        ((lambda text, pattern=vocabulary_pattern(terms): pattern.search(text) is not None), score)
        for terms, score in buckets
    )


def compile_rules(rules: ScoringRules) -> DimensionRuleTables:
    """Build the rule tables for a ScoringRules configuration."""
    return DimensionRuleTables(
        title_score=rules.career_alignment_title_score,
        career_alignment=threshold_rules(rules.career_alignment_thresholds),
        leadership=bucket_rules(rules.leadership_buckets),
        leadership_default=rules.leadership_default,
        ownership_pattern=vocabulary_pattern(rules.ownership_verbs),
        ownership=threshold_rules(rules.ownership_thresholds),
        impact=bucket_rules(rules.impact_buckets),
        impact_default=rules.impact_default,
        spike_pattern=vocabulary_pattern(rules.spike_markers),
        spike=threshold_rules(rules.spike_thresholds),
    )


DEFAULT_RULE_TABLES = compile_rules(ScoringRules())


# =============================================================================
# DIMENSIONS
# =============================================================================

def score_career_alignment(
    title: str,
    career_phrase: str,
    matched_keyword_count: int,
    tables: DimensionRuleTables = DEFAULT_RULE_TABLES
) -> int:
    """
    Score how directly the activity serves the career role.

    Top score when the normalized role appears in the title, otherwise
    bucketed by the number of intent keywords found in the activity.
    """
    if career_phrase and whole_word_pattern(career_phrase).search(normalize_text(title)):
        return _clamp(tables.title_score)
    return _clamp(first_match(tables.career_alignment, matched_keyword_count, MIN_DIMENSION_SCORE))


def score_leadership_depth(text: str, tables: DimensionRuleTables = DEFAULT_RULE_TABLES) -> int:
    """Founder > leader > contributor vocabulary; neutral when none is present."""
    return _clamp(first_match(tables.leadership, text, tables.leadership_default))


def score_ownership_initiative(text: str, tables: DimensionRuleTables = DEFAULT_RULE_TABLES) -> int:
    """Count ownership verbs (design, build, scale, ...)."""
    count = len(tables.ownership_pattern.findall(text))
    return _clamp(first_match(tables.ownership, count, MIN_DIMENSION_SCORE))


def score_impact_scale(text: str, tables: DimensionRuleTables = DEFAULT_RULE_TABLES) -> int:
    """Global > national > regional > local scope; neutral when unstated."""
    return _clamp(first_match(tables.impact, text, tables.impact_default))


def score_spike_potential(text: str, tables: DimensionRuleTables = DEFAULT_RULE_TABLES) -> int:
    """Count distinctiveness markers (research, award, first, ...)."""
    count = len(tables.spike_pattern.findall(text))
    return _clamp(first_match(tables.spike, count, MIN_DIMENSION_SCORE))


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def _clamp(score: Optional[int]) -> int:
    """Keep a dimension score inside [0, 5]."""
    if score is None:
        return MIN_DIMENSION_SCORE
    return max(MIN_DIMENSION_SCORE, min(MAX_DIMENSION_SCORE, int(score)))
