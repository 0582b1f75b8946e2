"""
Score Aggregator

Runs every dimension scorer for a candidate, sums them into the composite
score and attaches the rationale sentences.
"""

from typing import List, Optional, Sequence

from .contracts import ActivityRecord, CareerIntent, DimensionScores, ScoredActivity
from .candidate_generator import KeywordPatterns, build_keyword_patterns, find_matched_keywords
from .dimension_scorers import (
    DEFAULT_RULE_TABLES,
    DimensionRuleTables,
    score_career_alignment,
    score_leadership_depth,
    score_ownership_initiative,
    score_impact_scale,
    score_spike_potential,
)
from .rationale import why_this_fits, admissions_justification
from .text_utils import activity_text


def score_activity(
    activity: ActivityRecord,
    career_text: str,
    intent: CareerIntent,
    tables: DimensionRuleTables = DEFAULT_RULE_TABLES,
    patterns: Optional[KeywordPatterns] = None
) -> ScoredActivity:
    """
    Compute all dimension scores for one activity.

    Args:
        activity: Candidate activity
        career_text: Career role as typed by the counselor
        intent: Expanded intent for the same career role
        tables: Compiled scoring rules
        patterns: Precompiled keyword patterns, built from intent if omitted

    Returns:
        ScoredActivity with composite score and rationale
    """
    if patterns is None:
        patterns = build_keyword_patterns(intent)

    text = activity_text(activity)
    matched = find_matched_keywords(text, patterns)

    scores = DimensionScores(
        career_alignment=score_career_alignment(
            activity.title, intent.normalized_phrase or career_text, len(matched), tables
        ),
        leadership_depth=score_leadership_depth(text, tables),
        ownership_initiative=score_ownership_initiative(text, tables),
        impact_scale=score_impact_scale(text, tables),
        spike_potential=score_spike_potential(text, tables),
    )

    return ScoredActivity(
        activity=activity,
        dimension_scores=scores,
        composite_score=scores.total,
        why_this_fits=why_this_fits(intent, scores.career_alignment, matched),
        admissions_justification=admissions_justification(scores),
        matched_keywords=matched,
    )


def batch_score(
    candidates: Sequence[ActivityRecord],
    career_text: str,
    intent: CareerIntent,
    tables: DimensionRuleTables = DEFAULT_RULE_TABLES
) -> List[ScoredActivity]:
    """Score multiple candidates, compiling the keyword patterns once."""
    patterns = build_keyword_patterns(intent)
    return [score_activity(c, career_text, intent, tables, patterns) for c in candidates]
