"""
Candidate Generator

High-recall filter over the catalog for one pointer: an activity becomes a
candidate when any expanded keyword appears in it as a whole word.
"""

import logging
from typing import List, Optional, Pattern, Sequence, Tuple

from .contracts import ActivityRecord, CareerIntent
from .text_utils import activity_text, whole_word_pattern

logger = logging.getLogger(__name__)

KeywordPatterns = Tuple[Tuple[str, Pattern[str]], ...]


def build_keyword_patterns(intent: CareerIntent) -> KeywordPatterns:
    """Compile one escaped whole-word pattern per keyword, in sorted keyword order."""
    return tuple(
        (keyword, whole_word_pattern(keyword))
        for keyword in sorted(intent.keywords)
    )


def find_matched_keywords(text: str, patterns: KeywordPatterns) -> List[str]:
    """Keywords (sorted) that occur in the normalized text as whole words."""
    return [keyword for keyword, pattern in patterns if pattern.search(text)]


def generate_candidates(
    intent: CareerIntent,
    activities: Sequence[ActivityRecord],
    patterns: Optional[KeywordPatterns] = None
) -> List[ActivityRecord]:
    """
    Select activities matching at least one intent keyword.

    Args:
        intent: Expanded career intent
        activities: All catalog activities for one pointer (may be empty)
        patterns: Precompiled keyword patterns, built from intent if omitted

    Returns:
        Candidates in their catalog order
    """
    if not activities:
        return []

    if patterns is None:
        patterns = build_keyword_patterns(intent)

    candidates: List[ActivityRecord] = []
    for activity in activities:
        text = activity_text(activity)
        if any(pattern.search(text) for _, pattern in patterns):
            candidates.append(activity)

    logger.debug(f"Retrieved {len(candidates)}/{len(activities)} candidates for '{intent.normalized_phrase}'")
    return candidates
