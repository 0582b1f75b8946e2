"""
Ranker

Orders scored activities by composite score and cuts the shortlist.
"""

from typing import List, Sequence

from .contracts import RankedActivity, ScoredActivity
from .constants import MAX_SUGGESTIONS


def rank_activities(
    scored: Sequence[ScoredActivity],
    limit: int = MAX_SUGGESTIONS
) -> List[RankedActivity]:
    """
    Rank activities by composite score (descending).

    The sort is stable, so equal scores keep their catalog order.
    Ranks are 1-based positions in the returned list.

    Args:
        scored: Scored activities in catalog order
        limit: Maximum number of suggestions

    Returns:
        New RankedActivity objects, best first
    """
    ordered = sorted(scored, key=lambda s: s.composite_score, reverse=True)
    return [
        RankedActivity(**dict(item), rank=position)
        for position, item in enumerate(ordered[:limit], start=1)
    ]
