"""
Test ranking and truncation.
"""

from agent_suggestions.logic import DimensionScores, ScoredActivity
from agent_suggestions.logic.ranker import rank_activities


def _scored(activity, composite):
    # Spread the composite over the five dimensions
    base, extra = divmod(composite, 5)
    values = [base + (1 if i < extra else 0) for i in range(5)]
    scores = DimensionScores(
        career_alignment=values[0],
        leadership_depth=values[1],
        ownership_initiative=values[2],
        impact_scale=values[3],
        spike_potential=values[4],
    )
    return ScoredActivity(activity=activity, dimension_scores=scores, composite_score=scores.total)


def test_empty_input_gives_empty_ranking():
    assert rank_activities([]) == []


def test_sorted_by_composite_with_contiguous_ranks(make_activity):
    scored = [_scored(make_activity(f"a{i}"), c) for i, c in enumerate([9, 17, 12, 25, 5])]

    ranked = rank_activities(scored)

    assert [r.composite_score for r in ranked] == [25, 17, 12, 9, 5]
    assert [r.rank for r in ranked] == [1, 2, 3, 4, 5]


def test_ties_keep_input_order(make_activity):
    first = _scored(make_activity("first"), 12)
    second = _scored(make_activity("second"), 15)
    third = _scored(make_activity("third"), 12)

    ranked = rank_activities([first, second, third])

    assert [r.activity.title for r in ranked] == ["second", "first", "third"]


def test_truncates_to_limit(make_activity):
    scored = [_scored(make_activity(f"a{i}"), 5 + i % 20) for i in range(30)]

    ranked = rank_activities(scored)

    assert len(ranked) == 20
    assert [r.rank for r in ranked] == list(range(1, 21))
    assert len(rank_activities(scored, limit=3)) == 3


def test_input_is_not_mutated(make_activity):
    scored = [_scored(make_activity("only"), 10)]

    ranked = rank_activities(scored)

    assert ranked[0] is not scored[0]
    assert not hasattr(scored[0], "rank")
    assert ranked[0].dimension_scores == scored[0].dimension_scores
