"""
Test high-recall candidate retrieval.
"""

from agent_suggestions.logic.candidate_generator import (
    build_keyword_patterns,
    find_matched_keywords,
    generate_candidates,
)
from agent_suggestions.logic.intent import interpret_intent


def test_empty_catalog_gives_no_candidates():
    assert generate_candidates(interpret_intent("Doctor"), []) == []


def test_domain_expansion_retrieves_related_activity(make_activity):
    hospital = make_activity(
        "Volunteer at children's hospital",
        "medical clinical patient care assistance",
    )
    robotics = make_activity("Robotics club", "Build robots after school")

    candidates = generate_candidates(interpret_intent("Doctor"), [robotics, hospital])

    assert candidates == [hospital]


def test_keyword_must_match_whole_words(make_activity):
    start = make_activity("Start a smart garden", "Startups and smartphones")
    painting = make_activity("Community art exhibition", "Show your work")

    candidates = generate_candidates(interpret_intent("art"), [start, painting])

    assert candidates == [painting]


def test_tags_are_searched(make_activity):
    tagged = make_activity("Weekend project", "Open brief", tags=["Coding", "Apps"])

    assert generate_candidates(interpret_intent("Software Developer"), [tagged]) == [tagged]


def test_catalog_order_is_preserved(make_activity):
    activities = [make_activity(f"Medical camp {i}") for i in range(5)]

    assert generate_candidates(interpret_intent("Doctor"), activities) == activities


def test_keywords_with_pattern_characters_are_escaped(make_activity):
    cpp = make_activity("C++ programming sprint")
    other = make_activity("Chess club")

    intent = interpret_intent("Developer")
    patterns = build_keyword_patterns(intent.copy(update={"keywords": frozenset({"c++", "c.e"})}))

    assert find_matched_keywords("chess club", patterns) == []
    assert find_matched_keywords("c programming sprint", patterns) == []
    assert generate_candidates(intent, [cpp, other]) == [cpp]


def test_matched_keywords_are_sorted():
    patterns = build_keyword_patterns(interpret_intent("Doctor"))

    matched = find_matched_keywords("volunteer at hospital medical clinical patient care", patterns)

    assert matched == ["clinical", "hospital", "medical", "patient"]
