"""
Text Helpers

Normalization and whole-word pattern building shared by retrieval and scoring.
"""

import re
from typing import Iterable, Pattern

from .contracts import ActivityRecord

_NON_ALNUM = re.compile(r"[\W_]+")


def normalize_text(text: str) -> str:
    """
    Lowercase, turn every run of non-alphanumeric characters into one space, trim.

      "Software-Engineer!!" -> "software engineer"
    """
    if not text:
        return ""
    return _NON_ALNUM.sub(" ", text.lower()).strip()


def activity_text(activity: ActivityRecord) -> str:
    """Searchable text for an activity: title, description and tags, normalized."""
    parts = [activity.title, activity.description, *activity.tags]
    return normalize_text(" ".join(p for p in parts if p))


def whole_word_pattern(phrase: str) -> Pattern[str]:
    """Match `phrase` only as complete words ("art" never matches "start")."""
    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)")


# Inflections a vocabulary term may carry ("founded", "leads", "leadership")
_VOCABULARY_SUFFIXES = "s|es|ed|d|ing|ly|ment|ments|ship|ership"


def vocabulary_pattern(terms: Iterable[str]) -> Pattern[str]:
    """
    Match any of `terms` as a whole word or a regular inflection of one.

      "found" matches "founded", "founding"; not "foundation"
      "organize" matches "organized", "organizing"; "head" never matches "headphones"
    """
    alternatives = []
    for term in sorted(set(terms), key=len, reverse=True):
        alternatives.append(rf"{re.escape(term)}(?:{_VOCABULARY_SUFFIXES})?")
        if term.endswith("e"):
            alternatives.append(rf"{re.escape(term[:-1])}ing")
    return re.compile(rf"(?<!\w)(?:{'|'.join(alternatives)})(?!\w)")
