"""
Intent Interpreter

Expands a counselor's free-text career role into a keyword set using the
domain knowledge table. Pure function, no I/O.
"""

from typing import Mapping, FrozenSet, Optional, Set

from .constants import DOMAIN_KNOWLEDGE, STOP_WORDS, MAX_DISCARDED_TOKEN_LENGTH
from .contracts import CareerIntent
from .errors import InvalidArgument
from .text_utils import normalize_text


def interpret_intent(
    career_text: str,
    knowledge: Optional[Mapping[str, FrozenSet[str]]] = None
) -> CareerIntent:
    """
    Build the CareerIntent for a career role.

    Steps:
    - Normalize the text (lowercase, punctuation to spaces, collapse whitespace)
    - Keep tokens longer than 3 characters that are not stop words
    - Union the concept keywords of every token found in the knowledge table
    - Always add the surviving tokens and the full normalized phrase

    Args:
        career_text: Career role as typed by the counselor
        knowledge: Optional replacement for DOMAIN_KNOWLEDGE

    Returns:
        CareerIntent whose keyword set is never empty

    Raises:
        InvalidArgument: If the text is blank or has no letters/digits
    """
    if not isinstance(career_text, str) or not career_text.strip():
        raise InvalidArgument("careerRole is required and must be a non-empty string")

    table = DOMAIN_KNOWLEDGE if knowledge is None else knowledge

    phrase = normalize_text(career_text)
    if not phrase:
        raise InvalidArgument("careerRole must contain at least one letter or digit")

    tokens = [
        token for token in phrase.split(" ")
        if len(token) > MAX_DISCARDED_TOKEN_LENGTH and token not in STOP_WORDS
    ]

    keywords: Set[str] = {phrase}
    for token in tokens:
        keywords.add(token)
        keywords.update(table.get(token, ()))

    return CareerIntent(
        career_text=career_text,
        normalized_phrase=phrase,
        tokens=list(dict.fromkeys(tokens)),
        keywords=frozenset(keywords),
    )
