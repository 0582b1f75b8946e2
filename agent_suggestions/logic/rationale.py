"""
Rationale Templates

Canned, template-filled sentences explaining a suggestion.
No text generation service is involved; the same scores always produce
the same sentences.
"""

from typing import Sequence

from .contracts import CareerIntent, DimensionScores


# (minimum alignment score, template) checked top-to-bottom
WHY_THIS_FITS_TEMPLATES = (
    (5, "Directly built around {role}: the activity itself names the career path."),
    (4, "Strong match for {role}, touching {count} related themes ({keywords})."),
    (3, "Good match for {role} through {keywords}."),
    (2, "Connects to {role} through {keywords}."),
    (0, "Broadly relevant to {role} as a supporting experience."),
)

LEADERSHIP_PHRASES = {
    5: "shows the student founding something of their own",
    4: "puts the student in a leadership role",
    3: "gives room to take on responsibility",
    2: "builds experience as a committed contributor",
}

IMPACT_PHRASES = {
    5: "with reach at a global level",
    4: "with national-level visibility",
    3: "with impact beyond a single school or community",
    2: "grounded in local community impact",
}

SPIKE_PHRASES = {
    5: "and it makes a distinctive, stand-out spike for admissions readers.",
    4: "and it adds a clearly distinctive element to the profile.",
    3: "and it carries a distinctive element worth highlighting.",
    2: "and it reinforces depth in the chosen area.",
}

MAX_LISTED_KEYWORDS = 3


def why_this_fits(intent: CareerIntent, alignment: int, matched_keywords: Sequence[str]) -> str:
    """Sentence tying the activity to the career role."""
    themes = [k for k in matched_keywords if k != intent.normalized_phrase]
    listed = themes[:MAX_LISTED_KEYWORDS]
    keywords = ", ".join(listed) if listed else intent.normalized_phrase

    for minimum, template in WHY_THIS_FITS_TEMPLATES:
        if alignment >= minimum:
            # Keyword-based templates need at least one match to say anything
            if "{keywords}" in template and not matched_keywords:
                continue
            return template.format(
                role=intent.career_text.strip(),
                count=len(themes),
                keywords=keywords,
            )
    return WHY_THIS_FITS_TEMPLATES[-1][1].format(role=intent.career_text.strip())


def admissions_justification(scores: DimensionScores) -> str:
    """Admissions-level justification from the leadership, impact and spike scores."""
    leadership = _phrase(LEADERSHIP_PHRASES, scores.leadership_depth)
    impact = _phrase(IMPACT_PHRASES, scores.impact_scale)
    spike = _phrase(SPIKE_PHRASES, scores.spike_potential)
    return f"This {leadership} {impact}, {spike}"


def _phrase(phrases: dict, score: int) -> str:
    """Phrase for the highest key not above `score` (lowest key as floor)."""
    eligible = [key for key in phrases if key <= score]
    return phrases[max(eligible) if eligible else min(phrases)]
