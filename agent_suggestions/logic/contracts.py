"""
Data Contracts for the Agent Suggestion Engine

Defines Pydantic models for catalog activities (input), career intent,
scored/ranked activities (intermediate) and the public views (output).
These contracts are the API boundary for the suggestion engine.
"""

from datetime import datetime
from typing import FrozenSet, List, Optional, Tuple

from pydantic import BaseModel, Field

from .constants import (
    PointerNo,
    FOUNDER_TERMS,
    LEADER_TERMS,
    CONTRIBUTOR_TERMS,
    OWNERSHIP_VERBS,
    GLOBAL_TERMS,
    NATIONAL_TERMS,
    REGIONAL_TERMS,
    LOCAL_TERMS,
    SPIKE_MARKERS,
    CAREER_ALIGNMENT_TITLE_SCORE,
    CAREER_ALIGNMENT_THRESHOLDS,
    OWNERSHIP_THRESHOLDS,
    SPIKE_THRESHOLDS,
    LEADERSHIP_BUCKET_SCORES,
    LEADERSHIP_DEFAULT_SCORE,
    IMPACT_BUCKET_SCORES,
    IMPACT_DEFAULT_SCORE,
    MIN_DIMENSION_SCORE,
    MAX_DIMENSION_SCORE,
    ENGINE_VERSION,
)


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class ActivityRecord(BaseModel):
    """
    A single catalog activity, as stored by the ingestion pipeline.
    Read-only from the engine's perspective.
    """
    id: str
    pointer_no: PointerNo
    title: str
    description: str = ""
    tags: List[str] = Field(default_factory=list)

    # Catalog metadata
    source: str = "EXCEL"  # EXCEL/SUPERADMIN
    document_url: Optional[str] = None
    document_name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        frozen = True


class CareerIntent(BaseModel):
    """Expanded keyword set derived from the counselor's career role text."""
    career_text: str
    normalized_phrase: str
    tokens: List[str] = Field(default_factory=list)
    keywords: FrozenSet[str]

    class Config:
        frozen = True


class ScoringRules(BaseModel):
    """
    Vocabularies and thresholds used by the dimension scorers.

    Threshold tables are (minimum count, score) pairs checked top-to-bottom.
    Bucket tables pair each vocabulary with the score it awards.
    """
    career_alignment_title_score: int = CAREER_ALIGNMENT_TITLE_SCORE
    career_alignment_thresholds: Tuple[Tuple[int, int], ...] = CAREER_ALIGNMENT_THRESHOLDS

    leadership_buckets: Tuple[Tuple[Tuple[str, ...], int], ...] = tuple(zip(
        (FOUNDER_TERMS, LEADER_TERMS, CONTRIBUTOR_TERMS), LEADERSHIP_BUCKET_SCORES
    ))
    leadership_default: int = LEADERSHIP_DEFAULT_SCORE

    ownership_verbs: Tuple[str, ...] = OWNERSHIP_VERBS
    ownership_thresholds: Tuple[Tuple[int, int], ...] = OWNERSHIP_THRESHOLDS

    impact_buckets: Tuple[Tuple[Tuple[str, ...], int], ...] = tuple(zip(
        (GLOBAL_TERMS, NATIONAL_TERMS, REGIONAL_TERMS, LOCAL_TERMS), IMPACT_BUCKET_SCORES
    ))
    impact_default: int = IMPACT_DEFAULT_SCORE

    spike_markers: Tuple[str, ...] = SPIKE_MARKERS
    spike_thresholds: Tuple[Tuple[int, int], ...] = SPIKE_THRESHOLDS

    class Config:
        frozen = True


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class DimensionScores(BaseModel):
    """The five admissions dimensions, each an integer in [0, 5]."""
    career_alignment: int = Field(ge=MIN_DIMENSION_SCORE, le=MAX_DIMENSION_SCORE)
    leadership_depth: int = Field(ge=MIN_DIMENSION_SCORE, le=MAX_DIMENSION_SCORE)
    ownership_initiative: int = Field(ge=MIN_DIMENSION_SCORE, le=MAX_DIMENSION_SCORE)
    impact_scale: int = Field(ge=MIN_DIMENSION_SCORE, le=MAX_DIMENSION_SCORE)
    spike_potential: int = Field(ge=MIN_DIMENSION_SCORE, le=MAX_DIMENSION_SCORE)

    @property
    def total(self) -> int:
        return (
            self.career_alignment
            + self.leadership_depth
            + self.ownership_initiative
            + self.impact_scale
            + self.spike_potential
        )


class ScoredActivity(BaseModel):
    """
    An activity with computed scores.
    Used between scoring and ranking stages.
    """
    activity: ActivityRecord
    dimension_scores: DimensionScores
    composite_score: int = Field(ge=0, le=5 * MAX_DIMENSION_SCORE)
    why_this_fits: str = ""
    admissions_justification: str = ""
    matched_keywords: List[str] = Field(default_factory=list)


class RankedActivity(ScoredActivity):
    """A scored activity with its 1-based position in the shortlist."""
    rank: int = Field(ge=1)


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class ActivityView(BaseModel):
    """Public projection of a suggested activity."""
    id: str
    title: str
    description: str
    tags: List[str] = Field(default_factory=list)
    pointer_no: PointerNo

    @classmethod
    def from_activity(cls, activity: ActivityRecord) -> "ActivityView":
        return cls(
            id=activity.id,
            title=activity.title,
            description=activity.description,
            tags=list(activity.tags),
            pointer_no=activity.pointer_no,
        )


class SuggestionOutput(BaseModel):
    """
    Detailed output of the suggestion engine.
    Keeps internal scores and rationale for counselors and observability.
    """
    career_role: str
    pointer_no: PointerNo

    # All suggestions (ranked)
    suggestions: List[RankedActivity] = Field(default_factory=list)

    # Summary Statistics
    total_activities: int = 0
    total_candidates: int = 0
    total_suggested: int = 0

    # Processing metadata
    processing_time_ms: Optional[float] = None
    engine_version: str = ENGINE_VERSION

    # Warnings/Notes
    warnings: List[str] = Field(default_factory=list)

    def views(self) -> List[ActivityView]:
        return [ActivityView.from_activity(ranked.activity) for ranked in self.suggestions]
