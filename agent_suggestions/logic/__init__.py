"""
Agent Suggestion Logic Module

Provides the deterministic engine that ranks catalog activities for a career role.
"""

from .contracts import (
    ActivityRecord,
    ActivityView,
    CareerIntent,
    DimensionScores,
    RankedActivity,
    ScoredActivity,
    ScoringRules,
    SuggestionOutput,
)
from .engine import SuggestionEngine, get_agent_suggestions, validate_pointer
from .errors import AgentSuggestionError, InvalidArgument, StoreUnavailable
from .constants import PointerNo, DOMAIN_KNOWLEDGE
from .store import ActivityStore, InMemoryActivityStore, MongoActivityStore, SqlActivityStore

__all__ = [
    # Main engine
    "SuggestionEngine",
    "get_agent_suggestions",
    "validate_pointer",

    # Contracts
    "ActivityRecord",
    "ActivityView",
    "CareerIntent",
    "DimensionScores",
    "RankedActivity",
    "ScoredActivity",
    "ScoringRules",
    "SuggestionOutput",

    # Errors
    "AgentSuggestionError",
    "InvalidArgument",
    "StoreUnavailable",

    # Stores
    "ActivityStore",
    "InMemoryActivityStore",
    "MongoActivityStore",
    "SqlActivityStore",

    # Enums / tables
    "PointerNo",
    "DOMAIN_KNOWLEDGE",
]
