"""
Agent Suggestion API Routes

Exposes the suggestion engine via REST API.
Single endpoint: GET /api/agent-suggestions
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from .logic.constants import ENGINE_VERSION
from .logic.contracts import ActivityView, RankedActivity, SuggestionOutput
from .logic.engine import SuggestionEngine
from .logic.errors import InvalidArgument, StoreUnavailable
from .logic.sample_catalog import sample_activities
from .logic.store import InMemoryActivityStore, MongoActivityStore, SqlActivityStore
from .settings import get_settings, load_scoring_rules

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/agent-suggestions", tags=["agent-suggestions"])

RESPONSE_FORMATS = ("simple", "full")


@lru_cache()
def get_engine() -> SuggestionEngine:
    """Engine wired to the configured activity store (built once per process)."""
    settings = get_settings()
    if settings.store_backend == "sql":
        store = SqlActivityStore()
    elif settings.store_backend == "memory":
        store = InMemoryActivityStore(sample_activities())
    else:
        store = MongoActivityStore()

    logger.info(f"Agent suggestion engine using '{settings.store_backend}' store")
    return SuggestionEngine(
        store,
        timeout=settings.store_timeout_seconds,
        rules=load_scoring_rules(settings.rules_path),
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("", summary="Get ranked agent suggestions")
@router.get("/", summary="Get ranked agent suggestions", include_in_schema=False)
async def get_agent_suggestions(
    career_role: Optional[str] = Query(None, alias="careerRole"),
    pointer_no: Optional[str] = Query(None, alias="pointerNo"),
    response_format: str = Query("simple", alias="format"),
    engine: SuggestionEngine = Depends(get_engine),
):
    """
    Rank catalog activities for a career role.

    **Query parameters:**
    - `careerRole`: Career role entered by the counselor (required)
    - `pointerNo`: 2, 3 or 4 (required)
    - `format`: 'simple' (JSON array of activities) or 'full' (scores and rationale)

    **Response:**
    - Activities in rank order, best fit first (at most 20)
    """
    try:
        if response_format not in RESPONSE_FORMATS:
            raise InvalidArgument("format must be 'simple' or 'full'")
        if career_role is None:
            raise InvalidArgument("careerRole is required")

        output = await engine.recommend_detailed(career_role, pointer_no)

        if response_format == "simple":
            return [_serialize_view(view) for view in output.views()]
        return _serialize_output(output)

    except InvalidArgument as e:
        return _error_response(400, e)
    except StoreUnavailable as e:
        return _error_response(503, e)


@router.get("/health", summary="Agent suggestion engine health check")
def health_check():
    """Check if the suggestion engine is operational."""
    return {"status": "ok", "engine": "agent-suggestions", "version": ENGINE_VERSION}


# =============================================================================
# SERIALIZATION
# =============================================================================

def _error_response(status_code: int, error: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": str(error), "type": type(error).__name__},
    )


def _serialize_output(output: SuggestionOutput) -> Dict[str, Any]:
    """Convert SuggestionOutput to a JSON-serializable dict, keeping rank order."""
    return {
        "career_role": output.career_role,
        "pointerNo": int(output.pointer_no),
        "summary": {
            "total_activities": output.total_activities,
            "total_candidates": output.total_candidates,
            "total_suggested": output.total_suggested,
            "processing_time_ms": output.processing_time_ms,
        },
        "suggestions": [_serialize_suggestion(s) for s in output.suggestions],
        "warnings": output.warnings,
        "engine_version": output.engine_version,
    }


def _serialize_view(view: ActivityView) -> Dict[str, Any]:
    """Activity in the catalog's client-facing shape (`_id`, `pointerNo`)."""
    return {
        "_id": view.id,
        "title": view.title,
        "description": view.description,
        "tags": list(view.tags),
        "pointerNo": int(view.pointer_no),
    }


def _serialize_suggestion(ranked: RankedActivity) -> Dict[str, Any]:
    return {
        "rank": ranked.rank,
        **_serialize_view(ActivityView.from_activity(ranked.activity)),
        "composite_score": ranked.composite_score,
        "dimension_scores": ranked.dimension_scores.dict(),
        "matched_keywords": ranked.matched_keywords,
        "why_this_fits": ranked.why_this_fits,
        "admissions_justification": ranked.admissions_justification,
    }
