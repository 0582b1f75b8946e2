"""
Agent Suggestion Engine

Main orchestrator that combines all stages into a single pipeline.
This is the primary entry point for generating activity suggestions.
"""

import asyncio
import logging
import time
from typing import Any, Dict, List, Optional, Sequence

from .aggregator import batch_score, score_activity
from .candidate_generator import generate_candidates, build_keyword_patterns
from .constants import PointerNo, DEFAULT_STORE_TIMEOUT_SECONDS, ENGINE_VERSION, MAX_SUGGESTIONS
from .contracts import ActivityRecord, ActivityView, ScoringRules, SuggestionOutput
from .dimension_scorers import DEFAULT_RULE_TABLES, compile_rules
from .errors import InvalidArgument, StoreUnavailable
from .intent import interpret_intent
from .ranker import rank_activities
from .store import ActivityStore

logger = logging.getLogger(__name__)


def validate_pointer(pointer_no: Any) -> PointerNo:
    """
    Coerce a pointer number (enum, int or numeric string) to PointerNo.

    Raises:
        InvalidArgument: If it is missing or not one of 2, 3, 4
    """
    if isinstance(pointer_no, PointerNo):
        return pointer_no
    if isinstance(pointer_no, bool) or pointer_no is None:
        raise InvalidArgument("pointerNo is required (2, 3, or 4)")
    try:
        return PointerNo(int(str(pointer_no).strip()))
    except ValueError:
        raise InvalidArgument("Invalid pointerNo. Must be 2, 3, or 4")


class SuggestionEngine:
    """
    Ranks catalog activities for a career role and pointer.

    Pipeline flow:
    1. Validation - pointer and career role, before any I/O
    2. Catalog Fetch - all activities for the pointer (one read, with timeout)
    3. Intent Expansion - career role -> keyword set
    4. Candidate Retrieval - whole-word keyword match, logical OR
    5. Scoring - five dimensions, composite, rationale
    6. Ranking - stable sort by composite, top 20, 1-based ranks
    """

    def __init__(
        self,
        store: ActivityStore,
        timeout: float = DEFAULT_STORE_TIMEOUT_SECONDS,
        rules: Optional[ScoringRules] = None
    ):
        """
        Args:
            store: Catalog to read activities from
            timeout: Seconds allowed for the catalog read
            rules: Optional scoring thresholds/vocabularies, defaults otherwise
        """
        self.store = store
        self.timeout = timeout
        self.tables = DEFAULT_RULE_TABLES if rules is None else compile_rules(rules)
        self.version = ENGINE_VERSION

    async def recommend(self, career_text: str, pointer_no: Any) -> List[ActivityView]:
        """
        Ranked public views of the best-fitting activities, best first.

        Raises:
            InvalidArgument: Blank career role or unknown pointer
            StoreUnavailable: Catalog read failed or timed out
        """
        output = await self.recommend_detailed(career_text, pointer_no)
        return output.views()

    async def recommend_detailed(self, career_text: str, pointer_no: Any) -> SuggestionOutput:
        """
        Same pipeline as recommend(), keeping scores and rationale.

        Returns:
            SuggestionOutput with ranked activities and summary statistics
        """
        pointer = validate_pointer(pointer_no)
        intent = interpret_intent(career_text)

        start_time = time.perf_counter()
        logger.info(f"🚀 Agent suggestions for '{intent.normalized_phrase}' (pointer {int(pointer)})")

        activities = await self._fetch(pointer)
        if not activities:
            logger.warning(f"⚠️ No catalog activities for pointer {int(pointer)}")
            return SuggestionOutput(
                career_role=career_text,
                pointer_no=pointer,
                processing_time_ms=_elapsed_ms(start_time),
                warnings=["No activities found for this pointer."],
            )

        patterns = build_keyword_patterns(intent)
        candidates = generate_candidates(intent, activities, patterns)
        logger.info(f"📊 {len(candidates)} candidates from {len(activities)} activities ({len(intent.keywords)} keywords)")

        if not candidates:
            logger.warning(f"⚠️ No activities matched '{intent.normalized_phrase}'")
            return SuggestionOutput(
                career_role=career_text,
                pointer_no=pointer,
                total_activities=len(activities),
                processing_time_ms=_elapsed_ms(start_time),
                warnings=["No activities matched the career role."],
            )

        scored = batch_score(candidates, career_text, intent, self.tables)
        ranked = rank_activities(scored, MAX_SUGGESTIONS)

        output = SuggestionOutput(
            career_role=career_text,
            pointer_no=pointer,
            suggestions=ranked,
            total_activities=len(activities),
            total_candidates=len(candidates),
            total_suggested=len(ranked),
            processing_time_ms=_elapsed_ms(start_time),
        )
        logger.info(f"✅ Returning {output.total_suggested} suggestions in {output.processing_time_ms}ms")
        return output

    def score_single_activity(self, activity: ActivityRecord, career_text: str) -> Dict[str, Any]:
        """
        Score one catalog activity for a career role.

        Useful for showing a counselor why a specific activity ranks where it does.
        No candidate filtering is applied.

        Returns:
            Dict with scoring details
        """
        intent = interpret_intent(career_text)
        scored = score_activity(activity, career_text, intent, self.tables)
        return {
            "id": activity.id,
            "title": activity.title,
            "composite_score": scored.composite_score,
            "dimension_scores": scored.dimension_scores.dict(),
            "matched_keywords": scored.matched_keywords,
            "is_candidate": bool(scored.matched_keywords),
            "why_this_fits": scored.why_this_fits,
            "admissions_justification": scored.admissions_justification,
        }

    async def _fetch(self, pointer: PointerNo) -> Sequence[ActivityRecord]:
        """Single catalog read; failures and timeouts become StoreUnavailable."""
        try:
            return await asyncio.wait_for(self.store.find_by_pointer(pointer), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error(f"Activity store timed out after {self.timeout}s for pointer {int(pointer)}")
            raise StoreUnavailable(f"Activity catalog did not respond within {self.timeout}s") from e
        except Exception as e:
            logger.error(f"Activity store failed for pointer {int(pointer)}: {e}")
            raise StoreUnavailable(f"Activity catalog unavailable: {e}") from e


def _elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


# Convenience function for simple usage
async def get_agent_suggestions(
    career_text: str,
    pointer_no: Any,
    store: ActivityStore,
    timeout: float = DEFAULT_STORE_TIMEOUT_SECONDS
) -> List[ActivityView]:
    """
    Convenience function to get suggestions.

    Args:
        career_text: Career role entered by the counselor
        pointer_no: Pointer number (2, 3, or 4)
        store: Activity catalog
        timeout: Seconds allowed for the catalog read

    Returns:
        Ranked list of ActivityView
    """
    engine = SuggestionEngine(store, timeout=timeout)
    return await engine.recommend(career_text, pointer_no)
