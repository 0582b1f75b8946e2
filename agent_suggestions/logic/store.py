"""
Activity Store Adapters

Read-only access to the agent suggestion catalog, one pointer at a time.

This is a pure READ + TRANSFORM layer:
- NO scoring logic
- NO DB writes
- Records come back in a stable order (insertion / primary key)
"""

import asyncio
from typing import Any, Callable, Dict, Iterable, List, Optional, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from .constants import PointerNo
from .contracts import ActivityRecord


class ActivityStore(Protocol):
    """Anything that can list the catalog activities for a pointer."""

    async def find_by_pointer(self, pointer_no: PointerNo) -> Sequence[ActivityRecord]:
        ...


class InMemoryActivityStore:
    """List-backed store, keeps insertion order."""

    def __init__(self, activities: Optional[Iterable[ActivityRecord]] = None):
        self._activities: List[ActivityRecord] = list(activities or [])

    async def find_by_pointer(self, pointer_no: PointerNo) -> List[ActivityRecord]:
        return [a for a in self._activities if a.pointer_no == pointer_no]


class MongoActivityStore:
    """Reads the `agentsuggestions` collection through motor."""

    def __init__(self, collection: Any = None):
        if collection is None:
            from db_mongo import agent_suggestions_collection
            collection = agent_suggestions_collection
        self.collection = collection

    async def find_by_pointer(self, pointer_no: PointerNo) -> List[ActivityRecord]:
        cursor = self.collection.find({"pointerNo": int(pointer_no)}).sort("_id", 1)
        documents = await cursor.to_list(length=None)
        return [_document_to_activity(doc) for doc in documents]


class SqlActivityStore:
    """Reads `rec_agent_suggestions` via SQLAlchemy, off the event loop."""

    def __init__(self, session_factory: Optional[Callable[[], Session]] = None):
        if session_factory is None:
            from db import SessionLocal
            session_factory = SessionLocal
        self.session_factory = session_factory

    async def find_by_pointer(self, pointer_no: PointerNo) -> List[ActivityRecord]:
        return await asyncio.to_thread(self._fetch, pointer_no)

    def _fetch(self, pointer_no: PointerNo) -> List[ActivityRecord]:
        from ..models import RecAgentSuggestion

        session = self.session_factory()
        try:
            rows = session.execute(
                select(RecAgentSuggestion)
                .where(RecAgentSuggestion.pointer_no == int(pointer_no))
                .order_by(RecAgentSuggestion.id)
            ).scalars().all()
            return [_row_to_activity(row) for row in rows]
        finally:
            session.close()


# =============================================================================
# TRANSFORMS
# =============================================================================

def _document_to_activity(doc: Dict[str, Any]) -> ActivityRecord:
    """Convert a Mongo document (camelCase fields) to an ActivityRecord."""
    return ActivityRecord(
        id=str(doc["_id"]),
        pointer_no=PointerNo(int(doc["pointerNo"])),
        title=doc.get("title") or "",
        description=doc.get("description") or "",
        tags=_clean_tags(doc.get("tags")),
        source=doc.get("source") or "EXCEL",
        document_url=doc.get("documentUrl"),
        document_name=doc.get("documentName"),
        created_at=doc.get("createdAt"),
    )


def _row_to_activity(row: Any) -> ActivityRecord:
    """Convert a RecAgentSuggestion row to an ActivityRecord."""
    return ActivityRecord(
        id=str(row.id),
        pointer_no=PointerNo(row.pointer_no),
        title=row.title or "",
        description=row.description or "",
        tags=_clean_tags(row.tags),
        source=row.source or "EXCEL",
        document_url=row.document_url,
        document_name=row.document_name,
        created_at=row.created_at,
    )


def _clean_tags(raw: Any) -> List[str]:
    """Tags may be stored as a list or a comma separated string."""
    if not raw:
        return []
    if isinstance(raw, str):
        raw = raw.split(",")
    return [str(t).strip() for t in raw if str(t).strip()]
