"""
Test the activity store adapters.
"""

import asyncio
from datetime import datetime

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from agent_suggestions.logic import (
    InMemoryActivityStore,
    MongoActivityStore,
    PointerNo,
    SqlActivityStore,
    SuggestionEngine,
)
from agent_suggestions.logic.sample_catalog import sample_activities
from agent_suggestions.models import RecAgentSuggestion


def test_memory_store_filters_by_pointer(make_activity):
    spike = make_activity("Science fair", pointer_no=PointerNo.SPIKE_IN_ONE_AREA)
    lead = make_activity("Lead a club", pointer_no=PointerNo.LEADERSHIP_INITIATIVE)
    spike_two = make_activity("Math olympiad", pointer_no=PointerNo.SPIKE_IN_ONE_AREA)
    store = InMemoryActivityStore([spike, lead, spike_two])

    result = asyncio.run(store.find_by_pointer(PointerNo.SPIKE_IN_ONE_AREA))

    assert result == [spike, spike_two]


def test_sample_catalog_covers_every_pointer():
    pointers = {a.pointer_no for a in sample_activities()}

    assert pointers == set(PointerNo)


def test_sample_catalog_doctor_suggestions():
    engine = SuggestionEngine(InMemoryActivityStore(sample_activities()))

    views = asyncio.run(engine.recommend("Doctor", PointerNo.GLOBAL_SOCIAL_IMPACT))

    assert [v.title for v in views] == ["Volunteer at children's hospital"]


# =============================================================================
# MONGO
# =============================================================================

class FakeCursor:
    def __init__(self, documents):
        self.documents = documents
        self.sort_args = None

    def sort(self, key, direction):
        self.sort_args = (key, direction)
        self.documents = sorted(self.documents, key=lambda d: d[key], reverse=direction < 0)
        return self

    async def to_list(self, length=None):
        return list(self.documents)


class FakeCollection:
    def __init__(self, documents):
        self.documents = documents
        self.queries = []

    def find(self, query):
        self.queries.append(query)
        return FakeCursor([d for d in self.documents if d["pointerNo"] == query["pointerNo"]])


def test_mongo_store_maps_documents():
    created = datetime(2025, 1, 15, 10, 30)
    collection = FakeCollection([
        {"_id": "b2", "pointerNo": 3, "title": "Lead a club", "description": "Weekly meetings",
         "tags": ["leadership"], "source": "EXCEL", "createdAt": created},
        {"_id": "a1", "pointerNo": 3, "title": "Start a newsletter", "description": None,
         "tags": "writing, media ", "source": "SUPERADMIN", "documentUrl": "https://files/doc.pdf",
         "documentName": "doc.pdf"},
        {"_id": "c3", "pointerNo": 2, "title": "Science fair", "description": "", "tags": []},
    ])

    result = asyncio.run(MongoActivityStore(collection).find_by_pointer(PointerNo.LEADERSHIP_INITIATIVE))

    assert collection.queries == [{"pointerNo": 3}]
    assert [a.id for a in result] == ["a1", "b2"]
    assert result[0].description == ""
    assert result[0].tags == ["writing", "media"]
    assert result[0].document_name == "doc.pdf"
    assert result[1].created_at == created
    assert all(a.pointer_no is PointerNo.LEADERSHIP_INITIATIVE for a in result)


# =============================================================================
# SQL
# =============================================================================

def _sqlite_session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine, tables=[RecAgentSuggestion.__table__])
    return sessionmaker(bind=engine, autoflush=False, future=True)


def test_sql_store_reads_in_id_order():
    session_factory = _sqlite_session_factory()
    with session_factory() as session:
        session.add_all([
            RecAgentSuggestion(id=2, pointer_no=4, title="Climate campaign", description="Global",
                               tags=["climate"], source="EXCEL"),
            RecAgentSuggestion(id=1, pointer_no=4, title="Hospital volunteering", description=None,
                               tags=None, source="SUPERADMIN"),
            RecAgentSuggestion(id=3, pointer_no=2, title="Research project", tags=["research"]),
        ])
        session.commit()

    result = asyncio.run(SqlActivityStore(session_factory).find_by_pointer(PointerNo.GLOBAL_SOCIAL_IMPACT))

    assert [a.id for a in result] == ["1", "2"]
    assert result[0].description == ""
    assert result[0].tags == []
    assert result[0].source == "SUPERADMIN"
    assert result[1].tags == ["climate"]
