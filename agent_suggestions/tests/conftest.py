import os
import sys

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from agent_suggestions.logic import ActivityRecord, PointerNo


@pytest.fixture
def make_activity():
    """Factory for catalog activities with sequential ids."""
    counter = {"next": 1}

    def _make(title, description="", tags=None, pointer_no=PointerNo.GLOBAL_SOCIAL_IMPACT, id=None):
        activity_id = id or f"act-{counter['next']}"
        counter["next"] += 1
        return ActivityRecord(
            id=activity_id,
            pointer_no=pointer_no,
            title=title,
            description=description,
            tags=tags or [],
        )

    return _make
