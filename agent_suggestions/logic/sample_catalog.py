"""
Sample Catalog

A small built-in catalog used by the in-memory store when no database is
configured (local development and demos).
"""

from typing import List

from .constants import PointerNo
from .contracts import ActivityRecord


_SAMPLE_DATA = [
    (PointerNo.SPIKE_IN_ONE_AREA, "Independent biology research project",
     "Design and implement an original laboratory experiment and submit the results for publication",
     ["research", "biology", "science"]),
    (PointerNo.SPIKE_IN_ONE_AREA, "National mathematics olympiad",
     "Compete in the national olympiad and train for international competition rounds",
     ["mathematics", "competition"]),
    (PointerNo.SPIKE_IN_ONE_AREA, "Build a coding portfolio",
     "Develop and build three software apps and publish them on an app store",
     ["programming", "coding", "technology"]),
    (PointerNo.SPIKE_IN_ONE_AREA, "Shadow a doctor at a clinic",
     "Observe clinical practice and patient care at a local clinic",
     ["medical", "healthcare"]),
    (PointerNo.LEADERSHIP_INITIATIVE, "Found a school debate society",
     "Establish and lead a debate club, coordinate tournaments across the district",
     ["debate", "leadership", "policy"]),
    (PointerNo.LEADERSHIP_INITIATIVE, "Lead a student hackathon",
     "Organize a regional hackathon and manage a team of student volunteers",
     ["hackathon", "technology", "coding"]),
    (PointerNo.LEADERSHIP_INITIATIVE, "Start a health awareness club",
     "Launch a community club that runs medical awareness camps with local hospitals",
     ["health", "community"]),
    (PointerNo.GLOBAL_SOCIAL_IMPACT, "Volunteer at children's hospital",
     "Medical clinical patient care assistance",
     ["healthcare", "volunteer"]),
    (PointerNo.GLOBAL_SOCIAL_IMPACT, "Climate action campaign",
     "Create and scale an international sustainability campaign with partner schools worldwide",
     ["climate", "environment", "sustainability"]),
    (PointerNo.GLOBAL_SOCIAL_IMPACT, "Teach coding to underserved students",
     "Design a free coding curriculum and grow it to schools across the state",
     ["education", "coding", "teaching"]),
]


def sample_activities() -> List[ActivityRecord]:
    """Fresh list of the sample activities, ids `sample-1`, `sample-2`, ..."""
    return [
        ActivityRecord(
            id=f"sample-{i}",
            pointer_no=pointer,
            title=title,
            description=description,
            tags=tags,
            source="SUPERADMIN",
        )
        for i, (pointer, title, description, tags) in enumerate(_SAMPLE_DATA, start=1)
    ]
