"""
Suggestion Engine Constants

Defines the domain knowledge table, scoring vocabularies, thresholds and enums
used by the agent suggestion engine.
All values are deterministic with no AI/ML components.
"""

from enum import IntEnum
from types import MappingProxyType
from typing import FrozenSet, Mapping, Tuple


# =============================================================================
# POINTERS
# =============================================================================

class PointerNo(IntEnum):
    """Evaluation pointers served by the suggestion engine."""
    SPIKE_IN_ONE_AREA = 2
    LEADERSHIP_INITIATIVE = 3
    GLOBAL_SOCIAL_IMPACT = 4


# =============================================================================
# DOMAIN KNOWLEDGE TABLE
# =============================================================================

# Career root term -> related concept keywords.
# Keys are single tokens longer than MAX_DISCARDED_TOKEN_LENGTH characters.
_DOMAIN_KNOWLEDGE = {
    "doctor": ("medical", "medicine", "clinical", "patient", "hospital", "healthcare", "health", "biology", "anatomy"),
    "physician": ("medical", "medicine", "clinical", "patient", "hospital", "healthcare", "health"),
    "surgeon": ("medical", "surgery", "clinical", "patient", "hospital", "anatomy"),
    "nurse": ("nursing", "patient", "clinical", "hospital", "healthcare", "care"),
    "dentist": ("dental", "oral health", "clinical", "patient", "healthcare"),
    "pharmacist": ("pharmacy", "pharmaceutical", "chemistry", "medicine", "drug"),
    "psychologist": ("psychology", "mental health", "counseling", "behavior", "wellbeing"),
    "engineer": ("engineering", "design", "robotics", "mechanics", "prototype", "stem"),
    "software": ("programming", "coding", "computer", "technology", "developer", "hackathon", "app"),
    "developer": ("programming", "coding", "software", "computer", "technology", "app", "website"),
    "programmer": ("programming", "coding", "software", "computer", "algorithm"),
    "data": ("data science", "analytics", "statistics", "machine learning", "python"),
    "scientist": ("science", "research", "laboratory", "experiment", "stem"),
    "researcher": ("research", "laboratory", "experiment", "publication", "science"),
    "lawyer": ("legal", "justice", "debate", "court", "policy", "mock trial", "rights"),
    "attorney": ("legal", "justice", "court", "debate", "mock trial"),
    "judge": ("legal", "justice", "court", "law"),
    "entrepreneur": ("business", "startup", "venture", "company", "enterprise", "innovation"),
    "business": ("entrepreneurship", "startup", "management", "finance", "marketing", "commerce"),
    "banker": ("banking", "finance", "investment", "economics", "financial"),
    "finance": ("financial", "banking", "investment", "economics", "accounting", "stock"),
    "economist": ("economics", "policy", "finance", "statistics", "market"),
    "accountant": ("accounting", "finance", "audit", "financial", "tax"),
    "architect": ("architecture", "design", "urban", "building", "drawing"),
    "artist": ("creative", "painting", "drawing", "visual", "exhibition", "design"),
    "designer": ("design", "creative", "visual", "graphic", "fashion", "portfolio"),
    "musician": ("music", "orchestra", "band", "composition", "performance", "choir"),
    "writer": ("writing", "literature", "journalism", "poetry", "creative writing", "publication"),
    "author": ("writing", "literature", "publication", "novel", "poetry"),
    "journalist": ("journalism", "media", "reporting", "newspaper", "writing", "broadcast"),
    "teacher": ("education", "teaching", "tutoring", "mentoring", "classroom", "school"),
    "professor": ("education", "research", "teaching", "academic", "publication"),
    "politician": ("policy", "government", "public service", "debate", "model united nations"),
    "diplomat": ("international relations", "diplomacy", "model united nations", "policy", "global"),
    "environmentalist": ("environment", "climate", "sustainability", "conservation", "ecology"),
    "environmental": ("environment", "climate", "sustainability", "conservation", "ecology"),
    "climate": ("environment", "sustainability", "renewable", "conservation", "ecology"),
    "athlete": ("sports", "athletics", "fitness", "training", "competition", "team"),
    "pilot": ("aviation", "flight", "aerospace", "aircraft"),
    "astronaut": ("space", "aerospace", "astronomy", "physics", "aviation"),
    "biologist": ("biology", "genetics", "ecology", "laboratory", "research"),
    "chemist": ("chemistry", "laboratory", "experiment", "research"),
    "physicist": ("physics", "astronomy", "mathematics", "research"),
    "mathematician": ("mathematics", "math", "olympiad", "statistics", "algorithm"),
    "veterinarian": ("animal", "veterinary", "wildlife", "clinical", "biology"),
    "filmmaker": ("film", "cinema", "video", "documentary", "media", "storytelling"),
    "marketing": ("marketing", "branding", "advertising", "social media", "business"),
    "social": ("community", "nonprofit", "advocacy", "outreach", "volunteer"),
}

DOMAIN_KNOWLEDGE: Mapping[str, FrozenSet[str]] = MappingProxyType({
    root: frozenset(concepts) for root, concepts in _DOMAIN_KNOWLEDGE.items()
})

# Tokens this short cause false substring-like matches downstream
MAX_DISCARDED_TOKEN_LENGTH = 3

STOP_WORDS: FrozenSet[str] = frozenset({
    "want", "wants", "become", "becoming", "would", "like", "interested",
    "interest", "career", "future", "some", "that", "this", "with", "from",
    "into", "about", "their", "they", "them", "very", "much", "just", "also",
    "being", "have", "maybe", "someday", "dream", "goal",
})


# =============================================================================
# SCORING VOCABULARIES
# =============================================================================

FOUNDER_TERMS: Tuple[str, ...] = ("found", "founder", "start", "create", "creator", "establish", "launch", "initiate")
LEADER_TERMS: Tuple[str, ...] = (
    "lead", "leader", "manage", "manager", "direct", "director", "organize", "organise", "organizer",
    "coordinate", "coordinator", "head",
)
CONTRIBUTOR_TERMS: Tuple[str, ...] = ("participate", "join", "volunteer", "assist", "help", "support")

OWNERSHIP_VERBS: Tuple[str, ...] = (
    "design", "develop", "build", "create", "own", "drive", "scale", "grow", "implement",
)

GLOBAL_TERMS: Tuple[str, ...] = ("global", "international", "worldwide", "world")
NATIONAL_TERMS: Tuple[str, ...] = ("national", "nationwide", "country", "countrywide")
REGIONAL_TERMS: Tuple[str, ...] = ("regional", "region", "state", "province", "district")
LOCAL_TERMS: Tuple[str, ...] = ("local", "community", "communities", "neighborhood", "neighbourhood")

SPIKE_MARKERS: Tuple[str, ...] = (
    "research", "publication", "award", "competition", "innovation", "original", "unique", "first",
)


# =============================================================================
# DIMENSION THRESHOLDS
# =============================================================================

# (minimum count, score) checked top-to-bottom, first match wins
CAREER_ALIGNMENT_TITLE_SCORE = 5
CAREER_ALIGNMENT_THRESHOLDS: Tuple[Tuple[int, int], ...] = ((3, 4), (2, 3), (1, 2), (0, 1))
OWNERSHIP_THRESHOLDS: Tuple[Tuple[int, int], ...] = ((3, 5), (2, 4), (1, 3), (0, 2))
SPIKE_THRESHOLDS: Tuple[Tuple[int, int], ...] = ((3, 5), (2, 4), (1, 3), (0, 2))

LEADERSHIP_BUCKET_SCORES: Tuple[int, ...] = (5, 4, 2)
LEADERSHIP_DEFAULT_SCORE = 3
IMPACT_BUCKET_SCORES: Tuple[int, ...] = (5, 4, 3, 2)
IMPACT_DEFAULT_SCORE = 3

MIN_DIMENSION_SCORE = 0
MAX_DIMENSION_SCORE = 5


# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

MAX_SUGGESTIONS = 20

# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_STORE_TIMEOUT_SECONDS = 5.0
ENGINE_VERSION = "1.0.0"
