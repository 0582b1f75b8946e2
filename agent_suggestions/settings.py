"""
Agent Suggestion Settings

Reads configuration from the environment (and a local .env file).
"""

import json
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

from .logic.constants import DEFAULT_STORE_TIMEOUT_SECONDS
from .logic.contracts import ScoringRules

load_dotenv()

STORE_BACKENDS = ("mongo", "sql", "memory")


class Settings(BaseModel):
    store_backend: str = "mongo"
    store_timeout_seconds: float = DEFAULT_STORE_TIMEOUT_SECONDS
    rules_path: Optional[str] = None


def get_settings() -> Settings:
    """Current settings from AGENT_SUGGESTION_* environment variables."""
    backend = os.getenv("AGENT_SUGGESTION_STORE", "mongo").strip().lower()
    if backend not in STORE_BACKENDS:
        raise RuntimeError(f"AGENT_SUGGESTION_STORE must be one of {', '.join(STORE_BACKENDS)}")

    timeout = os.getenv("AGENT_SUGGESTION_STORE_TIMEOUT")
    return Settings(
        store_backend=backend,
        store_timeout_seconds=float(timeout) if timeout else DEFAULT_STORE_TIMEOUT_SECONDS,
        rules_path=os.getenv("AGENT_SUGGESTION_RULES_PATH") or None,
    )


def load_scoring_rules(path: Optional[str]) -> ScoringRules:
    """
    Load scoring thresholds and vocabularies from a JSON file.

    Keys missing from the file keep their defaults. No path means defaults.
    """
    if not path:
        return ScoringRules()
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return ScoringRules(**data)
