from .agent_suggestion import RecAgentSuggestion

__all__ = ["RecAgentSuggestion"]
