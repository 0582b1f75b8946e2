"""
Engine Exceptions

Raised by the suggestion pipeline and translated to HTTP statuses in routes.py.
"""


class AgentSuggestionError(Exception):
    """Base exception for suggestion engine errors."""
    pass


class InvalidArgument(AgentSuggestionError, ValueError):
    """Raised when the career role or pointer number is missing or invalid."""
    pass


class StoreUnavailable(AgentSuggestionError):
    """Raised when the activity catalog cannot be read in time."""
    pass
