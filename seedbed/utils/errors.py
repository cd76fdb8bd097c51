"""Exception types surfaced to API callers."""


class SeedbedError(Exception):
    """Base class for application errors."""


class InvalidIdeaError(SeedbedError):
    """Raised when an idea is missing required fields."""


class LLMNotConfiguredError(SeedbedError):
    """Raised when a feature needs the LLM but no API key is set."""


class LLMResponseError(SeedbedError):
    """Raised when the LLM returns nothing usable."""


class ResearchParseError(LLMResponseError):
    """Raised when a research response cannot be parsed."""


class DatabaseNotConfiguredError(SeedbedError):
    """Raised when the remote store is used without credentials."""


class IdeaNotFoundError(SeedbedError):
    """Raised when an idea id does not match a stored idea."""
