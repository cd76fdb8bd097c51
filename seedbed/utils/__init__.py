"""Utility modules."""

from .config import (
    get_settings,
    Settings,
    STATUSES,
    STOP_WORDS,
    SATURATION_SIGNALS,
    SATURATION_THRESHOLDS,
    SAMPLE_SIZE,
    TOP_PROJECTS_LIMIT,
    MAX_PIVOT_SUGGESTIONS,
    MAX_QUERY_KEYWORDS
)
from .errors import (
    SeedbedError,
    InvalidIdeaError,
    IdeaNotFoundError,
    LLMNotConfiguredError,
    LLMResponseError,
    ResearchParseError,
    DatabaseNotConfiguredError
)
from .logging import setup_logging, get_logger
from .rate_limiting import RateLimiter, get_rate_limiter, with_retry

__all__ = [
    # Settings
    "get_settings",
    "Settings",
    # Constants
    "STATUSES",
    "STOP_WORDS",
    "SATURATION_SIGNALS",
    "SATURATION_THRESHOLDS",
    "SAMPLE_SIZE",
    "TOP_PROJECTS_LIMIT",
    "MAX_PIVOT_SUGGESTIONS",
    "MAX_QUERY_KEYWORDS",
    # Errors
    "SeedbedError",
    "InvalidIdeaError",
    "IdeaNotFoundError",
    "LLMNotConfiguredError",
    "LLMResponseError",
    "ResearchParseError",
    "DatabaseNotConfiguredError",
    # Logging
    "setup_logging",
    "get_logger",
    # Rate limiting
    "RateLimiter",
    "get_rate_limiter",
    "with_retry"
]
