"""Configuration management for Seedbed."""

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import Optional, List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    supabase_url: Optional[str] = Field(None)
    supabase_key: Optional[str] = Field(None)

    # LLM API
    anthropic_api_key: Optional[str] = Field(None)
    llm_model: str = Field("claude-sonnet-4-20250514")

    # Data source APIs
    github_token: Optional[str] = Field(None)
    http_timeout_seconds: float = Field(30.0)

    # Server
    host: str = Field("127.0.0.1")
    port: int = Field(8000)
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    # Config
    environment: str = Field("development")
    log_level: str = Field("INFO")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Idea lifecycle, in board column order
STATUSES = ["draft", "in-progress", "completed"]

# Words dropped by the fallback keyword extractor
STOP_WORDS = frozenset([
    "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "can", "shall", "to", "of", "in", "for",
    "on", "with", "at", "by", "from", "as", "into", "through", "during",
    "before", "after", "above", "below", "between", "out", "off", "over",
    "under", "again", "further", "then", "once", "and", "but", "or", "nor",
    "not", "so", "yet", "both", "each", "few", "more", "most", "other",
    "some", "such", "no", "only", "own", "same", "than", "too", "very",
    "just", "about", "up", "its", "it", "that", "this", "which", "who",
    "what", "where", "when", "how", "all", "any", "my", "your", "their",
    "our",
    # Domain-generic terms that match everything
    "app", "application", "platform", "tool", "system", "website",
    "web", "helps", "help", "people", "users", "using", "use", "based",
    "built", "like", "make", "makes", "creating", "create",
])

# Saturation signals: (ceiling, weight). Weights sum to 100.
SATURATION_SIGNALS = {
    "github_count": {"ceiling": 10_000, "weight": 30},
    "github_stars": {"ceiling": 50_000, "weight": 20},
    "hacker_news_hits": {"ceiling": 5_000, "weight": 20},
    "npm_count": {"ceiling": 500, "weight": 30},
}

# Score thresholds, highest first
SATURATION_THRESHOLDS = [
    (70, "low"),
    (40, "medium"),
]

# Sample sizes requested from each search provider
SAMPLE_SIZE = 5
TOP_PROJECTS_LIMIT = 3
MAX_PIVOT_SUGGESTIONS = 3
MAX_QUERY_KEYWORDS = 4


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
