"""Database module."""

from .models import (
    Idea, IdeaCreate, IdeaUpdate, IdeaStats,
    Priority, Status, SaturationLevel,
    GitHubRepo, HNStory, NpmPackage,
    GitHubEvidence, HackerNewsEvidence, NpmEvidence, Evidence,
    SearchQueries, RealityCheckReport,
    ResearchReport, SimilarProject, FeasibilityAnalysis,
    FeatureEnhancement, ResearchSource,
    Ok, Err, Result, NOT_FOUND, BACKEND_ERROR, INVALID,
    utcnow, as_utc
)
from .queries import Database, get_database, row_to_idea, idea_to_row
from .repository import IdeaRepository, get_repository

__all__ = [
    "Idea", "IdeaCreate", "IdeaUpdate", "IdeaStats",
    "Priority", "Status", "SaturationLevel",
    "GitHubRepo", "HNStory", "NpmPackage",
    "GitHubEvidence", "HackerNewsEvidence", "NpmEvidence", "Evidence",
    "SearchQueries", "RealityCheckReport",
    "ResearchReport", "SimilarProject", "FeasibilityAnalysis",
    "FeatureEnhancement", "ResearchSource",
    "Ok", "Err", "Result", "NOT_FOUND", "BACKEND_ERROR", "INVALID",
    "utcnow", "as_utc",
    "Database", "get_database", "row_to_idea", "idea_to_row",
    "IdeaRepository", "get_repository"
]
