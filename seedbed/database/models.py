"""Database models and Pydantic schemas."""

from datetime import datetime, timezone
from typing import Optional, List, Generic, TypeVar, Union
from uuid import UUID, uuid4
from dataclasses import dataclass
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


def utcnow() -> datetime:
    """Timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Normalize a timestamp to aware UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Priority(str, Enum):
    """Priority of an idea."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Status(str, Enum):
    """Lifecycle status of an idea (kanban column)."""
    DRAFT = "draft"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


class SaturationLevel(str, Enum):
    """Market saturation bucket derived from the opportunity score."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


# Evidence Models
class GitHubRepo(BaseModel):
    """A repository sampled from GitHub search."""
    model_config = ConfigDict(frozen=True)

    name: str
    full_name: str = ""
    url: str
    description: str = ""
    stars: int = 0
    language: Optional[str] = None
    updated_at: Optional[str] = None


class HNStory(BaseModel):
    """A story sampled from Hacker News search."""
    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    points: int = 0
    num_comments: int = 0
    created_at: Optional[str] = None


class NpmPackage(BaseModel):
    """A package sampled from npm registry search."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    version: str = ""
    url: str


class GitHubEvidence(BaseModel):
    """Code-host evidence. All zero when the lookup failed."""
    model_config = ConfigDict(frozen=True)

    total_count: int = Field(default=0, ge=0)
    max_stars: int = Field(default=0, ge=0)
    repos: List[GitHubRepo] = []


class HackerNewsEvidence(BaseModel):
    """Discussion-forum evidence."""
    model_config = ConfigDict(frozen=True)

    total_hits: int = Field(default=0, ge=0)
    stories: List[HNStory] = []


class NpmEvidence(BaseModel):
    """Package-registry evidence."""
    model_config = ConfigDict(frozen=True)

    total_count: int = Field(default=0, ge=0)
    packages: List[NpmPackage] = []


class Evidence(BaseModel):
    """The three raw evidence bundles feeding the opportunity score."""
    model_config = ConfigDict(frozen=True)

    github: GitHubEvidence = Field(default_factory=GitHubEvidence)
    hacker_news: HackerNewsEvidence = Field(default_factory=HackerNewsEvidence)
    npm: NpmEvidence = Field(default_factory=NpmEvidence)


class SearchQueries(BaseModel):
    """Per-platform search strings used for a scan."""
    github: str
    hn: str
    npm: str


# Report Models
class RealityCheckReport(BaseModel):
    """Scored result of one market saturation scan."""
    id: UUID = Field(default_factory=uuid4)
    idea_id: str = ""
    score: int = Field(ge=0, le=100)
    saturation: SaturationLevel
    evidence: Evidence
    top_projects: List[GitHubRepo] = []
    pivot_suggestions: List[str] = []
    queries: Optional[SearchQueries] = None
    generated_at: datetime = Field(default_factory=utcnow)


class SimilarProject(BaseModel):
    name: str = ""
    url: str = ""
    description: str = ""
    strengths: List[str] = []


class FeasibilityAnalysis(BaseModel):
    market_size: str = ""
    technical_complexity: str = ""
    estimated_time_to_mvp: str = ""
    challenges: List[str] = []
    opportunities: List[str] = []


class FeatureEnhancement(BaseModel):
    feature: str = ""
    description: str = ""
    priority: str = "medium"
    estimated_effort: str = ""


class ResearchSource(BaseModel):
    title: str = ""
    url: str = ""
    snippet: str = ""


class ResearchReport(BaseModel):
    """AI-generated research on an idea."""
    id: UUID = Field(default_factory=uuid4)
    idea_id: str = ""
    similar_projects: List[SimilarProject] = []
    feasibility_analysis: FeasibilityAnalysis = Field(default_factory=FeasibilityAnalysis)
    differentiation_suggestions: List[str] = []
    feature_enhancements: List[FeatureEnhancement] = []
    sources: List[ResearchSource] = []
    generated_at: datetime = Field(default_factory=utcnow)


# Idea Models
class IdeaCreate(BaseModel):
    """Schema for creating an idea."""
    title: str
    description: str = ""
    priority: Priority = Priority.MEDIUM
    status: Status = Status.DRAFT
    github_repo: Optional[str] = None
    research_report: Optional[ResearchReport] = None


class IdeaUpdate(BaseModel):
    """Partial update for an idea. Unset fields are left alone."""
    title: Optional[str] = None
    description: Optional[str] = None
    priority: Optional[Priority] = None
    status: Optional[Status] = None
    github_repo: Optional[str] = None
    research_report: Optional[ResearchReport] = None
    reality_check: Optional[RealityCheckReport] = None

    # Validators only run on fields the client sent, so these reject an
    # explicit null without affecting omitted fields.
    @field_validator("title", "priority", "status")
    @classmethod
    def reject_null(cls, value, info):
        if value is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return value

    @field_validator("title")
    @classmethod
    def reject_blank_title(cls, value):
        if value is not None and not value.strip():
            raise ValueError("Title is required")
        return value

    @field_validator("description")
    @classmethod
    def null_description_is_empty(cls, value):
        return "" if value is None else value


class Idea(IdeaCreate):
    """Complete idea with database fields."""
    id: UUID = Field(default_factory=uuid4)
    reality_check: Optional[RealityCheckReport] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class IdeaStats(BaseModel):
    """Board statistics."""
    total: int = 0
    drafts: int = 0
    in_progress: int = 0
    completed: int = 0
    created_this_week: int = 0


# Command results
T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A mutation that the remote store accepted."""
    value: T

    @property
    def ok(self) -> bool:
        return True


NOT_FOUND = "not_found"
BACKEND_ERROR = "backend_error"
INVALID = "invalid"


@dataclass(frozen=True)
class Err:
    """A mutation that was rejected or failed remotely."""
    reason: str
    code: str = BACKEND_ERROR

    @property
    def not_found(self) -> bool:
        return self.code == NOT_FOUND

    @property
    def invalid(self) -> bool:
        return self.code == INVALID

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]
