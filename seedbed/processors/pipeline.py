"""Reality check pipeline: queries, evidence fan-out, scoring, pivots."""

from typing import Optional
from uuid import UUID

from ..collectors import CollectorRegistry, create_registry
from ..database import RealityCheckReport, IdeaRepository, IdeaUpdate
from ..reasoning import QueryExtractor, PivotSuggester
from ..utils import get_logger, InvalidIdeaError, IdeaNotFoundError, SeedbedError
from .saturation import compute_score, rank_top_artifacts

logger = get_logger(__name__)


class RealityCheckPipeline:
    """Scan public registries for projects similar to an idea and score the gap."""

    def __init__(
        self,
        registry: Optional[CollectorRegistry] = None,
        query_extractor: Optional[QueryExtractor] = None,
        pivot_suggester: Optional[PivotSuggester] = None
    ):
        self.registry = registry or create_registry()
        self.query_extractor = query_extractor or QueryExtractor()
        self.pivot_suggester = pivot_suggester or PivotSuggester()

    async def run(
        self,
        title: str,
        description: Optional[str] = None,
        idea_id: str = ""
    ) -> RealityCheckReport:
        """
        Run one scan and return a complete report.

        Provider failures only zero that provider's evidence; a failed
        pivot request only empties the suggestions.

        Raises:
            InvalidIdeaError: the title is missing or blank.
        """
        title = (title or "").strip()
        if not title:
            raise InvalidIdeaError("Title is required")
        description = (description or "").strip()

        logger.info("Reality check started", title=title, idea_id=idea_id)

        # Stage 1: Search queries
        queries = await self.query_extractor.extract(title, description)

        # Stage 2: Evidence fan-out
        evidence = await self.registry.search_all(queries)

        # Stage 3: Score
        score, saturation = compute_score(evidence)
        top_projects = rank_top_artifacts(evidence.github.repos)

        # Stage 4: Pivots
        pivot_suggestions = await self.pivot_suggester.suggest(
            title, description, top_projects
        )

        report = RealityCheckReport(
            idea_id=idea_id,
            score=score,
            saturation=saturation,
            evidence=evidence,
            top_projects=top_projects,
            pivot_suggestions=pivot_suggestions,
            queries=queries
        )

        logger.info(
            "Reality check complete",
            title=title,
            score=score,
            saturation=saturation.value
        )
        return report

    async def run_for_idea(
        self,
        repository: IdeaRepository,
        idea_id: UUID
    ) -> RealityCheckReport:
        """
        Scan a stored idea and save the report onto it, replacing any
        previous one.

        Raises:
            IdeaNotFoundError: the idea does not exist, or was deleted
                before the report was saved.
            InvalidIdeaError: the idea has no title.
            SeedbedError: the report could not be saved.
        """
        idea = await repository.get(idea_id)
        if idea is None:
            raise IdeaNotFoundError(f"Idea {idea_id} not found")

        report = await self.run(idea.title, idea.description, idea_id=str(idea.id))

        result = await repository.update(idea.id, IdeaUpdate(reality_check=report))
        if not result.ok:
            if result.not_found:
                raise IdeaNotFoundError(f"Idea {idea_id} not found")
            raise SeedbedError(f"Failed to save reality check: {result.reason}")

        return report


# Singleton
_pipeline: Optional[RealityCheckPipeline] = None


def get_pipeline() -> RealityCheckPipeline:
    """Get reality check pipeline singleton."""
    global _pipeline
    if _pipeline is None:
        _pipeline = RealityCheckPipeline()
    return _pipeline
