"""AI research report generation."""

from typing import Optional

from ..database import (
    ResearchReport, SimilarProject, FeasibilityAnalysis,
    FeatureEnhancement, ResearchSource
)
from ..utils import get_logger, ResearchParseError
from .llm import LLMClient, get_llm_client
from .parsing import ParseOk, parse_json_object
from .prompts import RESEARCH_PROMPT

logger = get_logger(__name__)


def _build_report(data: dict) -> ResearchReport:
    """Map the camelCase research JSON onto a ResearchReport."""
    feasibility = data.get("feasibilityAnalysis") or {}

    return ResearchReport(
        similar_projects=[
            SimilarProject(
                name=p.get("name", ""),
                url=p.get("url", ""),
                description=p.get("description", ""),
                strengths=[str(s) for s in p.get("strengths") or []]
            )
            for p in data.get("similarProjects") or []
        ],
        feasibility_analysis=FeasibilityAnalysis(
            market_size=str(feasibility.get("marketSize", "")),
            technical_complexity=str(feasibility.get("technicalComplexity", "")),
            estimated_time_to_mvp=str(feasibility.get("estimatedTimeToMVP", "")),
            challenges=[str(c) for c in feasibility.get("challenges") or []],
            opportunities=[str(o) for o in feasibility.get("opportunities") or []]
        ),
        differentiation_suggestions=[
            str(d) for d in data.get("differentiationSuggestions") or []
        ],
        feature_enhancements=[
            FeatureEnhancement(
                feature=f.get("feature", ""),
                description=f.get("description", ""),
                priority=f.get("priority", "medium"),
                estimated_effort=f.get("estimatedEffort", "")
            )
            for f in data.get("featureEnhancements") or []
        ],
        sources=[
            ResearchSource(
                title=s.get("title", ""),
                url=s.get("url", ""),
                snippet=s.get("snippet", "")
            )
            for s in data.get("sources") or []
        ]
    )


class ResearchGenerator:
    """Generate competitor, feasibility and differentiation research."""

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm or get_llm_client()

    async def generate(
        self,
        title: str,
        description: str = "",
        idea_id: str = ""
    ) -> ResearchReport:
        """
        Research an idea.

        Raises:
            LLMNotConfiguredError: no API key is configured.
            ResearchParseError: the response has no usable JSON object.
        """
        logger.info("Researching idea", title=title)

        response = await self.llm.complete_with_retry(
            RESEARCH_PROMPT.format(
                title=title,
                description=description or "no description"
            ),
            max_tokens=2000,
            temperature=0.7
        )

        result = parse_json_object(response, _build_report)
        if not isinstance(result, ParseOk):
            logger.error("Failed to parse research response", error=result.error)
            raise ResearchParseError("Could not parse AI response")

        report = result.value.model_copy(update={"idea_id": idea_id})
        logger.info(
            "Research completed",
            title=title,
            similar_projects=len(report.similar_projects)
        )
        return report


# Singleton
_research_generator: Optional[ResearchGenerator] = None


def get_research_generator() -> ResearchGenerator:
    """Get research generator singleton."""
    global _research_generator
    if _research_generator is None:
        _research_generator = ResearchGenerator()
    return _research_generator
