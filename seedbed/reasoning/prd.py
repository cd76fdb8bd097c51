"""Product requirements document generation."""

from typing import Optional
import re

from ..database import ResearchReport
from ..utils import get_logger, LLMResponseError
from .llm import LLMClient, get_llm_client
from .parsing import THINK_BLOCK
from .prompts import PRD_SYSTEM_PROMPT, PRD_USER_PROMPT, RESEARCH_CONTEXT_TEMPLATE

logger = get_logger(__name__)

PREAMBLE = re.compile(r"^(Here's|Here is|I've created|This is).*?:\s*", re.IGNORECASE)
TRAILING_RULE = re.compile(r"---+\s*$")


def _join(items) -> str:
    return ", ".join(items) or "N/A"


def build_research_context(research: Optional[ResearchReport]) -> str:
    """Summarize research findings for the PRD prompt."""
    if research is None:
        return ""

    feasibility = research.feasibility_analysis
    return RESEARCH_CONTEXT_TEMPLATE.format(
        similar_projects=_join(p.name for p in research.similar_projects),
        market_size=feasibility.market_size or "N/A",
        technical_complexity=feasibility.technical_complexity or "N/A",
        time_to_mvp=feasibility.estimated_time_to_mvp or "N/A",
        challenges=_join(feasibility.challenges),
        opportunities=_join(feasibility.opportunities),
        differentiation=_join(research.differentiation_suggestions),
        features=_join(f.feature for f in research.feature_enhancements)
    )


def clean_document(text: str) -> str:
    """Drop reasoning blocks, chatty preambles and trailing rules."""
    text = THINK_BLOCK.sub("", text)
    text = text.lstrip()
    text = PREAMBLE.sub("", text, count=1)
    text = TRAILING_RULE.sub("", text)
    return text.strip()


class PRDGenerator:
    """Generate a markdown PRD from an idea and optional research."""

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm or get_llm_client()

    async def generate(
        self,
        title: str,
        research: Optional[ResearchReport] = None
    ) -> str:
        """
        Write a PRD.

        Raises:
            LLMNotConfiguredError: no API key is configured.
            LLMResponseError: the model returned an empty document.
        """
        logger.info("Generating PRD", title=title, with_research=research is not None)

        response = await self.llm.complete_with_retry(
            PRD_USER_PROMPT.format(
                title=title,
                research_context=build_research_context(research)
            ),
            system=PRD_SYSTEM_PROMPT,
            max_tokens=2000,
            temperature=0.7
        )

        document = clean_document(response)
        if not document:
            raise LLMResponseError("No response from AI")

        logger.info("PRD generated", title=title, length=len(document))
        return document


# Singleton
_prd_generator: Optional[PRDGenerator] = None


def get_prd_generator() -> PRDGenerator:
    """Get PRD generator singleton."""
    global _prd_generator
    if _prd_generator is None:
        _prd_generator = PRDGenerator()
    return _prd_generator
