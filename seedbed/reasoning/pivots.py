"""Best-effort pivot suggestions from competing projects."""

from typing import List, Optional, Sequence

from ..database import GitHubRepo
from ..utils import get_logger, MAX_PIVOT_SUGGESTIONS
from .llm import LLMClient, get_llm_client
from .parsing import ParseOk, parse_json_array
from .prompts import PIVOT_SUGGESTION_PROMPT

logger = get_logger(__name__)


class PivotSuggester:
    """Suggests up to three ways to differentiate from existing projects."""

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm or get_llm_client()

    async def suggest(
        self,
        title: str,
        description: str,
        top_projects: Sequence[GitHubRepo]
    ) -> List[str]:
        """Never raises; any failure yields an empty list."""
        if not self.llm.available:
            return []

        try:
            project_list = "\n".join(
                f"- {p.name} ({p.stars} stars): {p.description}"
                for p in top_projects
            )
            description_part = f" ({description})" if description else ""

            response = await self.llm.complete(
                PIVOT_SUGGESTION_PROMPT.format(
                    title=title,
                    description_part=description_part,
                    project_list=project_list
                ),
                max_tokens=300,
                temperature=0.7
            )

            result = parse_json_array(response)
            if isinstance(result, ParseOk):
                return [str(s) for s in result.value[:MAX_PIVOT_SUGGESTIONS]]

            logger.warning("Unusable pivot response", error=result.error)
            return []

        except Exception as e:
            logger.warning("Pivot suggestions failed (non-critical)", error=str(e))
            return []
