"""Per-platform search query extraction."""

from typing import Optional

from ..database import SearchQueries
from ..processors.keywords import fallback_queries
from ..utils import get_logger
from .llm import LLMClient, get_llm_client
from .parsing import ParseOk, parse_json_object
from .prompts import QUERY_EXTRACTION_PROMPT

logger = get_logger(__name__)


def _build_queries(data: dict) -> SearchQueries:
    queries = {}
    for key in ("github", "hn", "npm"):
        value = data[key]
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"missing query for {key}")
        queries[key] = value.strip()
    return SearchQueries(**queries)


class QueryExtractor:
    """Turns an idea into search strings for GitHub, Hacker News and npm."""

    def __init__(self, llm: Optional[LLMClient] = None):
        self.llm = llm or get_llm_client()

    async def extract(self, title: str, description: str = "") -> SearchQueries:
        """
        Ask the LLM for platform-specific queries.

        Falls back to keyword extraction when the LLM is unavailable,
        errors, or answers with anything but the expected JSON object.
        """
        if self.llm.available:
            try:
                description_line = f'\nDescription: "{description}"' if description else ""
                response = await self.llm.complete(
                    QUERY_EXTRACTION_PROMPT.format(
                        title=title,
                        description_line=description_line
                    ),
                    max_tokens=150,
                    temperature=0.2
                )
                result = parse_json_object(response, _build_queries)
                if isinstance(result, ParseOk):
                    logger.info("AI-extracted queries", queries=result.value.model_dump())
                    return result.value
                logger.warning(
                    "Unusable query extraction response, using fallback",
                    error=result.error,
                    raw=result.raw[:200]
                )
            except Exception as e:
                logger.warning("AI query extraction failed, using fallback", error=str(e))

        queries = fallback_queries(title, description)
        logger.info("Fallback keywords", keywords=queries.github)
        return queries
