"""Reasoning module: LLM-backed extraction and generation."""

from .prompts import (
    QUERY_EXTRACTION_PROMPT,
    PIVOT_SUGGESTION_PROMPT,
    RESEARCH_PROMPT,
    PRD_SYSTEM_PROMPT,
    PRD_USER_PROMPT
)
from .parsing import (
    ParseOk, ParseFailed, ParseResult,
    clean_response, parse_json_object, parse_json_array
)
from .llm import LLMClient, get_llm_client
from .query_extractor import QueryExtractor
from .pivots import PivotSuggester
from .research import ResearchGenerator, get_research_generator
from .prd import (
    PRDGenerator, get_prd_generator,
    build_research_context, clean_document
)

__all__ = [
    "QUERY_EXTRACTION_PROMPT",
    "PIVOT_SUGGESTION_PROMPT",
    "RESEARCH_PROMPT",
    "PRD_SYSTEM_PROMPT",
    "PRD_USER_PROMPT",
    "ParseOk", "ParseFailed", "ParseResult",
    "clean_response", "parse_json_object", "parse_json_array",
    "LLMClient", "get_llm_client",
    "QueryExtractor",
    "PivotSuggester",
    "ResearchGenerator", "get_research_generator",
    "PRDGenerator", "get_prd_generator",
    "build_research_context", "clean_document"
]
