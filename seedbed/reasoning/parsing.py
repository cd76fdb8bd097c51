"""Parsing of semi-structured LLM output into tagged results."""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar, Union
import json
import re

T = TypeVar("T")

THINK_BLOCK = re.compile(r"<think>[\s\S]*?</think>", re.IGNORECASE)
CODE_FENCE = re.compile(r"```(?:json)?\n?")
JSON_OBJECT = re.compile(r"\{[\s\S]*\}")


@dataclass(frozen=True)
class ParseOk(Generic[T]):
    value: T


@dataclass(frozen=True)
class ParseFailed:
    raw: str
    error: str = ""


ParseResult = Union[ParseOk[T], ParseFailed]


def clean_response(text: Optional[str]) -> str:
    """Strip reasoning blocks and markdown code fences."""
    if not text:
        return ""
    text = THINK_BLOCK.sub("", text)
    text = CODE_FENCE.sub("", text)
    return text.strip()


def parse_json_object(
    text: Optional[str],
    build: Callable[[dict], T]
) -> "ParseResult[T]":
    """
    Parse the first ``{...}`` span of a response and build a value from it.

    ``build`` may raise (KeyError, ValueError, pydantic errors) to reject a
    well-formed object of the wrong shape.
    """
    cleaned = clean_response(text)
    match = JSON_OBJECT.search(cleaned)
    if not match:
        return ParseFailed(raw=text or "", error="no JSON object found")

    try:
        data = json.loads(match.group(0))
        if not isinstance(data, dict):
            return ParseFailed(raw=text or "", error="not a JSON object")
        return ParseOk(build(data))
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        return ParseFailed(raw=text or "", error=str(e))


def parse_json_array(text: Optional[str]) -> "ParseResult[list]":
    """Parse a whole response as a JSON array."""
    cleaned = clean_response(text)
    try:
        data: Any = json.loads(cleaned)
    except ValueError as e:
        return ParseFailed(raw=text or "", error=str(e))

    if not isinstance(data, list):
        return ParseFailed(raw=text or "", error="not a JSON array")
    return ParseOk(data)
