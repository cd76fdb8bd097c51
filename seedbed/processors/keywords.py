"""Deterministic keyword extraction for search queries."""

import re

from ..database import SearchQueries
from ..utils import STOP_WORDS, MAX_QUERY_KEYWORDS

NON_KEYWORD_CHARS = re.compile(r"[^a-z0-9\s-]")


def extract_keywords(title: str, description: str = "") -> str:
    """
    Reduce an idea to at most four significant words.

    Lowercases title and description, strips punctuation (hyphens are kept),
    drops short words and stop words, then deduplicates in first-seen order.
    """
    text = f"{title} {description}".lower()
    words = [
        w for w in NON_KEYWORD_CHARS.sub(" ", text).split()
        if len(w) > 2 and w not in STOP_WORDS
    ]

    # dict preserves insertion order
    unique = list(dict.fromkeys(words))

    return " ".join(unique[:MAX_QUERY_KEYWORDS])


def fallback_queries(title: str, description: str = "") -> SearchQueries:
    """Same keyword string for every platform."""
    keywords = extract_keywords(title, description)
    return SearchQueries(github=keywords, hn=keywords, npm=keywords)
