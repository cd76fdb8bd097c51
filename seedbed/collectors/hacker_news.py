"""Hacker News story search collector (Algolia API)."""

from typing import Optional

import httpx

from .base import BaseCollector, CollectorConfig
from ..database import HackerNewsEvidence, HNStory
from ..utils import RateLimiter, SAMPLE_SIZE

HN_SEARCH_URL = "https://hn.algolia.com/api/v1/search"
HN_ITEM_URL = "https://news.ycombinator.com/item?id={object_id}"


class HackerNewsCollector(BaseCollector[HackerNewsEvidence]):
    """Counts matching stories and samples the top hits."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        rate_limiter: Optional[RateLimiter] = None
    ):
        config = CollectorConfig(
            name="hacker_news_search",
            source_type="hacker_news",
            rate_limiter_key="hacker_news"
        )
        super().__init__(config, client=client, rate_limiter=rate_limiter)

    def empty(self) -> HackerNewsEvidence:
        return HackerNewsEvidence()

    async def fetch(self, client: httpx.AsyncClient, query: str) -> HackerNewsEvidence:
        params = {"query": query, "tags": "story", "hitsPerPage": SAMPLE_SIZE}

        response = await client.get(HN_SEARCH_URL, params=params)
        response.raise_for_status()
        data = response.json()

        stories = []
        for hit in (data.get("hits") or [])[:SAMPLE_SIZE]:
            # Ask HN and similar posts have no outbound link
            url = hit.get("url") or HN_ITEM_URL.format(object_id=hit.get("objectID", ""))
            stories.append(HNStory(
                title=hit.get("title") or "",
                url=url,
                points=int(hit.get("points") or 0),
                num_comments=int(hit.get("num_comments") or 0),
                created_at=hit.get("created_at")
            ))

        return HackerNewsEvidence(
            total_hits=max(int(data.get("nbHits") or 0), 0),
            stories=stories
        )
