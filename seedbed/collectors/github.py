"""GitHub repository search collector."""

from typing import Optional

import httpx

from .base import BaseCollector, CollectorConfig
from ..database import GitHubEvidence, GitHubRepo
from ..utils import get_settings, RateLimiter, SAMPLE_SIZE

GITHUB_SEARCH_URL = "https://api.github.com/search/repositories"


class GitHubCollector(BaseCollector[GitHubEvidence]):
    """Counts matching repositories and samples the most starred ones."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        rate_limiter: Optional[RateLimiter] = None
    ):
        config = CollectorConfig(
            name="github_search",
            source_type="github",
            rate_limiter_key="github"
        )
        super().__init__(config, client=client, rate_limiter=rate_limiter)
        settings = get_settings()
        self.headers = {"Accept": "application/vnd.github.v3+json"}
        if settings.github_token:
            self.headers["Authorization"] = f"token {settings.github_token}"

    def empty(self) -> GitHubEvidence:
        return GitHubEvidence()

    async def fetch(self, client: httpx.AsyncClient, query: str) -> GitHubEvidence:
        params = {"q": query, "sort": "stars", "per_page": SAMPLE_SIZE}

        response = await client.get(GITHUB_SEARCH_URL, params=params, headers=self.headers)
        response.raise_for_status()
        data = response.json()

        repos = []
        for item in (data.get("items") or [])[:SAMPLE_SIZE]:
            repos.append(GitHubRepo(
                name=item.get("name") or "",
                full_name=item.get("full_name") or "",
                url=item.get("html_url") or "",
                description=item.get("description") or "",
                stars=max(int(item.get("stargazers_count") or 0), 0),
                language=item.get("language"),
                updated_at=item.get("updated_at")
            ))

        max_stars = max((r.stars for r in repos), default=0)

        return GitHubEvidence(
            total_count=max(int(data.get("total_count") or 0), 0),
            max_stars=max_stars,
            repos=repos
        )
