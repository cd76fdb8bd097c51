"""npm registry search collector."""

from typing import Optional

import httpx

from .base import BaseCollector, CollectorConfig
from ..database import NpmEvidence, NpmPackage
from ..utils import RateLimiter, SAMPLE_SIZE

NPM_SEARCH_URL = "https://registry.npmjs.org/-/v1/search"
NPM_PACKAGE_URL = "https://www.npmjs.com/package/{name}"


class NpmCollector(BaseCollector[NpmEvidence]):
    """Counts matching packages on the npm registry."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        rate_limiter: Optional[RateLimiter] = None
    ):
        config = CollectorConfig(
            name="npm_search",
            source_type="npm",
            rate_limiter_key="npm"
        )
        super().__init__(config, client=client, rate_limiter=rate_limiter)

    def empty(self) -> NpmEvidence:
        return NpmEvidence()

    async def fetch(self, client: httpx.AsyncClient, query: str) -> NpmEvidence:
        params = {"text": query, "size": SAMPLE_SIZE}

        response = await client.get(NPM_SEARCH_URL, params=params)
        response.raise_for_status()
        data = response.json()

        packages = []
        for obj in (data.get("objects") or [])[:SAMPLE_SIZE]:
            pkg = obj.get("package") or {}
            name = pkg.get("name") or ""
            packages.append(NpmPackage(
                name=name,
                description=pkg.get("description") or "",
                version=pkg.get("version") or "",
                url=NPM_PACKAGE_URL.format(name=name)
            ))

        return NpmEvidence(
            total_count=max(int(data.get("total") or 0), 0),
            packages=packages
        )
