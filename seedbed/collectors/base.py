"""Base collector class and the evidence fan-out registry."""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, TypeVar
from dataclasses import dataclass
import asyncio

import httpx
from pydantic import BaseModel

from ..database import Evidence, SearchQueries
from ..utils import get_logger, get_rate_limiter, get_settings, RateLimiter

logger = get_logger(__name__)

E = TypeVar("E", bound=BaseModel)


@dataclass
class CollectorConfig:
    """Configuration for a collector."""
    name: str
    source_type: str
    rate_limiter_key: str = "default"
    enabled: bool = True
    timeout_seconds: Optional[float] = None


class BaseCollector(ABC, Generic[E]):
    """Base class for evidence collectors.

    ``search`` never raises: any transport error, non-2xx response or
    malformed payload degrades to the collector's all-zero evidence.
    Each call is attempted once.
    """

    def __init__(
        self,
        config: CollectorConfig,
        client: Optional[httpx.AsyncClient] = None,
        rate_limiter: Optional[RateLimiter] = None
    ):
        self.config = config
        self.client = client
        self.rate_limiter: RateLimiter = rate_limiter or get_rate_limiter(config.rate_limiter_key)
        if config.timeout_seconds is None:
            config.timeout_seconds = get_settings().http_timeout_seconds

    @abstractmethod
    def empty(self) -> E:
        """Zeroed evidence for this source."""

    @abstractmethod
    async def fetch(self, client: httpx.AsyncClient, query: str) -> E:
        """
        Query the provider.

        Returns:
            Evidence parsed from the provider's response.
        """

    async def search(self, query: str) -> E:
        """Search the provider, degrading to empty evidence on any failure."""
        if not self.config.enabled:
            logger.info(f"Collector {self.config.name} is disabled, skipping")
            return self.empty()

        if not query.strip():
            logger.info(f"Empty query for {self.config.name}, skipping")
            return self.empty()

        try:
            await self.rate_limiter.acquire()

            if self.client is not None:
                evidence = await self.fetch(self.client, query)
            else:
                async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
                    evidence = await self.fetch(client, query)

            logger.info(
                f"Search complete: {self.config.name}",
                query=query,
                evidence=evidence.model_dump(exclude={"repos", "stories", "packages"})
            )
            return evidence

        except Exception as e:
            logger.warning(
                f"Search failed: {self.config.name}",
                query=query,
                error=str(e),
                error_type=type(e).__name__
            )
            return self.empty()


class CollectorRegistry:
    """Registry for the three evidence collectors."""

    def __init__(self):
        self._collectors: Dict[str, BaseCollector] = {}

    def register(self, collector: BaseCollector) -> None:
        """Register a collector under its source type."""
        self._collectors[collector.config.source_type] = collector

    def get(self, source_type: str) -> Optional[BaseCollector]:
        """Get a collector by source type."""
        return self._collectors.get(source_type)

    async def search_all(self, queries: SearchQueries) -> Evidence:
        """
        Fan out all three searches concurrently and gather the evidence.

        A missing collector contributes empty evidence for its source.
        """
        github = self.get("github")
        hacker_news = self.get("hacker_news")
        npm = self.get("npm")

        results = await asyncio.gather(
            github.search(queries.github) if github else _none(),
            hacker_news.search(queries.hn) if hacker_news else _none(),
            npm.search(queries.npm) if npm else _none(),
        )

        fields = {}
        for name, result in zip(("github", "hacker_news", "npm"), results):
            if result is not None:
                fields[name] = result
        return Evidence(**fields)


async def _none() -> None:
    return None
