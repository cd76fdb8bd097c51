"""Evidence collectors module."""

from .base import BaseCollector, CollectorConfig, CollectorRegistry
from .github import GitHubCollector
from .hacker_news import HackerNewsCollector
from .npm import NpmCollector


def create_registry() -> CollectorRegistry:
    """Build a registry holding all three evidence collectors."""
    registry = CollectorRegistry()
    registry.register(GitHubCollector())
    registry.register(HackerNewsCollector())
    registry.register(NpmCollector())
    return registry


__all__ = [
    "BaseCollector",
    "CollectorConfig",
    "CollectorRegistry",
    "create_registry",
    "GitHubCollector",
    "HackerNewsCollector",
    "NpmCollector"
]
