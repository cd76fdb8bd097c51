import pytest
from datetime import datetime
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import httpx

from seedbed.database import Idea, IdeaUpdate, as_utc
from seedbed.utils import RateLimiter


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    # Keep developer credentials out of the tests
    for name in ("ANTHROPIC_API_KEY", "SUPABASE_URL", "SUPABASE_KEY", "GITHUB_TOKEN"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fast_limiter() -> RateLimiter:
    return RateLimiter(requests_per_minute=100_000)


def mock_client(handler) -> httpx.AsyncClient:
    """AsyncClient whose requests are answered by ``handler``."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class FakeStore:
    """In-memory stand-in for the Supabase wrapper."""

    def __init__(self, ideas: Optional[List[Idea]] = None):
        self.rows: Dict[UUID, Idea] = {i.id: i for i in ideas or []}
        self.fail = False
        self.calls: List[str] = []

    def _check(self, name: str):
        self.calls.append(name)
        if self.fail:
            raise ConnectionError("backend unavailable")

    async def get_ideas(self) -> List[Idea]:
        self._check("get_ideas")
        return sorted(self.rows.values(), key=lambda i: as_utc(i.created_at), reverse=True)

    async def insert_idea(self, idea: Idea) -> Idea:
        self._check("insert_idea")
        self.rows[idea.id] = idea
        return idea

    async def update_idea(self, idea_id: UUID, update: IdeaUpdate, updated_at: datetime):
        self._check("update_idea")
        if idea_id not in self.rows:
            return None
        changes = {name: getattr(update, name) for name in update.model_fields_set}
        changes["updated_at"] = updated_at
        self.rows[idea_id] = self.rows[idea_id].model_copy(update=changes)
        return self.rows[idea_id]

    async def delete_idea(self, idea_id: UUID) -> bool:
        self._check("delete_idea")
        return self.rows.pop(idea_id, None) is not None


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


def make_llm(*responses, available: bool = True) -> MagicMock:
    """LLM double answering ``complete`` calls with ``responses`` in order.

    An exception instance in ``responses`` is raised instead of returned.
    """
    llm = MagicMock()
    llm.available = available
    llm.complete = AsyncMock(side_effect=list(responses))
    llm.complete_with_retry = llm.complete
    return llm
