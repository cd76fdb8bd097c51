"""Idea repository with a read-through local snapshot.

The remote store is the source of truth. The snapshot is the last known-good
copy of the idea list: it is served only when the remote read fails, and
mutations are applied to it first and reverted if the remote write fails.
"""

import asyncio
from datetime import datetime, timedelta
from typing import Dict, List, Optional
from uuid import UUID

from pydantic import ValidationError

from .models import (
    Idea, IdeaCreate, IdeaUpdate, IdeaStats, Status,
    Ok, Err, Result, NOT_FOUND, INVALID, as_utc, utcnow
)
from .queries import Database, get_database
from ..utils import get_logger

logger = get_logger(__name__)


class IdeaRepository:
    """List/create/update/delete ideas against a remote store."""

    def __init__(self, store: Optional[Database] = None):
        self._store = store
        self._snapshot: List[Idea] = []
        self._lock = asyncio.Lock()

    @property
    def store(self) -> Database:
        if self._store is None:
            self._store = get_database()
        return self._store

    def snapshot(self) -> List[Idea]:
        """Copy of the last known-good idea list."""
        return list(self._snapshot)

    async def list(self) -> List[Idea]:
        """Read all ideas, falling back to the snapshot if the store fails."""
        try:
            ideas = await self.store.get_ideas()
        except Exception as e:
            logger.error(
                "Failed to fetch ideas, serving snapshot",
                error=str(e),
                cached=len(self._snapshot)
            )
            return self.snapshot()

        self._snapshot = self._merge_reports(ideas)
        return self.snapshot()

    async def get(self, idea_id: UUID) -> Optional[Idea]:
        """Get one idea as the store has it, or from the snapshot if the read fails."""
        await self.list()
        return self._find(idea_id)

    async def create(self, data: IdeaCreate) -> Result[Idea]:
        """Create an idea. The snapshot is reverted if the insert fails."""
        now = utcnow()
        idea = Idea(**data.model_dump(), created_at=now, updated_at=now)

        async with self._lock:
            backup = self.snapshot()
            self._snapshot.insert(0, idea)

            try:
                stored = await self.store.insert_idea(idea)
            except Exception as e:
                self._snapshot = backup
                logger.error("Idea insert failed", idea_id=str(idea.id), error=str(e))
                return Err(str(e))

            self._replace(stored)

        logger.info("Idea created", idea_id=str(stored.id), title=stored.title)
        return Ok(stored)

    async def update(self, idea_id: UUID, update: IdeaUpdate) -> Result[Idea]:
        """Apply a partial update. The snapshot is reverted if the write fails."""
        current = await self.get(idea_id)
        if current is None:
            return Err(f"Idea {idea_id} not found", code=NOT_FOUND)

        now = utcnow()
        changes = {name: getattr(update, name) for name in update.model_fields_set}
        changes["updated_at"] = now

        try:
            changed = Idea.model_validate({**current.model_dump(), **changes})
        except ValidationError as e:
            logger.warning("Rejected idea update", idea_id=str(idea_id), error=str(e))
            return Err(str(e), code=INVALID)

        async with self._lock:
            backup = self.snapshot()
            self._replace(changed)

            try:
                stored = await self.store.update_idea(idea_id, update, now)
            except Exception as e:
                self._snapshot = backup
                logger.error("Idea update failed", idea_id=str(idea_id), error=str(e))
                return Err(str(e))

            if stored is None:
                self._snapshot = [i for i in backup if i.id != idea_id]
                return Err(f"Idea {idea_id} not found", code=NOT_FOUND)

            self._replace(stored)

        logger.info(
            "Idea updated",
            idea_id=str(idea_id),
            fields=sorted(update.model_fields_set)
        )
        return Ok(stored)

    async def delete(self, idea_id: UUID) -> Result[UUID]:
        """Delete an idea. The snapshot is reverted if the delete fails."""
        if await self.get(idea_id) is None:
            return Err(f"Idea {idea_id} not found", code=NOT_FOUND)

        async with self._lock:
            backup = self.snapshot()
            self._snapshot = [i for i in self._snapshot if i.id != idea_id]

            try:
                deleted = await self.store.delete_idea(idea_id)
            except Exception as e:
                self._snapshot = backup
                logger.error("Idea delete failed", idea_id=str(idea_id), error=str(e))
                return Err(str(e))

        if not deleted:
            return Err(f"Idea {idea_id} not found", code=NOT_FOUND)

        logger.info("Idea deleted", idea_id=str(idea_id))
        return Ok(idea_id)

    async def stats(self, now: Optional[datetime] = None) -> IdeaStats:
        """Count ideas per status and those created in the last week."""
        ideas = await self.list()
        week_ago = as_utc(now or utcnow()) - timedelta(days=7)

        counts: Dict[Status, int] = {status: 0 for status in Status}
        for idea in ideas:
            counts[idea.status] += 1

        return IdeaStats(
            total=len(ideas),
            drafts=counts[Status.DRAFT],
            in_progress=counts[Status.IN_PROGRESS],
            completed=counts[Status.COMPLETED],
            created_this_week=len(
                [i for i in ideas if as_utc(i.created_at) >= week_ago]
            )
        )

    def _find(self, idea_id: UUID) -> Optional[Idea]:
        for idea in self._snapshot:
            if idea.id == idea_id:
                return idea
        return None

    def _replace(self, idea: Idea) -> None:
        self._snapshot = [idea if i.id == idea.id else i for i in self._snapshot]

    def _merge_reports(self, ideas: List[Idea]) -> List[Idea]:
        """Keep reports the snapshot has but the remote rows lack."""
        known = {i.id: i for i in self._snapshot}
        merged = []
        for idea in ideas:
            cached = known.get(idea.id)
            if cached is not None:
                changes = {}
                if idea.research_report is None and cached.research_report is not None:
                    changes["research_report"] = cached.research_report
                if idea.reality_check is None and cached.reality_check is not None:
                    changes["reality_check"] = cached.reality_check
                if changes:
                    idea = idea.model_copy(update=changes)
            merged.append(idea)
        return merged


# Singleton
_repository: Optional[IdeaRepository] = None


def get_repository() -> IdeaRepository:
    """Get idea repository singleton."""
    global _repository
    if _repository is None:
        _repository = IdeaRepository()
    return _repository
