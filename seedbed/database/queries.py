"""Database query operations against Supabase."""

from datetime import datetime
from typing import Optional, List, Dict, Any
from uuid import UUID
import json

from supabase import create_client, Client
from .models import Idea, IdeaUpdate
from ..utils import get_settings, get_logger, DatabaseNotConfiguredError

logger = get_logger(__name__)

IDEAS_TABLE = "ideas"

# Columns holding nested reports as JSONB
JSON_COLUMNS = ("research_report", "reality_check")


def row_to_idea(row: Dict[str, Any]) -> Idea:
    """Convert a Supabase row into an Idea."""
    data = dict(row)
    for column in JSON_COLUMNS:
        # Supabase may hand JSONB back as a string
        if isinstance(data.get(column), str):
            data[column] = json.loads(data[column])
    if data.get("description") is None:
        data["description"] = ""
    if not data.get("github_repo"):
        data["github_repo"] = None
    return Idea(**data)


def idea_to_row(idea: Idea) -> Dict[str, Any]:
    """Convert an Idea into a Supabase row."""
    return idea.model_dump(mode="json")


def update_to_row(update: IdeaUpdate, updated_at: datetime) -> Dict[str, Any]:
    """Convert a partial update into the columns it touches."""
    row = update.model_dump(mode="json", exclude_unset=True)
    row["updated_at"] = updated_at.isoformat()
    return row


class Database:
    """Database operations wrapper for the ideas table."""

    def __init__(self, client: Optional[Client] = None):
        if client is None:
            settings = get_settings()
            if not settings.supabase_url or not settings.supabase_key:
                raise DatabaseNotConfiguredError(
                    "SUPABASE_URL and SUPABASE_KEY must be set"
                )
            client = create_client(settings.supabase_url, settings.supabase_key)
        self.client: Client = client

    async def get_ideas(self) -> List[Idea]:
        """Get all ideas, newest first."""
        result = self.client.table(IDEAS_TABLE).select("*").order(
            "created_at", desc=True
        ).execute()
        return [row_to_idea(r) for r in result.data]

    async def insert_idea(self, idea: Idea) -> Idea:
        """Insert a new idea."""
        result = self.client.table(IDEAS_TABLE).insert(idea_to_row(idea)).execute()
        if not result.data:
            return idea
        return row_to_idea(result.data[0])

    async def update_idea(
        self,
        idea_id: UUID,
        update: IdeaUpdate,
        updated_at: datetime
    ) -> Optional[Idea]:
        """Apply a partial update. Returns None if no row matched."""
        result = self.client.table(IDEAS_TABLE).update(
            update_to_row(update, updated_at)
        ).eq("id", str(idea_id)).execute()
        if not result.data:
            return None
        return row_to_idea(result.data[0])

    async def delete_idea(self, idea_id: UUID) -> bool:
        """Delete an idea. Returns False if no row matched."""
        result = self.client.table(IDEAS_TABLE).delete().eq(
            "id", str(idea_id)
        ).execute()
        return bool(result.data)


# Singleton
_database: Optional[Database] = None


def get_database() -> Database:
    """Get database singleton."""
    global _database
    if _database is None:
        _database = Database()
    return _database
