"""Collection entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from collabgate.domain.value_objects import CollectionType


@dataclass
class Collection:
    """Collection - team-owned, optionally private container of documents."""

    id: UUID
    team_id: UUID
    creator_id: UUID
    name: str
    type: CollectionType
    created_at: datetime
    updated_at: datetime
    private: bool = False
    description: str | None = None
