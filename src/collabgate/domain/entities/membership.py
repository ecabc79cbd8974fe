"""Membership entity - explicit grant of a user on a collection."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from collabgate.domain.value_objects import PermissionLevel


@dataclass
class Membership:
    """Membership - user holds permission on collection. Unique per pair."""

    id: UUID
    collection_id: UUID
    user_id: UUID
    permission: PermissionLevel
    created_by: UUID
    created_at: datetime
    updated_at: datetime
