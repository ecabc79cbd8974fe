"""User entity - team member that can collaborate on collections."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """User - belongs to exactly one team."""

    id: UUID
    team_id: UUID
    name: str
    created_at: datetime
    email: str | None = None
    is_admin: bool = False
