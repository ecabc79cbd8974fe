"""Actor - identity performing an operation."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Actor:
    """Authenticated caller. Produced by the auth adapter, read-only here."""

    user_id: UUID
    team_id: UUID
    is_admin: bool = False
