"""User repository port."""

from typing import Protocol
from uuid import UUID

from collabgate.domain.entities import User


class UserRepository(Protocol):
    """Port for user lookups."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]: ...
