"""Membership repository port."""

from typing import Protocol
from uuid import UUID

from collabgate.domain.entities import Membership


class MembershipRepository(Protocol):
    """Port for membership persistence. Unique per (collection_id, user_id)."""

    async def get_for_collection(
        self, collection_id: UUID, user_id: UUID, for_share: bool = False
    ) -> Membership | None: ...

    async def list_by_collection(self, collection_id: UUID) -> list[Membership]: ...

    async def list_by_user(self, user_id: UUID) -> list[Membership]: ...

    async def create(self, membership: Membership) -> Membership: ...

    async def update(self, membership: Membership) -> None: ...

    async def delete(self, membership_id: UUID) -> None: ...

    async def delete_by_collection(self, collection_id: UUID) -> None: ...
