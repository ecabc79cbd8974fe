"""Collection repository port."""

from typing import Protocol
from uuid import UUID

from collabgate.domain.entities import Collection


class CollectionRepository(Protocol):
    """Port for collection persistence."""

    async def get_by_id(self, collection_id: UUID) -> Collection | None: ...

    async def get_for_update(self, collection_id: UUID) -> Collection | None: ...

    async def list_by_team(self, team_id: UUID) -> list[Collection]: ...

    async def count_by_team(self, team_id: UUID) -> int: ...

    async def lock_team(self, team_id: UUID) -> None: ...

    async def create(self, collection: Collection) -> Collection: ...

    async def update(self, collection: Collection) -> None: ...

    async def delete(self, collection_id: UUID) -> None: ...
