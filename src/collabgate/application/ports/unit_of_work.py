"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from collabgate.application.ports.repositories.collection_repository import (
    CollectionRepository,
)
from collabgate.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from collabgate.application.ports.repositories.user_repository import UserRepository


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def collections(self) -> CollectionRepository: ...

    @property
    def memberships(self) -> MembershipRepository: ...

    @property
    def users(self) -> UserRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
