"""Pytest fixtures for collabgate tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from collabgate.domain.entities import Actor, Collection, Membership, User
from collabgate.domain.value_objects import CollectionType, PermissionLevel
from collabgate.infrastructure.permission.membership_resolver import (
    CollabGateMembershipResolver,
)


# --- Fake repositories ---


class FakeCollectionRepository:
    """In-memory collection repository. Insertion order is creation order."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, Collection] = {}
        self.locked_teams: list[UUID] = []
        self.locked_rows: list[UUID] = []

    async def get_by_id(self, collection_id: UUID) -> Collection | None:
        return self._by_id.get(collection_id)

    async def get_for_update(self, collection_id: UUID) -> Collection | None:
        self.locked_rows.append(collection_id)
        return self._by_id.get(collection_id)

    async def list_by_team(self, team_id: UUID) -> list[Collection]:
        return [c for c in self._by_id.values() if c.team_id == team_id]

    async def count_by_team(self, team_id: UUID) -> int:
        return len(await self.list_by_team(team_id))

    async def lock_team(self, team_id: UUID) -> None:
        self.locked_teams.append(team_id)

    async def create(self, collection: Collection) -> Collection:
        self._by_id[collection.id] = collection
        return collection

    async def update(self, collection: Collection) -> None:
        self._by_id[collection.id] = collection

    async def delete(self, collection_id: UUID) -> None:
        self._by_id.pop(collection_id, None)


class FakeMembershipRepository:
    """In-memory membership repository, unique per (collection_id, user_id)."""

    def __init__(self) -> None:
        self._by_pair: dict[tuple[UUID, UUID], Membership] = {}
        self.shared_locks: list[tuple[UUID, UUID]] = []

    async def get_for_collection(
        self, collection_id: UUID, user_id: UUID, for_share: bool = False
    ) -> Membership | None:
        if for_share:
            self.shared_locks.append((collection_id, user_id))
        return self._by_pair.get((collection_id, user_id))

    async def list_by_collection(self, collection_id: UUID) -> list[Membership]:
        return [m for m in self._by_pair.values() if m.collection_id == collection_id]

    async def list_by_user(self, user_id: UUID) -> list[Membership]:
        return [m for m in self._by_pair.values() if m.user_id == user_id]

    async def create(self, membership: Membership) -> Membership:
        key = (membership.collection_id, membership.user_id)
        existing = self._by_pair.get(key)
        if existing:
            # mirrors ON CONFLICT DO UPDATE
            self._by_pair[key] = replace(
                existing,
                permission=membership.permission,
                updated_at=membership.updated_at,
            )
        else:
            self._by_pair[key] = membership
        return self._by_pair[key]

    async def update(self, membership: Membership) -> None:
        self._by_pair[(membership.collection_id, membership.user_id)] = membership

    async def delete(self, membership_id: UUID) -> None:
        for key, m in list(self._by_pair.items()):
            if m.id == membership_id:
                del self._by_pair[key]

    async def delete_by_collection(self, collection_id: UUID) -> None:
        for key in [k for k in self._by_pair if k[0] == collection_id]:
            del self._by_pair[key]

    def count(self) -> int:
        return len(self._by_pair)


class FakeUserRepository:
    """In-memory user repository."""

    def __init__(self) -> None:
        self._by_id: dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self._by_id.get(user_id)

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]:
        users = [self._by_id[i] for i in user_ids if i in self._by_id]
        return sorted(users, key=lambda u: (u.name, str(u.id)))

    def add(self, user: User) -> None:
        """Helper to add user for tests."""
        self._by_id[user.id] = user


# --- Fake UnitOfWork ---


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.collections = FakeCollectionRepository()
        self.memberships = FakeMembershipRepository()
        self.users = FakeUserRepository()

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass


def make_factory(uow: FakeUnitOfWork):
    """Factory yielding the same FakeUnitOfWork on every call."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        yield uow

    return _factory


# --- Builders ---


def make_user(
    uow: FakeUnitOfWork,
    team_id: UUID | None = None,
    name: str = "Jenny Doe",
    is_admin: bool = False,
) -> User:
    """Create and store a user."""
    user = User(
        id=uuid4(),
        team_id=team_id or uuid4(),
        name=name,
        email=f"{name.split()[0].lower()}@example.com",
        is_admin=is_admin,
        created_at=datetime.now(UTC),
    )
    uow.users.add(user)
    return user


def actor_for(user: User) -> Actor:
    return Actor(user_id=user.id, team_id=user.team_id, is_admin=user.is_admin)


def make_collection(
    uow: FakeUnitOfWork,
    creator: User,
    private: bool = False,
    name: str = "Engineering",
) -> Collection:
    """Create and store a collection created by creator."""
    now = datetime.now(UTC)
    collection = Collection(
        id=uuid4(),
        team_id=creator.team_id,
        creator_id=creator.id,
        name=name,
        type=CollectionType.ATLAS,
        created_at=now,
        updated_at=now,
        private=private,
    )
    uow.collections._by_id[collection.id] = collection
    return collection


def make_membership(
    uow: FakeUnitOfWork,
    collection: Collection,
    user: User,
    permission: PermissionLevel = PermissionLevel.READ_WRITE,
    created_by: User | None = None,
) -> Membership:
    """Create and store a membership."""
    now = datetime.now(UTC)
    membership = Membership(
        id=uuid4(),
        collection_id=collection.id,
        user_id=user.id,
        permission=permission,
        created_by=(created_by or user).id,
        created_at=now,
        updated_at=now,
    )
    uow.memberships._by_pair[(collection.id, user.id)] = membership
    return membership


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the test's FakeUnitOfWork."""
    return make_factory(fake_uow)


@pytest.fixture
def membership_resolver(uow_factory) -> CollabGateMembershipResolver:
    """Store-backed resolver over the fake unit of work."""
    return CollabGateMembershipResolver(uow_factory)


@pytest.fixture
def seed(fake_uow: FakeUnitOfWork) -> dict:
    """Team with a member, an admin, and one public collection created by the member."""
    team_id = uuid4()
    user = make_user(fake_uow, team_id, name="Jenny Doe")
    admin = make_user(fake_uow, team_id, name="Ada Admin", is_admin=True)
    collection = make_collection(fake_uow, user)
    return {"team_id": team_id, "user": user, "admin": admin, "collection": collection}
