"""Membership resolver port - actor standing on a collection."""

from typing import Protocol

from collabgate.domain.entities import Actor, Collection
from collabgate.domain.value_objects import Standing


class MembershipResolver(Protocol):
    """Port for resolving an actor's standing against the store."""

    async def resolve(self, actor: Actor, collection: Collection) -> Standing: ...
