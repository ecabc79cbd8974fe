"""Membership resolver implementation - checks against collection_user table."""

from collabgate.domain.entities import Actor, Collection
from collabgate.domain.services.membership_resolver import resolve_standing
from collabgate.domain.value_objects import Standing


class CollabGateMembershipResolver:
    """Looks up the actor's membership record and resolves standing."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def resolve(self, actor: Actor, collection: Collection) -> Standing:
        """Resolve actor standing on collection. One store round trip at most."""
        if actor.team_id != collection.team_id:
            return Standing.not_visible()

        async with self._uow_factory() as uow:
            membership = await uow.memberships.get_for_collection(
                collection.id, actor.user_id
            )
        return resolve_standing(actor, collection, membership)
