"""Remove member use case."""

import logging
from uuid import UUID

from collabgate.application.ports import MembershipResolver
from collabgate.application.use_cases.access import load_visible_collection
from collabgate.domain.entities import Actor
from collabgate.domain.exceptions import MembershipIneligible, NotFound, PermissionDenied
from collabgate.domain.services.policy import can_manage_users

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """Remove a user's membership from a collection. Idempotent."""

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_resolver: MembershipResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership_resolver = membership_resolver

    async def execute(self, actor: Actor, collection_id: UUID, user_id: UUID) -> None:
        """Delete the membership if present."""
        collection, standing = await load_visible_collection(
            self._uow_factory, self._membership_resolver, actor, collection_id
        )
        if not can_manage_users(actor, collection, standing):
            raise PermissionDenied("User cannot manage collection members")

        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
            if not user:
                raise NotFound("User", str(user_id))
            if user.team_id != collection.team_id:
                raise MembershipIneligible("User is not a member of the collection's team")

            membership = await uow.memberships.get_for_collection(collection_id, user_id)
            if not membership:
                return
            await uow.memberships.delete(membership.id)

        logger.info(
            "User %s removed from collection %s by user %s",
            user_id,
            collection_id,
            actor.user_id,
        )
