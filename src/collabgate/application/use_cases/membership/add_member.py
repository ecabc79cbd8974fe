"""Add member use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from collabgate.application.ports import MembershipResolver
from collabgate.application.use_cases.access import load_visible_collection
from collabgate.domain.entities import Actor, Membership
from collabgate.domain.exceptions import MembershipIneligible, NotFound, PermissionDenied
from collabgate.domain.services.policy import can_manage_users
from collabgate.domain.value_objects import PermissionLevel

logger = logging.getLogger(__name__)


class AddMemberUseCase:
    """Grant a team member a permission level on a collection."""

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_resolver: MembershipResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership_resolver = membership_resolver

    async def execute(
        self,
        actor: Actor,
        collection_id: UUID,
        user_id: UUID,
        permission: PermissionLevel = PermissionLevel.READ_WRITE,
    ) -> Membership:
        """Create or update the membership for (collection, user)."""
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

            now = datetime.now(UTC)
            existing = await uow.memberships.get_for_collection(collection_id, user_id)
            if existing:
                existing.permission = permission
                existing.updated_at = now
                await uow.memberships.update(existing)
                membership = existing
            else:
                membership = await uow.memberships.create(
                    Membership(
                        id=uuid4(),
                        collection_id=collection_id,
                        user_id=user_id,
                        permission=permission,
                        created_by=actor.user_id,
                        created_at=now,
                        updated_at=now,
                    )
                )

        logger.info(
            "User %s granted %s on collection %s by user %s",
            user_id,
            permission,
            collection_id,
            actor.user_id,
        )
        return membership
