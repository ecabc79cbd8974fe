"""Delete collection use case."""

import logging
from uuid import UUID

from collabgate.application.ports import MembershipResolver
from collabgate.application.use_cases.access import load_visible_collection
from collabgate.domain.entities import Actor
from collabgate.domain.exceptions import InvalidOperation, NotFound, PermissionDenied
from collabgate.domain.services.lifecycle_guard import can_delete
from collabgate.domain.services.policy import can_administer

logger = logging.getLogger(__name__)


class DeleteCollectionUseCase:
    """Delete collection unless it is the team's last one."""

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_resolver: MembershipResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership_resolver = membership_resolver

    async def execute(self, actor: Actor, collection_id: UUID) -> None:
        """Delete collection and its memberships.

        The count check and the delete share one transaction under a team
        lock, so concurrent deletes cannot leave the team without collections.
        """
        collection, standing = await load_visible_collection(
            self._uow_factory, self._membership_resolver, actor, collection_id
        )
        if not can_administer(actor, collection, standing):
            raise PermissionDenied("Only the creator or a team admin can delete")

        async with self._uow_factory() as uow:
            await uow.collections.lock_team(collection.team_id)
            if not await uow.collections.get_by_id(collection_id):
                raise NotFound("Collection", str(collection_id))
            count = await uow.collections.count_by_team(collection.team_id)
            if not can_delete(count):
                raise InvalidOperation("Cannot delete last collection")
            await uow.memberships.delete_by_collection(collection_id)
            await uow.collections.delete(collection_id)

        logger.info("Collection %s deleted by user %s", collection_id, actor.user_id)
