"""Update collection use case."""

import logging
from uuid import UUID

from collabgate.application.dto.collection_dto import CollectionChanges, CollectionView
from collabgate.domain.entities import Actor
from collabgate.domain.exceptions import NotFound, PermissionDenied
from collabgate.domain.services.lifecycle_guard import apply_changes, can_delete
from collabgate.domain.services.membership_resolver import resolve_standing
from collabgate.domain.services.policy import can_update, compute_abilities

logger = logging.getLogger(__name__)


class UpdateCollectionUseCase:
    """Rename, retype, describe or change visibility of a collection."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor: Actor,
        collection_id: UUID,
        changes: CollectionChanges,
    ) -> CollectionView:
        """Apply changes; abilities in the result reflect the new state.

        Standing is resolved against the locked collection row and membership
        in the writing transaction, so a concurrent visibility change or
        membership removal is never bypassed.
        """
        async with self._uow_factory() as uow:
            current = await uow.collections.get_for_update(collection_id)
            if not current:
                raise NotFound("Collection", str(collection_id))
            membership = None
            if actor.team_id == current.team_id:
                membership = await uow.memberships.get_for_collection(
                    collection_id, actor.user_id, for_share=True
                )
            standing = resolve_standing(actor, current, membership)
            if not standing.is_visible:
                raise PermissionDenied("User does not have access to collection")
            if not can_update(actor, current, standing):
                raise PermissionDenied("User does not have write access to collection")

            updated = apply_changes(current, **changes.as_kwargs())
            await uow.collections.update(updated)
            count = await uow.collections.count_by_team(updated.team_id)

        if updated.private != current.private:
            logger.info(
                "Collection %s visibility changed to private=%s by user %s",
                collection_id,
                updated.private,
                actor.user_id,
            )
        else:
            logger.info("Collection %s updated by user %s", collection_id, actor.user_id)

        return CollectionView(
            collection=updated,
            abilities=compute_abilities(
                actor,
                updated,
                resolve_standing(actor, updated, membership),
                is_last_collection=not can_delete(count),
            ),
        )
