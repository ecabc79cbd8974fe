"""Create collection use case."""

import logging

from collabgate.application.dto.collection_dto import CollectionView
from collabgate.application.ports import MembershipResolver
from collabgate.domain.entities import Actor
from collabgate.domain.services.lifecycle_guard import can_delete, new_collection
from collabgate.domain.services.policy import compute_abilities
from collabgate.domain.value_objects import CollectionType

logger = logging.getLogger(__name__)


class CreateCollectionUseCase:
    """Create collection in the actor's team with the actor as creator."""

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
        name: str,
        type: str = CollectionType.ATLAS,
        private: bool = False,
        description: str | None = None,
    ) -> CollectionView:
        """Create collection and return it with the creator's abilities."""
        collection = new_collection(
            actor, name, type=type, private=private, description=description
        )
        async with self._uow_factory() as uow:
            await uow.collections.lock_team(actor.team_id)
            await uow.collections.create(collection)
            count = await uow.collections.count_by_team(actor.team_id)

        logger.info(
            "Collection %s created by user %s (private=%s)",
            collection.id,
            actor.user_id,
            collection.private,
        )
        standing = await self._membership_resolver.resolve(actor, collection)
        return CollectionView(
            collection=collection,
            abilities=compute_abilities(
                actor, collection, standing, is_last_collection=not can_delete(count)
            ),
        )
