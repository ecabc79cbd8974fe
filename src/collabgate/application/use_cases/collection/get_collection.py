"""Get collection use case."""

from uuid import UUID

from collabgate.application.dto.collection_dto import CollectionView
from collabgate.application.ports import MembershipResolver
from collabgate.application.use_cases.access import load_visible_collection
from collabgate.domain.entities import Actor
from collabgate.domain.services.lifecycle_guard import can_delete
from collabgate.domain.services.policy import compute_abilities


class GetCollectionUseCase:
    """Get collection by id with the caller's abilities."""

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_resolver: MembershipResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership_resolver = membership_resolver

    async def execute(self, actor: Actor, collection_id: UUID) -> CollectionView:
        """Get collection. Raises PermissionDenied when not visible."""
        collection, standing = await load_visible_collection(
            self._uow_factory, self._membership_resolver, actor, collection_id
        )
        async with self._uow_factory() as uow:
            count = await uow.collections.count_by_team(collection.team_id)

        return CollectionView(
            collection=collection,
            abilities=compute_abilities(
                actor, collection, standing, is_last_collection=not can_delete(count)
            ),
        )
