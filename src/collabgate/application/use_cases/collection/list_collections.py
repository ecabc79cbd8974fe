"""List visible collections use case."""

from collabgate.application.dto.collection_dto import CollectionView
from collabgate.domain.entities import Actor
from collabgate.domain.services.membership_resolver import resolve_standing
from collabgate.domain.services.policy import compute_abilities


class ListCollectionsUseCase:
    """List collections of the actor's team that the actor can see."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor: Actor) -> list[CollectionView]:
        """Collections in creation order, each with the actor's abilities."""
        async with self._uow_factory() as uow:
            collections = await uow.collections.list_by_team(actor.team_id)
            memberships = await uow.memberships.list_by_user(actor.user_id)

        by_collection = {m.collection_id: m for m in memberships}
        is_last = len(collections) <= 1
        views = []
        for collection in collections:
            standing = resolve_standing(
                actor, collection, by_collection.get(collection.id)
            )
            if not standing.is_visible:
                continue
            views.append(
                CollectionView(
                    collection=collection,
                    abilities=compute_abilities(
                        actor, collection, standing, is_last_collection=is_last
                    ),
                )
            )
        return views
