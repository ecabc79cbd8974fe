"""Shared access checks for collection use cases."""

import logging
from uuid import UUID

from collabgate.application.ports import MembershipResolver
from collabgate.domain.entities import Actor, Collection
from collabgate.domain.exceptions import NotFound, PermissionDenied
from collabgate.domain.value_objects import Standing

logger = logging.getLogger(__name__)


async def load_visible_collection(
    uow_factory: type,
    membership_resolver: MembershipResolver,
    actor: Actor,
    collection_id: UUID,
) -> tuple[Collection, Standing]:
    """Fetch collection and resolve standing; refuse when not visible.

    Existing collections the actor cannot see raise PermissionDenied rather
    than NotFound so membership of private collections is not disclosed.
    """
    async with uow_factory() as uow:
        collection = await uow.collections.get_by_id(collection_id)
    if not collection:
        raise NotFound("Collection", str(collection_id))

    standing = await membership_resolver.resolve(actor, collection)
    if not standing.is_visible:
        logger.debug(
            "Collection %s not visible to user %s", collection_id, actor.user_id
        )
        raise PermissionDenied("User does not have access to collection")
    return collection, standing
