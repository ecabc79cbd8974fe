"""Policy engine - maps a resolved standing to an ability set."""

from collabgate.domain.entities import Actor, Collection
from collabgate.domain.value_objects import (
    AbilitySet,
    PermissionLevel,
    Standing,
    at_least,
)


def _is_creator(actor: Actor, collection: Collection) -> bool:
    return actor.user_id == collection.creator_id


def _can_write(standing: Standing) -> bool:
    return standing.level is not None and at_least(
        standing.level, PermissionLevel.READ_WRITE
    )


def can_update(actor: Actor, collection: Collection, standing: Standing) -> bool:
    """Rename, retype, describe or toggle visibility.

    Team admins may edit metadata of non-private collections only.
    """
    if not standing.is_visible:
        return False
    if _can_write(standing) or _is_creator(actor, collection):
        return True
    return actor.is_admin and not collection.private


def can_manage_users(actor: Actor, collection: Collection, standing: Standing) -> bool:
    """Add, remove and inspect collaborators."""
    if not standing.is_visible:
        return False
    return _can_write(standing) or _is_creator(actor, collection)


def can_administer(actor: Actor, collection: Collection, standing: Standing) -> bool:
    """Creator or team admin with visibility; prerequisite for delete."""
    if not standing.is_visible:
        return False
    return _is_creator(actor, collection) or actor.is_admin


def compute_abilities(
    actor: Actor,
    collection: Collection,
    standing: Standing,
    *,
    is_last_collection: bool = False,
) -> AbilitySet:
    """Compute the ability set for actor on collection at this moment."""
    if not standing.is_visible:
        return AbilitySet.none()

    return AbilitySet(
        view=True,
        export=True,
        update=can_update(actor, collection, standing),
        manage_users=can_manage_users(actor, collection, standing),
        delete=can_administer(actor, collection, standing) and not is_last_collection,
    )
