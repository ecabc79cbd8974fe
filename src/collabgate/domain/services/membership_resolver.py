"""Membership resolution - actor standing on a collection.

Pure function of its inputs; the caller looks up the membership record.
Absence of standing is a normal outcome, not an exception.
"""

from collabgate.domain.entities import Actor, Collection, Membership
from collabgate.domain.value_objects import PermissionLevel, Standing


def resolve_standing(
    actor: Actor,
    collection: Collection,
    membership: Membership | None,
) -> Standing:
    """Resolve how actor sees collection.

    Cross-team access is never visible, admins included. An explicit
    membership wins over team-wide visibility. The creator of a private
    collection without a record is treated as maintainer.
    """
    if actor.team_id != collection.team_id:
        return Standing.not_visible()

    if membership is not None:
        if membership.user_id != actor.user_id or membership.collection_id != collection.id:
            return Standing.not_visible()
        return Standing.visible(membership.permission)

    is_creator = actor.user_id == collection.creator_id
    if collection.private:
        if is_creator:
            return Standing.visible(PermissionLevel.MAINTAINER)
        return Standing.not_visible()

    if is_creator:
        return Standing.via_team(PermissionLevel.MAINTAINER)
    return Standing.via_team(PermissionLevel.READ)
