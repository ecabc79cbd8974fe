"""List members and memberships use cases."""

from uuid import UUID

from collabgate.application.dto.membership_dto import MembershipListing
from collabgate.application.ports import MembershipResolver
from collabgate.application.use_cases.access import load_visible_collection
from collabgate.domain.entities import Actor, Membership, User
from collabgate.domain.exceptions import InvariantViolation, PermissionDenied
from collabgate.domain.services.policy import can_manage_users
from collabgate.domain.value_objects import MembershipFilter


def _user_order(user: User) -> tuple[str, str]:
    return ((user.name or "").casefold(), str(user.id))


async def _members_of(uow, collection_id: UUID) -> list[tuple[User, Membership]]:
    memberships = await uow.memberships.list_by_collection(collection_id)
    users = await uow.users.list_by_ids([m.user_id for m in memberships])
    users_by_id = {u.id: u for u in users}
    pairs = []
    for m in memberships:
        user = users_by_id.get(m.user_id)
        if user is None:
            raise InvariantViolation(f"Membership {m.id} references missing user {m.user_id}")
        pairs.append((user, m))
    pairs.sort(key=lambda pair: _user_order(pair[0]))
    return pairs


class ListMembersUseCase:
    """Roster of users with explicit access to a collection."""

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_resolver: MembershipResolver,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership_resolver = membership_resolver

    async def execute(self, actor: Actor, collection_id: UUID) -> list[User]:
        """Users ordered by name. Requires view access."""
        await load_visible_collection(
            self._uow_factory, self._membership_resolver, actor, collection_id
        )
        async with self._uow_factory() as uow:
            pairs = await _members_of(uow, collection_id)
        return [user for user, _ in pairs]


class ListMembershipsUseCase:
    """Members with their permission levels, optionally filtered.

    Reveals permission levels, so it requires the manage_users ability.
    """

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
        membership_filter: MembershipFilter | None = None,
    ) -> MembershipListing:
        collection, standing = await load_visible_collection(
            self._uow_factory, self._membership_resolver, actor, collection_id
        )
        if not can_manage_users(actor, collection, standing):
            raise PermissionDenied("User cannot view collection memberships")

        membership_filter = membership_filter or MembershipFilter()
        async with self._uow_factory() as uow:
            pairs = await _members_of(uow, collection_id)

        listing = MembershipListing()
        for user, membership in pairs:
            if membership_filter.matches(user.name, membership.permission):
                listing.users.append(user)
                listing.memberships.append(membership)
        return listing
