"""Filter for membership listings."""

from dataclasses import dataclass

from collabgate.domain.value_objects.permission_level import PermissionLevel


@dataclass(frozen=True)
class MembershipFilter:
    """Name substring and exact permission, combined with AND.

    An empty filter matches every membership.
    """

    query: str | None = None
    permission: PermissionLevel | None = None

    def matches(self, name: str, permission: PermissionLevel) -> bool:
        if self.query and self.query.casefold() not in (name or "").casefold():
            return False
        if self.permission is not None and permission != self.permission:
            return False
        return True
