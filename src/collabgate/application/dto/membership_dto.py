"""Membership DTOs."""

from dataclasses import dataclass, field

from collabgate.domain.entities import Membership, User


@dataclass
class MembershipListing:
    """Users and their membership records, in matching order."""

    users: list[User] = field(default_factory=list)
    memberships: list[Membership] = field(default_factory=list)
