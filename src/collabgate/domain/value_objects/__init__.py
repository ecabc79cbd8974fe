"""Domain value objects."""

from collabgate.domain.value_objects.abilities import AbilitySet
from collabgate.domain.value_objects.collection_type import CollectionType
from collabgate.domain.value_objects.membership_filter import MembershipFilter
from collabgate.domain.value_objects.permission_level import (
    PermissionLevel,
    at_least,
    rank,
)
from collabgate.domain.value_objects.standing import Standing, StandingKind

__all__ = [
    "AbilitySet",
    "CollectionType",
    "MembershipFilter",
    "PermissionLevel",
    "Standing",
    "StandingKind",
    "at_least",
    "rank",
]
