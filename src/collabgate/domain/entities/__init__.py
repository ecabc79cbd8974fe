"""Domain entities."""

from collabgate.domain.entities.actor import Actor
from collabgate.domain.entities.collection import Collection
from collabgate.domain.entities.membership import Membership
from collabgate.domain.entities.user import User

__all__ = [
    "Actor",
    "Collection",
    "Membership",
    "User",
]
