"""Repository ports."""

from collabgate.application.ports.repositories.collection_repository import (
    CollectionRepository,
)
from collabgate.application.ports.repositories.membership_repository import (
    MembershipRepository,
)
from collabgate.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "CollectionRepository",
    "MembershipRepository",
    "UserRepository",
]
