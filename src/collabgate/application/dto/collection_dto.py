"""Collection DTOs."""

from dataclasses import dataclass

from collabgate.domain.entities import Collection
from collabgate.domain.value_objects import AbilitySet


@dataclass
class CollectionChanges:
    """Requested update. None leaves a field unchanged."""

    name: str | None = None
    type: str | None = None
    private: bool | None = None
    description: str | None = None

    def as_kwargs(self) -> dict[str, object]:
        return {
            "name": self.name,
            "type": self.type,
            "private": self.private,
            "description": self.description,
        }


@dataclass
class CollectionView:
    """Collection paired with the ability set computed for the caller."""

    collection: Collection
    abilities: AbilitySet
