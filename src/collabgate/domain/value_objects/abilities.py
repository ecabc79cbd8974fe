"""Ability set - concrete actions an actor may perform on a collection."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AbilitySet:
    """Computed per request, never stored."""

    view: bool = False
    update: bool = False
    delete: bool = False
    export: bool = False
    manage_users: bool = False

    @classmethod
    def none(cls) -> "AbilitySet":
        return cls()

    def to_dict(self) -> dict[str, bool]:
        return asdict(self)
