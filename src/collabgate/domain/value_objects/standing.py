"""Standing - resolved relationship of an actor to a collection."""

from dataclasses import dataclass
from enum import StrEnum

from collabgate.domain.value_objects.permission_level import PermissionLevel


class StandingKind(StrEnum):
    """How (and whether) the actor sees the collection."""

    NOT_VISIBLE = "not_visible"
    VISIBLE = "visible"
    VISIBLE_VIA_TEAM = "visible_via_team"


@dataclass(frozen=True)
class Standing:
    """Visibility outcome plus the effective permission level, if any."""

    kind: StandingKind
    level: PermissionLevel | None = None

    @classmethod
    def not_visible(cls) -> "Standing":
        return cls(StandingKind.NOT_VISIBLE)

    @classmethod
    def visible(cls, level: PermissionLevel) -> "Standing":
        return cls(StandingKind.VISIBLE, level)

    @classmethod
    def via_team(cls, level: PermissionLevel = PermissionLevel.READ) -> "Standing":
        return cls(StandingKind.VISIBLE_VIA_TEAM, level)

    @property
    def is_visible(self) -> bool:
        return self.kind != StandingKind.NOT_VISIBLE
