"""Collection lifecycle guard - structural invariants on create/update/delete."""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import uuid4

from collabgate.domain.entities import Actor, Collection
from collabgate.domain.exceptions import ValidationError
from collabgate.domain.value_objects import CollectionType

MAX_NAME_LENGTH = 100


def can_delete(collection_count: int) -> bool:
    """False iff the collection about to be deleted is the team's last one."""
    return collection_count > 1


def _validate_name(name: str | None) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError("Collection name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Collection name exceeds {MAX_NAME_LENGTH} characters")
    return name


def _parse_type(value: str | CollectionType) -> CollectionType:
    try:
        return CollectionType(value)
    except ValueError:
        raise ValidationError(f"Unknown collection type: {value!r}") from None


def new_collection(
    actor: Actor,
    name: str,
    type: str | CollectionType = CollectionType.ATLAS,
    private: bool = False,
    description: str | None = None,
) -> Collection:
    """Build a collection owned by the actor's team, created by the actor."""
    now = datetime.now(UTC)
    return Collection(
        id=uuid4(),
        team_id=actor.team_id,
        creator_id=actor.user_id,
        name=_validate_name(name),
        type=_parse_type(type),
        created_at=now,
        updated_at=now,
        private=bool(private),
        description=(description or "").strip() or None,
    )


def apply_changes(
    collection: Collection,
    *,
    name: str | None = None,
    type: str | CollectionType | None = None,
    private: bool | None = None,
    description: str | None = None,
) -> Collection:
    """Return an updated copy. None leaves a field unchanged; "" clears description."""
    changes: dict[str, object] = {}
    if name is not None:
        changes["name"] = _validate_name(name)
    if type is not None:
        changes["type"] = _parse_type(type)
    if private is not None:
        changes["private"] = bool(private)
    if description is not None:
        changes["description"] = description.strip() or None
    if not changes:
        return collection
    return replace(collection, updated_at=datetime.now(UTC), **changes)
