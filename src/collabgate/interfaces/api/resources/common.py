"""Shared helpers for API resources: error mapping and serialization."""

import logging
from uuid import UUID

import falcon
import falcon.asgi

from collabgate.application.dto.collection_dto import CollectionView
from collabgate.domain.entities import Collection, Membership, User
from collabgate.domain.exceptions import (
    CollabGateError,
    Conflict,
    InvalidOperation,
    NotFound,
    PermissionDenied,
    StorageUnavailable,
    Unauthenticated,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = [
    (Unauthenticated, falcon.HTTP_401),
    (PermissionDenied, falcon.HTTP_403),
    (NotFound, falcon.HTTP_404),
    (InvalidOperation, falcon.HTTP_400),
    (ValidationError, falcon.HTTP_400),
    (Conflict, falcon.HTTP_409),
    (StorageUnavailable, falcon.HTTP_503),
]


def set_error(resp: falcon.asgi.Response, error: CollabGateError) -> None:
    """Translate a domain error into status and body."""
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            resp.status = status
            break
    else:
        resp.status = falcon.HTTP_500
    if isinstance(error, PermissionDenied):
        resp.media = {"error": "Permission denied", "detail": str(error)}
    else:
        resp.media = {"error": str(error)}
    if isinstance(error, StorageUnavailable):
        resp.set_header("Retry-After", "1")
    logger.debug("Request refused with %s: %s", resp.status, error)


def require_actor(req: falcon.asgi.Request, resp: falcon.asgi.Response):
    """Return the request actor, or set 401 and return None."""
    actor = getattr(req.context, "actor", None)
    if not actor:
        set_error(resp, Unauthenticated("Unauthorized"))
    return actor


def parse_uuid(value: object, label: str) -> UUID:
    """Parse an identifier from path, query or body."""
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {label}") from None


def collection_to_dict(collection: Collection) -> dict:
    return {
        "id": str(collection.id),
        "team_id": str(collection.team_id),
        "creator_id": str(collection.creator_id),
        "name": collection.name,
        "type": collection.type.value,
        "private": collection.private,
        "description": collection.description,
        "created_at": collection.created_at.isoformat(),
        "updated_at": collection.updated_at.isoformat(),
    }


def policy_to_dict(view: CollectionView) -> dict:
    return {"id": str(view.collection.id), "abilities": view.abilities.to_dict()}


def view_to_media(view: CollectionView) -> dict:
    """Entity with exactly one policy bundle."""
    return {"data": collection_to_dict(view.collection), "policies": [policy_to_dict(view)]}


def user_to_dict(user: User) -> dict:
    return {
        "id": str(user.id),
        "name": user.name,
        "email": user.email,
        "is_admin": user.is_admin,
    }


def membership_to_dict(membership: Membership) -> dict:
    return {
        "id": str(membership.id),
        "collection_id": str(membership.collection_id),
        "user_id": str(membership.user_id),
        "permission": membership.permission.value,
        "created_by": str(membership.created_by),
        "created_at": membership.created_at.isoformat(),
        "updated_at": membership.updated_at.isoformat(),
    }


async def read_body(req: falcon.asgi.Request) -> dict:
    """JSON object body; empty body reads as {}."""
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body


def optional_bool(body: dict, key: str) -> bool | None:
    """Body field that must be a JSON boolean when present."""
    value = body.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ValidationError(f"Field {key!r} must be a boolean")


def optional_str(body: dict, key: str) -> str | None:
    """Body field that must be a JSON string when present."""
    value = body.get(key)
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(f"Field {key!r} must be a string")
