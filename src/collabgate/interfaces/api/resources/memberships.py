"""Membership API resources."""

import falcon.asgi

from collabgate.application.use_cases.membership.add_member import AddMemberUseCase
from collabgate.application.use_cases.membership.list_members import (
    ListMembershipsUseCase,
    ListMembersUseCase,
)
from collabgate.application.use_cases.membership.remove_member import RemoveMemberUseCase
from collabgate.domain.exceptions import CollabGateError, ValidationError
from collabgate.domain.value_objects import MembershipFilter, PermissionLevel
from collabgate.interfaces.api.resources.common import (
    membership_to_dict,
    parse_uuid,
    read_body,
    require_actor,
    set_error,
    user_to_dict,
)


class CollectionUsersResource:
    """GET /v1/collections/{collection_id}/users - collaborator roster."""

    def __init__(self, list_members: ListMembersUseCase) -> None:
        self._list_members = list_members

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            users = await self._list_members.execute(
                actor, parse_uuid(collection_id, "collection ID")
            )
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = {"items": [user_to_dict(u) for u in users]}
        resp.status = falcon.HTTP_200


class MembershipsResource:
    """GET/POST /v1/collections/{collection_id}/memberships - list and add members."""

    def __init__(
        self,
        list_memberships: ListMembershipsUseCase,
        add_member: AddMemberUseCase,
    ) -> None:
        self._list = list_memberships
        self._add = add_member

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """List memberships; ?query= filters by name, ?permission= by level."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            permission = req.get_param("permission")
            membership_filter = MembershipFilter(
                query=(req.get_param("query") or "").strip() or None,
                permission=PermissionLevel.parse(permission) if permission else None,
            )
            listing = await self._list.execute(
                actor, parse_uuid(collection_id, "collection ID"), membership_filter
            )
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = {
            "users": [user_to_dict(u) for u in listing.users],
            "memberships": [membership_to_dict(m) for m in listing.memberships],
        }
        resp.status = falcon.HTTP_200

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """Add or update a member: {"user_id": ..., "permission": "read_write"}."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            coll_id = parse_uuid(collection_id, "collection ID")
            body = await read_body(req)
            if "user_id" not in body:
                raise ValidationError("Missing required field: 'user_id'")
            user_id = parse_uuid(body["user_id"], "user ID")
            permission = PermissionLevel.parse(
                body.get("permission") or PermissionLevel.READ_WRITE
            )
            membership = await self._add.execute(actor, coll_id, user_id, permission)
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = {"data": membership_to_dict(membership)}
        resp.status = falcon.HTTP_200


class MembershipResource:
    """DELETE /v1/collections/{collection_id}/memberships/{user_id} - remove member."""

    def __init__(self, remove_member: RemoveMemberUseCase) -> None:
        self._remove = remove_member

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
        user_id: str,
    ) -> None:
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            await self._remove.execute(
                actor,
                parse_uuid(collection_id, "collection ID"),
                parse_uuid(user_id, "user ID"),
            )
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.status = falcon.HTTP_204
