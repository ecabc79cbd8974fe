"""Collection API resources."""

import falcon.asgi

from collabgate.application.dto.collection_dto import CollectionChanges
from collabgate.application.use_cases.collection.create_collection import CreateCollectionUseCase
from collabgate.application.use_cases.collection.delete_collection import DeleteCollectionUseCase
from collabgate.application.use_cases.collection.get_collection import GetCollectionUseCase
from collabgate.application.use_cases.collection.list_collections import ListCollectionsUseCase
from collabgate.application.use_cases.collection.update_collection import UpdateCollectionUseCase
from collabgate.domain.exceptions import CollabGateError
from collabgate.domain.value_objects import CollectionType
from collabgate.interfaces.api.resources.common import (
    collection_to_dict,
    optional_bool,
    optional_str,
    parse_uuid,
    policy_to_dict,
    read_body,
    require_actor,
    set_error,
    view_to_media,
)


class CollectionsResource:
    """GET/POST /v1/collections - list visible and create collections."""

    def __init__(
        self,
        list_collections: ListCollectionsUseCase,
        create_collection: CreateCollectionUseCase,
    ) -> None:
        self._list = list_collections
        self._create = create_collection

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List collections the caller can see, in creation order."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            views = await self._list.execute(actor)
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = {
            "items": [collection_to_dict(v.collection) for v in views],
            "policies": [policy_to_dict(v) for v in views],
        }
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create collection owned by the caller's team."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            body = await read_body(req)
            view = await self._create.execute(
                actor,
                name=optional_str(body, "name") or "",
                type=optional_str(body, "type") or CollectionType.ATLAS,
                private=bool(optional_bool(body, "private")),
                description=optional_str(body, "description"),
            )
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = view_to_media(view)
        resp.status = falcon.HTTP_201


class CollectionResource:
    """GET/PATCH/DELETE /v1/collections/{collection_id}."""

    def __init__(
        self,
        get_collection: GetCollectionUseCase,
        update_collection: UpdateCollectionUseCase,
        delete_collection: DeleteCollectionUseCase,
    ) -> None:
        self._get = get_collection
        self._update = update_collection
        self._delete = delete_collection

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """Get collection with the caller's abilities."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            view = await self._get.execute(actor, parse_uuid(collection_id, "collection ID"))
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = view_to_media(view)
        resp.status = falcon.HTTP_200

    async def on_patch(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """Rename, retype, describe or change visibility."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            coll_id = parse_uuid(collection_id, "collection ID")
            body = await read_body(req)
            changes = CollectionChanges(
                name=optional_str(body, "name"),
                type=optional_str(body, "type"),
                private=optional_bool(body, "private"),
                description=optional_str(body, "description"),
            )
            view = await self._update.execute(actor, coll_id, changes)
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = view_to_media(view)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        """Delete collection unless it is the team's last one."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            await self._delete.execute(actor, parse_uuid(collection_id, "collection ID"))
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = {"success": True}
        resp.status = falcon.HTTP_200
