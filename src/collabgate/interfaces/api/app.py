"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from collabgate.interfaces.api.resources.collections import CollectionResource, CollectionsResource
from collabgate.interfaces.api.resources.exports import (
    CollectionExportResource,
    ExportResource,
    ExportsResource,
)
from collabgate.interfaces.api.resources.health import HealthResource
from collabgate.interfaces.api.resources.memberships import (
    CollectionUsersResource,
    MembershipResource,
    MembershipsResource,
)

logger = logging.getLogger(__name__)


async def _handle_unexpected(req, resp, ex, params):
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(
    collections_resource: CollectionsResource,
    collection_resource: CollectionResource,
    collection_users_resource: CollectionUsersResource,
    memberships_resource: MembershipsResource,
    membership_resource: MembershipResource,
    collection_export_resource: CollectionExportResource,
    exports_resource: ExportsResource,
    export_resource: ExportResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/collections", collections_resource)
    app.add_route("/v1/collections/{collection_id}", collection_resource)
    app.add_route("/v1/collections/{collection_id}/users", collection_users_resource)
    app.add_route("/v1/collections/{collection_id}/memberships", memberships_resource)
    app.add_route(
        "/v1/collections/{collection_id}/memberships/{user_id}",
        membership_resource,
    )
    app.add_route("/v1/collections/{collection_id}/export", collection_export_resource)
    app.add_route("/v1/exports", exports_resource)
    app.add_route("/v1/exports/{job_id}", export_resource)
    return app
