"""Application entry point and composition root."""

import logging

from collabgate.application.use_cases.collection.create_collection import CreateCollectionUseCase
from collabgate.application.use_cases.collection.delete_collection import DeleteCollectionUseCase
from collabgate.application.use_cases.collection.get_collection import GetCollectionUseCase
from collabgate.application.use_cases.collection.list_collections import ListCollectionsUseCase
from collabgate.application.use_cases.collection.update_collection import UpdateCollectionUseCase
from collabgate.application.use_cases.export.export_collections import (
    ExportAllCollectionsUseCase,
    ExportCollectionUseCase,
    GetExportUseCase,
)
from collabgate.application.use_cases.membership.add_member import AddMemberUseCase
from collabgate.application.use_cases.membership.list_members import (
    ListMembershipsUseCase,
    ListMembersUseCase,
)
from collabgate.application.use_cases.membership.remove_member import RemoveMemberUseCase
from collabgate.config import get_settings
from collabgate.infrastructure.auth.keycloak_provider import KeycloakProvider
from collabgate.infrastructure.export.zip_exporter import ZipExporter
from collabgate.infrastructure.permission.membership_resolver import (
    CollabGateMembershipResolver,
)
from collabgate.infrastructure.persistence.postgres.connection import create_pool
from collabgate.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from collabgate.interfaces.api.app import create_app
from collabgate.interfaces.api.middleware.auth import AuthMiddleware
from collabgate.interfaces.api.middleware.cors import CORSMiddleware
from collabgate.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
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
from collabgate.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_collabgate_app():
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings.log_level, debug=settings.debug)

    pool = create_pool(settings)
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
            team_claim=settings.keycloak_team_claim,
            admin_role=settings.keycloak_admin_role,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("KEYCLOAK_CLIENT_SECRET not set; every request is unauthenticated")

    resolver = CollabGateMembershipResolver(uow_factory)
    exporter = ZipExporter()

    list_collections = ListCollectionsUseCase(unit_of_work_factory=uow_factory)
    get_collection = GetCollectionUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
    )
    create_collection = CreateCollectionUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
    )
    update_collection = UpdateCollectionUseCase(unit_of_work_factory=uow_factory)
    delete_collection = DeleteCollectionUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
    )
    add_member = AddMemberUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
    )
    remove_member = RemoveMemberUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
    )
    list_members = ListMembersUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
    )
    list_memberships = ListMembershipsUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
    )
    export_collection = ExportCollectionUseCase(
        unit_of_work_factory=uow_factory,
        membership_resolver=resolver,
        exporter=exporter,
    )
    export_all = ExportAllCollectionsUseCase(
        unit_of_work_factory=uow_factory,
        exporter=exporter,
    )
    get_export = GetExportUseCase(exporter=exporter)

    pool_lifespan = PoolLifespanMiddleware(pool)
    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

    return create_app(
        collections_resource=CollectionsResource(list_collections, create_collection),
        collection_resource=CollectionResource(
            get_collection, update_collection, delete_collection
        ),
        collection_users_resource=CollectionUsersResource(list_members),
        memberships_resource=MembershipsResource(list_memberships, add_member),
        membership_resource=MembershipResource(remove_member),
        collection_export_resource=CollectionExportResource(export_collection),
        exports_resource=ExportsResource(export_all),
        export_resource=ExportResource(get_export),
        health_resource=HealthResource(pool_lifespan),
        middleware=[
            CORSMiddleware(cors_origins),
            pool_lifespan,
            AuthMiddleware(keycloak),
        ],
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_collabgate_app(), host=settings.host, port=settings.port)
