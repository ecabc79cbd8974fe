"""Fixtures for API tests."""

from uuid import UUID

import pytest
from falcon.testing import TestClient

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
from collabgate.infrastructure.export.zip_exporter import ZipExporter
from collabgate.interfaces.api.app import create_app
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

from tests.conftest import FakeUnitOfWork, actor_for

TEST_USER_HEADER = "X-Test-User"


class AuthBypassMiddleware:
    """Middleware that resolves req.context.actor from a test header."""

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self._uow = uow

    async def process_request(self, req, resp):
        req.context.actor = None
        user_id = req.get_header(TEST_USER_HEADER)
        if user_id:
            user = self._uow.users._by_id.get(UUID(user_id))
            if user:
                req.context.actor = actor_for(user)


@pytest.fixture
def app(fake_uow, uow_factory, membership_resolver):
    """Falcon ASGI app with API resources for testing."""
    kwargs = {
        "unit_of_work_factory": uow_factory,
        "membership_resolver": membership_resolver,
    }
    exporter = ZipExporter()

    return create_app(
        collections_resource=CollectionsResource(
            ListCollectionsUseCase(unit_of_work_factory=uow_factory),
            CreateCollectionUseCase(**kwargs),
        ),
        collection_resource=CollectionResource(
            GetCollectionUseCase(**kwargs),
            UpdateCollectionUseCase(unit_of_work_factory=uow_factory),
            DeleteCollectionUseCase(**kwargs),
        ),
        collection_users_resource=CollectionUsersResource(ListMembersUseCase(**kwargs)),
        memberships_resource=MembershipsResource(
            ListMembershipsUseCase(**kwargs),
            AddMemberUseCase(**kwargs),
        ),
        membership_resource=MembershipResource(RemoveMemberUseCase(**kwargs)),
        collection_export_resource=CollectionExportResource(
            ExportCollectionUseCase(exporter=exporter, **kwargs)
        ),
        exports_resource=ExportsResource(
            ExportAllCollectionsUseCase(unit_of_work_factory=uow_factory, exporter=exporter)
        ),
        export_resource=ExportResource(GetExportUseCase(exporter=exporter)),
        health_resource=HealthResource(),
        middleware=[AuthBypassMiddleware(fake_uow)],
    )


@pytest.fixture
def client(app) -> TestClient:
    """Test client for API."""
    return TestClient(app)
