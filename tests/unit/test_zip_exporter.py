"""Tests for ZipExporter."""

import io
import json
import zipfile
from uuid import uuid4

import pytest

from collabgate.domain.entities import Actor
from collabgate.infrastructure.export.zip_exporter import ZipExporter

from tests.conftest import FakeUnitOfWork, make_collection, make_user


@pytest.fixture
def collections():
    uow = FakeUnitOfWork()
    user = make_user(uow)
    return [
        make_collection(uow, user, name="Engineering"),
        make_collection(uow, user, private=True, name="R&D / Secret"),
    ]


@pytest.mark.asyncio
async def test_render_writes_one_manifest_per_collection(collections) -> None:
    archive = await ZipExporter().render(collections)

    assert archive.filename.startswith("export-")
    assert archive.filename.endswith(".zip")
    assert archive.content_type == "application/zip"
    with zipfile.ZipFile(io.BytesIO(archive.content)) as zf:
        names = zf.namelist()
        assert len(names) == 2
        manifest = json.loads(zf.read(names[0]))
    assert manifest["id"] == str(collections[0].id)
    assert manifest["name"] == "Engineering"
    assert manifest["type"] == "atlas"


@pytest.mark.asyncio
async def test_render_sanitizes_entry_names(collections) -> None:
    archive = await ZipExporter().render(collections)

    with zipfile.ZipFile(io.BytesIO(archive.content)) as zf:
        names = zf.namelist()
    assert names[1] == f"R_D _ Secret-{collections[1].id}.json"


@pytest.mark.asyncio
async def test_render_empty_archive() -> None:
    archive = await ZipExporter().render([])

    with zipfile.ZipFile(io.BytesIO(archive.content)) as zf:
        assert zf.namelist() == []


@pytest.mark.asyncio
async def test_schedule_completes_and_is_retrievable(collections) -> None:
    exporter = ZipExporter()
    actor = Actor(user_id=uuid4(), team_id=collections[0].team_id)

    job = await exporter.schedule(actor, collections)

    assert job.status == "complete"
    assert job.requested_by == actor.user_id
    assert job.team_id == actor.team_id
    assert job.collection_ids == [c.id for c in collections]
    assert job.archive is not None
    assert await exporter.get_job(job.id) is job
    assert await exporter.get_job(uuid4()) is None


@pytest.mark.asyncio
async def test_schedule_evicts_oldest_jobs(collections) -> None:
    exporter = ZipExporter(max_jobs=2)
    actor = Actor(user_id=uuid4(), team_id=collections[0].team_id)

    first = await exporter.schedule(actor, collections)
    second = await exporter.schedule(actor, collections)
    third = await exporter.schedule(actor, collections)

    assert await exporter.get_job(first.id) is None
    assert await exporter.get_job(second.id) is second
    assert await exporter.get_job(third.id) is third
