"""Zip exporter - renders collection manifests into an in-memory archive."""

import io
import json
import logging
import zipfile
from collections import OrderedDict
from datetime import UTC, datetime
from uuid import UUID, uuid4

from collabgate.application.ports import ExportArchive, ExportJob
from collabgate.domain.entities import Actor, Collection

logger = logging.getLogger(__name__)


def _manifest(collection: Collection) -> dict:
    return {
        "id": str(collection.id),
        "name": collection.name,
        "type": collection.type.value,
        "private": collection.private,
        "description": collection.description,
        "created_at": collection.created_at.isoformat(),
        "updated_at": collection.updated_at.isoformat(),
    }


def _entry_name(collection: Collection) -> str:
    safe = "".join(ch if ch.isalnum() or ch in "-_ " else "_" for ch in collection.name)
    return f"{safe.strip() or 'collection'}-{collection.id}.json"


MAX_RETAINED_JOBS = 20


class ZipExporter:
    """Exporter that renders synchronously and keeps recent jobs in memory.

    Only the newest max_jobs jobs stay retrievable; older ones are evicted.
    """

    def __init__(self, max_jobs: int = MAX_RETAINED_JOBS) -> None:
        self._max_jobs = max_jobs
        self._jobs: OrderedDict[UUID, ExportJob] = OrderedDict()

    async def render(self, collections: list[Collection]) -> ExportArchive:
        """Zip with one JSON manifest per collection."""
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for collection in collections:
                zf.writestr(
                    _entry_name(collection),
                    json.dumps(_manifest(collection), ensure_ascii=False, indent=2),
                )
        stamp = datetime.now(UTC).strftime("%Y%m%d%H%M%S")
        return ExportArchive(filename=f"export-{stamp}.zip", content=buf.getvalue())

    async def schedule(self, actor: Actor, collections: list[Collection]) -> ExportJob:
        job = ExportJob(
            id=uuid4(),
            requested_by=actor.user_id,
            team_id=actor.team_id,
            collection_ids=[c.id for c in collections],
            status="pending",
            created_at=datetime.now(UTC),
        )
        self._jobs[job.id] = job
        while len(self._jobs) > self._max_jobs:
            evicted, _ = self._jobs.popitem(last=False)
            logger.debug("Export job %s evicted", evicted)
        job.archive = await self.render(collections)
        job.status = "complete"
        logger.debug("Export job %s complete (%d collections)", job.id, len(collections))
        return job

    async def get_job(self, job_id: UUID) -> ExportJob | None:
        return self._jobs.get(job_id)
