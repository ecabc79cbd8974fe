"""Export use cases - authorization only, generation is delegated."""

import logging
from uuid import UUID

from collabgate.application.ports import ExportArchive, Exporter, ExportJob, MembershipResolver
from collabgate.application.use_cases.access import load_visible_collection
from collabgate.domain.entities import Actor
from collabgate.domain.exceptions import NotFound, PermissionDenied

logger = logging.getLogger(__name__)


class ExportCollectionUseCase:
    """Schedule an export of one collection the actor can see."""

    def __init__(
        self,
        unit_of_work_factory: type,
        membership_resolver: MembershipResolver,
        exporter: Exporter,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._membership_resolver = membership_resolver
        self._exporter = exporter

    async def execute(self, actor: Actor, collection_id: UUID) -> ExportJob:
        collection, _ = await load_visible_collection(
            self._uow_factory, self._membership_resolver, actor, collection_id
        )
        job = await self._exporter.schedule(actor, [collection])
        logger.info(
            "Export %s of collection %s requested by user %s",
            job.id,
            collection_id,
            actor.user_id,
        )
        return job


class ExportAllCollectionsUseCase:
    """Export every collection of the team. Team admins only."""

    def __init__(self, unit_of_work_factory: type, exporter: Exporter) -> None:
        self._uow_factory = unit_of_work_factory
        self._exporter = exporter

    async def execute(self, actor: Actor, download: bool = False) -> ExportJob | ExportArchive:
        """Return the archive inline when download is set, else a job handle."""
        if not actor.is_admin:
            raise PermissionDenied("Only team admins can export all collections")

        async with self._uow_factory() as uow:
            collections = await uow.collections.list_by_team(actor.team_id)

        logger.info(
            "Export of %d collections for team %s requested by user %s",
            len(collections),
            actor.team_id,
            actor.user_id,
        )
        if download:
            return await self._exporter.render(collections)
        return await self._exporter.schedule(actor, collections)


class GetExportUseCase:
    """Fetch a finished export. Requester or a team admin only."""

    def __init__(self, exporter: Exporter) -> None:
        self._exporter = exporter

    async def execute(self, actor: Actor, job_id: UUID) -> ExportJob:
        """Jobs of other teams read as missing."""
        job = await self._exporter.get_job(job_id)
        if job is None or job.team_id != actor.team_id:
            raise NotFound("Export", str(job_id))
        if job.requested_by != actor.user_id and not actor.is_admin:
            raise PermissionDenied("Only the requester or a team admin can fetch this export")
        return job
