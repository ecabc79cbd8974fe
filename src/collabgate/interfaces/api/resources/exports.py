"""Export API resources."""

import falcon.asgi

from collabgate.application.ports import ExportArchive, ExportJob
from collabgate.application.use_cases.export.export_collections import (
    ExportAllCollectionsUseCase,
    ExportCollectionUseCase,
    GetExportUseCase,
)
from collabgate.domain.exceptions import CollabGateError
from collabgate.interfaces.api.resources.common import (
    optional_bool,
    parse_uuid,
    read_body,
    require_actor,
    set_error,
)


def _job_to_dict(job: ExportJob) -> dict:
    return {
        "id": str(job.id),
        "status": job.status,
        "collection_ids": [str(c) for c in job.collection_ids],
        "created_at": job.created_at.isoformat(),
    }


def _send_archive(resp: falcon.asgi.Response, archive: ExportArchive) -> None:
    resp.content_type = "application/force-download"
    resp.set_header("Content-Disposition", f'attachment; filename="{archive.filename}"')
    resp.data = archive.content
    resp.status = falcon.HTTP_200


class CollectionExportResource:
    """POST /v1/collections/{collection_id}/export - export one collection."""

    def __init__(self, export_collection: ExportCollectionUseCase) -> None:
        self._export = export_collection

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        collection_id: str,
    ) -> None:
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            job = await self._export.execute(actor, parse_uuid(collection_id, "collection ID"))
        except CollabGateError as e:
            set_error(resp, e)
            return

        resp.media = {"data": _job_to_dict(job)}
        resp.status = falcon.HTTP_202


class ExportsResource:
    """POST /v1/exports - export all team collections (team admins)."""

    def __init__(self, export_all: ExportAllCollectionsUseCase) -> None:
        self._export_all = export_all

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """{"download": true} streams the archive back directly."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            body = await read_body(req)
            download = bool(optional_bool(body, "download"))
            result = await self._export_all.execute(actor, download=download)
        except CollabGateError as e:
            set_error(resp, e)
            return

        if isinstance(result, ExportArchive):
            _send_archive(resp, result)
            return

        resp.media = {"data": _job_to_dict(result)}
        resp.status = falcon.HTTP_202


class ExportResource:
    """GET /v1/exports/{job_id} - download a finished export."""

    def __init__(self, get_export: GetExportUseCase) -> None:
        self._get_export = get_export

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        job_id: str,
    ) -> None:
        """Archive when ready, else the job status with 202."""
        actor = require_actor(req, resp)
        if not actor:
            return

        try:
            job = await self._get_export.execute(actor, parse_uuid(job_id, "export ID"))
        except CollabGateError as e:
            set_error(resp, e)
            return

        if job.archive is None:
            resp.media = {"data": _job_to_dict(job)}
            resp.status = falcon.HTTP_202
            return
        _send_archive(resp, job.archive)
