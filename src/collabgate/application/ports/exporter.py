"""Exporter port - builds downloadable archives of collections."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Protocol
from uuid import UUID

from collabgate.domain.entities import Actor, Collection


@dataclass
class ExportArchive:
    """Rendered export, returned inline for direct downloads."""

    filename: str
    content: bytes
    content_type: str = "application/zip"


@dataclass
class ExportJob:
    """Handle for a scheduled export."""

    id: UUID
    requested_by: UUID
    team_id: UUID
    collection_ids: list[UUID]
    status: str
    created_at: datetime
    archive: ExportArchive | None = field(default=None, repr=False)


class Exporter(Protocol):
    """Port for export file generation."""

    async def schedule(self, actor: Actor, collections: list[Collection]) -> ExportJob: ...

    async def render(self, collections: list[Collection]) -> ExportArchive: ...

    async def get_job(self, job_id: UUID) -> ExportJob | None: ...
