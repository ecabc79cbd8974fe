"""Application ports - interfaces for external adapters."""

from collabgate.application.ports.exporter import ExportArchive, Exporter, ExportJob
from collabgate.application.ports.membership_resolver import MembershipResolver
from collabgate.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "ExportArchive",
    "ExportJob",
    "Exporter",
    "MembershipResolver",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
