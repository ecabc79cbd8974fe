"""Collection type tags."""

from enum import StrEnum


class CollectionType(StrEnum):
    """Kinds of collection a team can create."""

    ATLAS = "atlas"
    JOURNAL = "journal"
