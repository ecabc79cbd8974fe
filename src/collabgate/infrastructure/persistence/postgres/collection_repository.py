"""PostgreSQL collection repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from collabgate.domain.entities import Collection
from collabgate.domain.exceptions import InvariantViolation
from collabgate.domain.value_objects import CollectionType

_COLUMNS = "id, team_id, creator_id, name, type, private, description, created_at, updated_at"


def _row_to_collection(r: tuple) -> Collection:
    try:
        collection_type = CollectionType(r[4])
    except ValueError:
        raise InvariantViolation(f"Collection {r[0]} has unknown type {r[4]!r}") from None
    return Collection(
        id=r[0],
        team_id=r[1],
        creator_id=r[2],
        name=r[3],
        type=collection_type,
        private=r[5],
        description=r[6],
        created_at=r[7],
        updated_at=r[8],
    )


class PostgresCollectionRepository:
    """Collection repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, collection_id: UUID) -> Collection | None:
        """Get collection by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collection WHERE id = %s",
            (collection_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_collection(r)

    async def get_for_update(self, collection_id: UUID) -> Collection | None:
        """Get collection and lock its row until transaction end."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collection WHERE id = %s FOR UPDATE",
            (collection_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_collection(r)

    async def list_by_team(self, team_id: UUID) -> list[Collection]:
        """List team collections in creation order."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collection WHERE team_id = %s ORDER BY created_at, id",
            (team_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_collection(r) for r in rows]

    async def count_by_team(self, team_id: UUID) -> int:
        """Count team collections."""
        cur = await self._conn.execute(
            "SELECT COUNT(*) FROM collection WHERE team_id = %s",
            (team_id,),
        )
        r = await cur.fetchone()
        return r[0]

    async def lock_team(self, team_id: UUID) -> None:
        """Serialize collection create/delete for a team until transaction end."""
        await self._conn.execute(
            "SELECT pg_advisory_xact_lock(hashtextextended(%s, 0))",
            (str(team_id),),
        )

    async def create(self, collection: Collection) -> Collection:
        """Create collection."""
        await self._conn.execute(
            f"INSERT INTO collection ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                collection.id,
                collection.team_id,
                collection.creator_id,
                collection.name,
                collection.type.value,
                collection.private,
                collection.description,
                collection.created_at,
                collection.updated_at,
            ),
        )
        return collection

    async def update(self, collection: Collection) -> None:
        """Update mutable collection fields."""
        await self._conn.execute(
            "UPDATE collection SET name=%s, type=%s, private=%s, description=%s, updated_at=%s "
            "WHERE id=%s",
            (
                collection.name,
                collection.type.value,
                collection.private,
                collection.description,
                collection.updated_at,
                collection.id,
            ),
        )

    async def delete(self, collection_id: UUID) -> None:
        """Delete collection. Memberships cascade."""
        await self._conn.execute(
            "DELETE FROM collection WHERE id = %s",
            (collection_id,),
        )
