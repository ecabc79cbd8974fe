"""PostgreSQL membership repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from collabgate.domain.entities import Membership
from collabgate.domain.exceptions import InvariantViolation
from collabgate.domain.value_objects import PermissionLevel

_COLUMNS = "id, collection_id, user_id, permission, created_by, created_at, updated_at"


def _row_to_membership(r: tuple) -> Membership:
    try:
        permission = PermissionLevel(r[3])
    except ValueError:
        raise InvariantViolation(f"Membership {r[0]} has unknown permission {r[3]!r}") from None
    return Membership(
        id=r[0],
        collection_id=r[1],
        user_id=r[2],
        permission=permission,
        created_by=r[4],
        created_at=r[5],
        updated_at=r[6],
    )


class PostgresMembershipRepository:
    """Membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_for_collection(
        self, collection_id: UUID, user_id: UUID, for_share: bool = False
    ) -> Membership | None:
        """Get membership of user on collection.

        for_share holds a row lock until transaction end, blocking concurrent
        removal or level changes.
        """
        lock = " FOR SHARE" if for_share else ""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collection_user WHERE collection_id = %s AND user_id = %s"
            + lock,
            (collection_id, user_id),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_membership(r)

    async def list_by_collection(self, collection_id: UUID) -> list[Membership]:
        """List memberships for collection."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collection_user WHERE collection_id = %s ORDER BY created_at, id",
            (collection_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_membership(r) for r in rows]

    async def list_by_user(self, user_id: UUID) -> list[Membership]:
        """List memberships held by user."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM collection_user WHERE user_id = %s",
            (user_id,),
        )
        rows = await cur.fetchall()
        return [_row_to_membership(r) for r in rows]

    async def create(self, membership: Membership) -> Membership:
        """Insert membership; a concurrent insert for the same pair becomes an update."""
        cur = await self._conn.execute(
            f"INSERT INTO collection_user ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (collection_id, user_id) DO UPDATE "
            "SET permission = EXCLUDED.permission, updated_at = EXCLUDED.updated_at "
            f"RETURNING {_COLUMNS}",
            (
                membership.id,
                membership.collection_id,
                membership.user_id,
                membership.permission.value,
                membership.created_by,
                membership.created_at,
                membership.updated_at,
            ),
        )
        r = await cur.fetchone()
        return _row_to_membership(r)

    async def update(self, membership: Membership) -> None:
        """Update membership permission."""
        await self._conn.execute(
            "UPDATE collection_user SET permission=%s, updated_at=%s WHERE id=%s",
            (membership.permission.value, membership.updated_at, membership.id),
        )

    async def delete(self, membership_id: UUID) -> None:
        """Delete membership."""
        await self._conn.execute(
            "DELETE FROM collection_user WHERE id = %s",
            (membership_id,),
        )

    async def delete_by_collection(self, collection_id: UUID) -> None:
        """Delete all memberships of a collection."""
        await self._conn.execute(
            "DELETE FROM collection_user WHERE collection_id = %s",
            (collection_id,),
        )
