"""PostgreSQL user repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from collabgate.domain.entities import User

_COLUMNS = "id, team_id, name, email, is_admin, created_at"


def _row_to_user(r: tuple) -> User:
    return User(
        id=r[0],
        team_id=r[1],
        name=r[2],
        email=r[3],
        is_admin=r[4],
        created_at=r[5],
    )


class PostgresUserRepository:
    """User repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        """Get user by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s",
            (user_id,),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_user(r)

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]:
        """Get users by ids, ordered by name."""
        if not user_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = ANY(%s) ORDER BY name, id",
            (list(user_ids),),
        )
        rows = await cur.fetchall()
        return [_row_to_user(r) for r in rows]
