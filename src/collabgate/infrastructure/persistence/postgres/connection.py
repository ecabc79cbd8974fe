"""PostgreSQL async connection pool."""

from psycopg_pool import AsyncConnectionPool

from collabgate.config import Settings


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Pool sized from settings, left closed.

    PoolLifespanMiddleware opens it on ASGI startup; nothing may borrow
    a connection before that.
    """
    return AsyncConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.db_pool_min_size,
        max_size=max(settings.db_pool_max_size, settings.db_pool_min_size),
        name="collabgate",
        open=False,
    )
