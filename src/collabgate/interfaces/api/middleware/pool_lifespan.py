"""Pool lifespan middleware - opens the pool on startup, closes on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """Ties the connection pool to the ASGI lifespan and reports readiness."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self.ready = False

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.open()
        self.ready = True
        logger.info("Database pool opened (max_size=%d)", self._pool.max_size)

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        self.ready = False
        await self._pool.close()
        logger.info("Database pool closed")
