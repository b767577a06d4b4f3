"""Pool lifespan middleware - opens the database pool on startup, closes it on shutdown."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

logger = logging.getLogger(__name__)


class PoolLifespanMiddleware:
    """ASGI lifespan hooks for the psycopg connection pool."""

    def __init__(self, pool: AsyncConnectionPool, wait: bool = False) -> None:
        self._pool = pool
        self._wait = wait

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        """Open the pool; with wait=True block until min_size connections are up."""
        await self._pool.open(wait=self._wait)
        logger.info("Database pool opened (min=%d, max=%d)", self._pool.min_size, self._pool.max_size)

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        await self._pool.close()
        logger.info("Database pool closed")
