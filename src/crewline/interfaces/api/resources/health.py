"""Health check endpoints."""

from collections.abc import Awaitable, Callable

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, ready_check: Callable[[], Awaitable[bool]] | None = None) -> None:
        self._ready_check = ready_check

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (database reachable)."""
        if self._ready_check is not None and not await self._ready_check():
            resp.media = {"status": "unavailable", "database": "down"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
