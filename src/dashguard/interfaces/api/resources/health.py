"""Health check endpoints."""

import falcon.asgi

from dashguard import __version__


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, user_store=None) -> None:
        self._store = user_store

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok", "version": __version__}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (user store loaded)."""
        if self._store is not None and len(self._store) == 0:
            resp.media = {"status": "not ready", "reason": "no users loaded"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
