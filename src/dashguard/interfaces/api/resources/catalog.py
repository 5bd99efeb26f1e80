"""Permission catalog resource."""

import falcon
import falcon.asgi

from dashguard.application.use_cases.access.describe_catalog import describe_catalog
from dashguard.domain.access_control import AccessControlEvaluator
from dashguard.interfaces.api.hooks import require_admin


class PermissionCatalogResource:
    """GET /v1/permissions/available - permissions, modules, reports and role defaults."""

    def __init__(self, evaluator: AccessControlEvaluator) -> None:
        self._evaluator = evaluator

    @falcon.before(require_admin())
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        resp.media = describe_catalog(self._evaluator)
        resp.status = falcon.HTTP_200
