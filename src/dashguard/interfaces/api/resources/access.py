"""Effective access of the calling user."""

import falcon
import falcon.asgi

from dashguard.application.use_cases.access.get_effective_access import (
    GetEffectiveAccessUseCase,
)
from dashguard.domain.value_objects import REPORT_NAMES, Module, Permission
from dashguard.interfaces.api.hooks import (
    require_module,
    require_permission,
    require_report_param,
    require_user,
)


class MyAccessResource:
    """GET /v1/me/access - permissions, modules and reports of the caller."""

    def __init__(self, get_effective_access: GetEffectiveAccessUseCase) -> None:
        self._get_access = get_effective_access

    @falcon.before(require_user())
    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        access = self._get_access.execute(req.context.user)
        resp.media = access.to_dict()
        resp.status = falcon.HTTP_200


class ReportAccessResource:
    """GET /v1/reports/{report_id}/access - may the caller open this report view?"""

    @falcon.before(require_module(Module.REPORTS))
    @falcon.before(require_permission(Permission.VIEW_REPORTS))
    @falcon.before(require_report_param("report_id"))
    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        report_id: str,
    ) -> None:
        resp.media = {
            "report_id": report_id,
            "name": REPORT_NAMES.get(report_id),
            "allowed": True,
        }
        resp.status = falcon.HTTP_200
