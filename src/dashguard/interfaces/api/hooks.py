"""Falcon before-hooks that gate responders on access control decisions.

Usage::

    class SalesResource:
        @falcon.before(require_module(Module.SALES))
        @falcon.before(require_permission(Permission.CREATE_SALES))
        async def on_post(self, req, resp): ...

Anything other than an explicit True from the evaluator is a denial.
"""

import logging
from collections.abc import Callable

import falcon
import falcon.asgi

from dashguard.domain.access_control import AccessControlEvaluator, default_evaluator
from dashguard.domain.entities import User
from dashguard.domain.value_objects import Module, Permission, ReportId

logger = logging.getLogger(__name__)

AUTHENTICATION_REQUIRED = "Authentication required"
ACCOUNT_DEACTIVATED = (
    "Your account has been deactivated. Please contact an administrator."
)
ADMIN_REQUIRED = "Access denied. Admin privileges required."

Hook = Callable[..., object]


def _current_user(req: falcon.asgi.Request) -> User:
    user = getattr(req.context, "user", None)
    if user is None:
        raise falcon.HTTPUnauthorized(description=AUTHENTICATION_REQUIRED)
    return user


def _guard(
    decide: Callable[[User, dict], bool],
    denial: Callable[[dict], str],
    check_active: bool = True,
) -> Hook:
    async def hook(req, resp, resource, params) -> None:
        user = _current_user(req)
        if decide(user, params) is True:
            return
        if check_active and not user.is_active and not user.is_administrator:
            logger.info("Denied %s %s to deactivated user %s", req.method, req.path, user.username)
            raise falcon.HTTPForbidden(description=ACCOUNT_DEACTIVATED)
        message = denial(params)
        logger.info("Denied %s %s to user %s: %s", req.method, req.path, user.username, message)
        raise falcon.HTTPForbidden(description=message)

    return hook


def require_user() -> Hook:
    """Only require an authenticated user."""

    async def hook(req, resp, resource, params) -> None:
        _current_user(req)

    return hook


def require_active() -> Hook:
    """Reject deactivated accounts, administrators included."""

    async def hook(req, resp, resource, params) -> None:
        user = _current_user(req)
        if not user.is_active:
            raise falcon.HTTPForbidden(description=ACCOUNT_DEACTIVATED)

    return hook


def require_admin(evaluator: AccessControlEvaluator | None = None) -> Hook:
    evaluator = evaluator or default_evaluator
    return _guard(
        lambda user, params: evaluator.is_administrator(user),
        lambda params: ADMIN_REQUIRED,
        check_active=False,
    )


def require_permission(
    permission: Permission, evaluator: AccessControlEvaluator | None = None
) -> Hook:
    evaluator = evaluator or default_evaluator
    return _guard(
        lambda user, params: evaluator.can_use_capability(user, permission),
        lambda params: f"You don't have permission to {permission}",
    )


def require_module(module: Module, evaluator: AccessControlEvaluator | None = None) -> Hook:
    evaluator = evaluator or default_evaluator
    return _guard(
        lambda user, params: evaluator.can_open_module(user, module),
        lambda params: f"You don't have access to the {module} module",
    )


def require_report(report: ReportId, evaluator: AccessControlEvaluator | None = None) -> Hook:
    evaluator = evaluator or default_evaluator
    return _guard(
        lambda user, params: evaluator.can_view_report(user, report),
        lambda params: f"You don't have access to the {report} report",
    )


def require_report_param(
    name: str = "report_id", evaluator: AccessControlEvaluator | None = None
) -> Hook:
    """Gate on a report id taken from the URI template field `name`."""
    evaluator = evaluator or default_evaluator
    return _guard(
        lambda user, params: evaluator.can_view_report(user, params.get(name)),
        lambda params: f"You don't have access to the {params.get(name)} report",
    )
