"""Application entry point and composition root."""

import logging

import falcon
import falcon.asgi

from dashguard import __version__
from dashguard.application.use_cases.access.get_effective_access import (
    GetEffectiveAccessUseCase,
)
from dashguard.application.use_cases.user.create_user import CreateUserUseCase
from dashguard.application.use_cases.user.delete_user import DeleteUserUseCase
from dashguard.application.use_cases.user.list_users import ListUsersUseCase
from dashguard.application.use_cases.user.update_user_access import UpdateUserAccessUseCase
from dashguard.config import Settings, get_settings
from dashguard.domain.access_control import default_evaluator
from dashguard.infrastructure.auth.keycloak_provider import KeycloakProvider
from dashguard.infrastructure.persistence.memory.seed import load_seed_users
from dashguard.infrastructure.persistence.memory.unit_of_work import InMemoryUserStore
from dashguard.interfaces.api.middleware.auth import AuthMiddleware
from dashguard.interfaces.api.resources.access import MyAccessResource, ReportAccessResource
from dashguard.interfaces.api.resources.catalog import PermissionCatalogResource
from dashguard.interfaces.api.resources.health import HealthResource
from dashguard.interfaces.api.resources.users import (
    UserPermissionsResource,
    UserResource,
    UsersResource,
)
from dashguard.logging_config import configure_logging

logger = logging.getLogger(__name__)


def main() -> None:
    """CLI entry point."""
    print(f"dashguard v{__version__}")


def add_routes(
    app: falcon.asgi.App,
    store: InMemoryUserStore,
    settings: Settings | None = None,
) -> falcon.asgi.App:
    """Wire use cases and resources onto app."""
    settings = settings or get_settings()
    evaluator = default_evaluator
    uow_factory = store.unit_of_work

    create_user = CreateUserUseCase(
        unit_of_work_factory=uow_factory,
        evaluator=evaluator,
        default_role=settings.default_role,
    )
    update_user_access = UpdateUserAccessUseCase(
        unit_of_work_factory=uow_factory,
        evaluator=evaluator,
    )
    list_users = ListUsersUseCase(uow_factory, evaluator)
    delete_user = DeleteUserUseCase(uow_factory, evaluator)
    get_effective_access = GetEffectiveAccessUseCase(evaluator)

    health = HealthResource(store)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/permissions/available", PermissionCatalogResource(evaluator))
    app.add_route("/v1/me/access", MyAccessResource(get_effective_access))
    app.add_route("/v1/reports/{report_id}/access", ReportAccessResource())
    app.add_route("/v1/users", UsersResource(list_users, create_user))
    app.add_route("/v1/users/{user_id}", UserResource(delete_user))
    app.add_route("/v1/users/{user_id}/permissions", UserPermissionsResource(update_user_access))
    return app


def create_dashguard_app(settings: Settings | None = None) -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    users = load_seed_users(settings.users_seed_file) if settings.users_seed_file else []
    store = InMemoryUserStore(users)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("No Keycloak client secret configured; all requests are unauthenticated")

    app = falcon.asgi.App(
        middleware=[
            falcon.CORSMiddleware(allow_origins=settings.cors_origin_list or "*"),
            AuthMiddleware(keycloak, store.unit_of_work),
        ],
    )

    async def log_exception(req, resp, ex, params):
        logger.error("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
        resp.status = falcon.HTTP_500
        resp.media = {"title": "500 Internal Server Error"}

    app.add_error_handler(Exception, log_exception)
    return add_routes(app, store, settings=settings)


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        create_dashguard_app(settings),
        host="0.0.0.0",
        port=8000,
        log_level=settings.log_level.lower(),
    )
