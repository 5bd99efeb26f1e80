"""Auth middleware - resolves the bearer token to a fresh user snapshot."""

import falcon.asgi

from dashguard.application.ports import IdentityProvider


class AuthMiddleware:
    """Middleware that validates the token and sets req.context.user.

    The snapshot is loaded on every request so guards never decide on stale
    role, active flag or allow-lists.
    """

    def __init__(
        self,
        identity_provider: IdentityProvider | None,
        unit_of_work_factory: type,
    ) -> None:
        self._identity = identity_provider
        self._uow_factory = unit_of_work_factory

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header; None when unauthenticated."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or self._identity is None:
            return

        identity = self._identity.decode_token(auth[7:])
        if identity is None:
            return
        async with self._uow_factory() as uow:
            req.context.user = await uow.users.get_by_id(identity.subject)
