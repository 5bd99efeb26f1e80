"""Keycloak OIDC provider for bearer token validation."""

import logging

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from dashguard.application.ports import Identity

logger = logging.getLogger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects tokens and extracts the principal."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> Identity | None:
        """Introspect token, return the identity or None when it is not active."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as exc:
            logger.warning("Token introspection failed: %s", exc)
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return Identity(
            subject=token_info["sub"],
            username=token_info.get("preferred_username"),
            email=token_info.get("email"),
        )
