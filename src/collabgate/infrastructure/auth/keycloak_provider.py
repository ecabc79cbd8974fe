"""Keycloak OIDC provider - resolves the calling actor from a JWT."""

import logging
from uuid import UUID

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from collabgate.domain.entities import Actor

logger = logging.getLogger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects JWT and maps claims to an Actor."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
        team_claim: str = "team_id",
        admin_role: str = "admin",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )
        self._team_claim = team_claim
        self._admin_role = admin_role

    def actor_from_claims(self, token_info: dict) -> Actor | None:
        """Build actor from introspection result, or None if unusable."""
        if not token_info.get("active"):
            return None
        try:
            user_id = UUID(str(token_info.get("sub")))
            team_id = UUID(str(token_info.get(self._team_claim)))
        except (ValueError, TypeError, AttributeError):
            logger.debug("Token lacks a valid subject or %s claim", self._team_claim)
            return None
        realm_access = token_info.get("realm_access") or {}
        roles = realm_access.get("roles") if isinstance(realm_access, dict) else None
        if not isinstance(roles, list):
            roles = []
        return Actor(
            user_id=user_id,
            team_id=team_id,
            is_admin=self._admin_role in roles,
        )

    def decode_token(self, token: str) -> Actor | None:
        """Validate JWT, return actor or None."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        return self.actor_from_claims(token_info)
