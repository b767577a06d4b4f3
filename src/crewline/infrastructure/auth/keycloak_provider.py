"""Keycloak token introspection - identifies the caller of a request."""

import logging
from dataclasses import dataclass, field

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

logger = logging.getLogger(__name__)


@dataclass
class CallerIdentity:
    """Identity asserted by an active access token."""

    subject: str
    email: str | None = None
    username: str | None = None
    realm_roles: list[str] = field(default_factory=list)


class KeycloakProvider:
    """Validates bearer tokens against Keycloak."""

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

    def identify(self, token: str) -> CallerIdentity | None:
        """Introspect the token; None when it is inactive or cannot be verified."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as exc:
            logger.warning("Token introspection failed: %s", exc)
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return CallerIdentity(
            subject=token_info["sub"],
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            realm_roles=token_info.get("realm_access", {}).get("roles", []),
        )
