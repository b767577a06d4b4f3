"""Auth middleware - resolves the bearer token to a caller."""

from dataclasses import dataclass

import falcon.asgi


@dataclass
class RequestUser:
    """Caller attached to req.context.user."""

    user_id: str
    email: str | None = None
    username: str | None = None


class AuthMiddleware:
    """Sets req.context.user from the Authorization header, or None.

    Resources pass the caller to use cases, which reject a missing caller
    with 401, so public routes such as health need no special casing.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        identity = self._keycloak.identify(auth[7:])
        if identity:
            req.context.user = RequestUser(
                user_id=identity.subject,
                email=identity.email,
                username=identity.username,
            )
