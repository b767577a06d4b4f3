"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from crewline.infrastructure.permission.permission_checker import RoleBasedPermissionChecker
from crewline.interfaces.api.middleware.auth import RequestUser
from crewline.main import build_app

from tests.conftest import NOW


class AuthBypassMiddleware:
    """Sets context.user from the X-Test-Subject header instead of a bearer token."""

    async def process_request(self, req, resp):
        subject = req.get_header("X-Test-Subject")
        req.context.user = RequestUser(user_id=subject) if subject else None


@pytest.fixture
def app(uow_factory):
    """Falcon ASGI app wired with in-memory repositories and the real policy evaluator."""
    checker = RoleBasedPermissionChecker(uow_factory, clock=lambda: NOW)
    return build_app(uow_factory, checker, middleware=[AuthBypassMiddleware()])


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


def as_user(user) -> dict[str, str]:
    return {"X-Test-Subject": user.auth_id}
