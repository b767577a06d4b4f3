"""Translate domain errors into HTTP responses."""

import logging

import falcon
import falcon.asgi

from crewline.domain.exceptions import (
    CrewlineError,
    InvariantViolation,
    NotAuthenticated,
    NotFound,
    PermissionDenied,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS = {
    NotAuthenticated: falcon.HTTP_401,
    PermissionDenied: falcon.HTTP_403,
    NotFound: falcon.HTTP_404,
    ValidationError: falcon.HTTP_400,
    InvariantViolation: falcon.HTTP_409,
}


def status_for(error: CrewlineError) -> str:
    for error_type, status in _STATUS.items():
        if isinstance(error, error_type):
            return status
    return falcon.HTTP_400


async def handle_domain_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: CrewlineError, params: dict
) -> None:
    resp.status = status_for(ex)
    resp.media = {"error": str(ex)}
    if isinstance(ex, PermissionDenied):
        logger.warning("%s %s denied: %s", req.method, req.path, ex)


async def handle_unexpected_error(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    logger.exception("Unhandled error on %s %s", req.method, req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def register_error_handlers(app: falcon.asgi.App) -> None:
    """Domain errors map to 4xx with {"error": message}; anything else is a logged 500."""
    app.add_error_handler(Exception, handle_unexpected_error)
    app.add_error_handler(CrewlineError, handle_domain_error)
