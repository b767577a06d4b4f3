"""Project and document sharing endpoints."""

import falcon.asgi

from crewline.application.use_cases.permission.accessible_projects import (
    ListAccessibleProjectsUseCase,
)
from crewline.application.use_cases.permission.document_access import GrantDocumentAccessUseCase
from crewline.application.use_cases.permission.project_access import (
    CheckProjectAccessUseCase,
    GrantProjectAccessUseCase,
    ListProjectAccessUseCase,
    RevokeProjectAccessUseCase,
)
from crewline.domain.value_objects import AccessLevel, DocumentAccessLevel
from crewline.interfaces.api.params import (
    caller_id,
    json_body,
    optional_datetime,
    optional_uuid,
    parse_enum,
    parse_uuid,
    required,
)
from crewline.interfaces.api.serializers import to_json


class ProjectAccessResource:
    """GET/POST/DELETE /v1/projects/{project_id}/access.

    GET lists grants; with ?required_level=... it instead reports whether the
    caller holds that tier.
    """

    def __init__(
        self,
        list_access: ListProjectAccessUseCase,
        check_access: CheckProjectAccessUseCase,
        grant_access: GrantProjectAccessUseCase,
        revoke_access: RevokeProjectAccessUseCase,
    ) -> None:
        self._list_access = list_access
        self._check_access = check_access
        self._grant_access = grant_access
        self._revoke_access = revoke_access

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str) -> None:
        actor = caller_id(req)
        pid = parse_uuid(project_id, "project_id")
        required_level = req.get_param("required_level")
        if required_level is not None:
            level = parse_enum(AccessLevel, required_level, "required_level")
            decision = await self._check_access.execute(actor, pid, level)
            resp.media = to_json(decision)
        else:
            resp.media = to_json(await self._list_access.execute(actor, pid))
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str) -> None:
        actor = caller_id(req)
        pid = parse_uuid(project_id, "project_id")
        body = await json_body(req)
        grant = await self._grant_access.execute(
            actor,
            pid,
            parse_enum(AccessLevel, required(body, "access_level"), "access_level"),
            user_id=optional_uuid(body.get("user_id"), "user_id"),
            team_id=optional_uuid(body.get("team_id"), "team_id"),
            expires_at=optional_datetime(body.get("expires_at"), "expires_at"),
        )
        resp.media = to_json(grant)
        resp.status = falcon.HTTP_201

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str) -> None:
        """Grantee comes from ?user_id= and/or ?team_id=."""
        actor = caller_id(req)
        pid = parse_uuid(project_id, "project_id")
        removed = await self._revoke_access.execute(
            actor,
            pid,
            user_id=optional_uuid(req.get_param("user_id"), "user_id"),
            team_id=optional_uuid(req.get_param("team_id"), "team_id"),
        )
        resp.media = {"removed": removed}
        resp.status = falcon.HTTP_200


class DocumentAccessResource:
    """POST /v1/documents/{document_id}/access."""

    def __init__(self, grant_access: GrantDocumentAccessUseCase) -> None:
        self._grant_access = grant_access

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str) -> None:
        actor = caller_id(req)
        did = parse_uuid(document_id, "document_id")
        body = await json_body(req)
        grant = await self._grant_access.execute(
            actor,
            did,
            parse_enum(DocumentAccessLevel, required(body, "access_level"), "access_level"),
            user_id=optional_uuid(body.get("user_id"), "user_id"),
            team_id=optional_uuid(body.get("team_id"), "team_id"),
            expires_at=optional_datetime(body.get("expires_at"), "expires_at"),
        )
        resp.media = to_json(grant)
        resp.status = falcon.HTTP_201


class AccessibleProjectsResource:
    """GET /v1/projects/accessible - projects the caller holds any tier on."""

    def __init__(self, list_accessible: ListAccessibleProjectsUseCase) -> None:
        self._list_accessible = list_accessible

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        projects = await self._list_accessible.execute(caller_id(req))
        resp.media = {"items": to_json(projects)}
        resp.status = falcon.HTTP_200
