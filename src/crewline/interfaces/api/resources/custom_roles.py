"""Custom role bundle endpoints."""

import falcon.asgi

from crewline.application.dto.role_dto import CustomRoleInput
from crewline.application.use_cases.role.custom_roles import (
    AssignProjectRoleUseCase,
    CreateCustomRoleUseCase,
    ListProjectRolesUseCase,
)
from crewline.domain.exceptions import ValidationError
from crewline.domain.value_objects import ProjectRoleType
from crewline.interfaces.api.params import (
    caller_id,
    json_body,
    optional_datetime,
    optional_str,
    optional_uuid,
    parse_enum,
    parse_uuid,
    required,
)
from crewline.interfaces.api.serializers import to_json


class CustomRolesResource:
    """POST /v1/custom-roles.

    Body: {"name", "display_name"?, "scope", "scope_id"?, "permissions": {resource: [action]}}.
    """

    def __init__(self, create_custom_role: CreateCustomRoleUseCase) -> None:
        self._create_custom_role = create_custom_role

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = caller_id(req)
        body = await json_body(req)
        name = optional_str(required(body, "name"), "name")
        permissions = required(body, "permissions")
        if not isinstance(permissions, dict):
            raise ValidationError("Invalid permissions: expected an object")
        data = CustomRoleInput(
            name=name,
            display_name=optional_str(body.get("display_name"), "display_name") or name,
            scope=optional_str(required(body, "scope"), "scope"),
            permissions=permissions,
            description=optional_str(body.get("description"), "description"),
            scope_id=optional_uuid(body.get("scope_id"), "scope_id"),
        )
        role = await self._create_custom_role.execute(actor, data)
        resp.media = to_json(role)
        resp.status = falcon.HTTP_201


class ProjectRolesResource:
    """GET/POST /v1/projects/{project_id}/roles."""

    def __init__(
        self,
        list_roles: ListProjectRolesUseCase,
        assign_role: AssignProjectRoleUseCase,
    ) -> None:
        self._list_roles = list_roles
        self._assign_role = assign_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str) -> None:
        roles = await self._list_roles.execute(caller_id(req), parse_uuid(project_id, "project_id"))
        resp.media = {"items": to_json(roles)}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, project_id: str) -> None:
        """Body: {"user_id", "role_type": member|admin|owner, "expires_at"?}."""
        actor = caller_id(req)
        body = await json_body(req)
        assignment = await self._assign_role.execute(
            actor,
            parse_uuid(project_id, "project_id"),
            parse_uuid(required(body, "user_id"), "user_id"),
            parse_enum(ProjectRoleType, required(body, "role_type"), "role_type"),
            expires_at=optional_datetime(body.get("expires_at"), "expires_at"),
        )
        resp.media = to_json(assignment)
        resp.status = falcon.HTTP_201
