"""Role API resources."""

from typing import Any

import falcon.asgi

from crewline.application.dto.role_dto import RoleInput, RoleUpdateInput
from crewline.application.use_cases.role.create_role import CreateRoleUseCase
from crewline.application.use_cases.role.delete_role import DeleteRoleUseCase
from crewline.application.use_cases.role.list_roles import ListRolesUseCase
from crewline.application.use_cases.role.update_role import UpdateRoleUseCase
from crewline.domain.exceptions import ValidationError
from crewline.interfaces.api.params import (
    caller_id,
    json_body,
    optional_bool,
    optional_str,
    parse_uuid,
    required,
)
from crewline.interfaces.api.serializers import to_json


def _permission_ids(value: Any) -> list:
    if not isinstance(value, list):
        raise ValidationError("Invalid permission_ids: expected a list")
    return [parse_uuid(v, "permission_ids") for v in value]


def _priority(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError("Invalid priority: expected integer")
    return value


class RolesResource:
    """GET/POST /v1/roles - roles visible to the caller's current organization."""

    def __init__(self, list_roles: ListRolesUseCase, create_role: CreateRoleUseCase) -> None:
        self._list_roles = list_roles
        self._create_role = create_role

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        roles = await self._list_roles.execute(caller_id(req))
        resp.media = {"items": to_json(roles)}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = caller_id(req)
        body = await json_body(req)
        name = optional_str(required(body, "name"), "name")
        data = RoleInput(
            name=name,
            display_name=optional_str(body.get("display_name"), "display_name") or name,
            description=optional_str(body.get("description"), "description"),
            is_director=optional_bool(body.get("is_director"), "is_director") or False,
            priority=_priority(body.get("priority")) or 0,
            permission_ids=_permission_ids(body.get("permission_ids", [])),
        )
        role = await self._create_role.execute(actor, data)
        resp.media = to_json(role)
        resp.status = falcon.HTTP_201


class RoleResource:
    """PATCH/DELETE /v1/roles/{role_id}."""

    def __init__(self, update_role: UpdateRoleUseCase, delete_role: DeleteRoleUseCase) -> None:
        self._update_role = update_role
        self._delete_role = delete_role

    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        actor = caller_id(req)
        rid = parse_uuid(role_id, "role_id")
        body = await json_body(req)
        permission_ids = body.get("permission_ids")
        changes = RoleUpdateInput(
            display_name=optional_str(body.get("display_name"), "display_name"),
            description=optional_str(body.get("description"), "description"),
            is_director=optional_bool(body.get("is_director"), "is_director"),
            priority=_priority(body.get("priority")),
            permission_ids=_permission_ids(permission_ids) if permission_ids is not None else None,
        )
        role = await self._update_role.execute(actor, rid, changes)
        resp.media = to_json(role)
        resp.status = falcon.HTTP_200

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, role_id: str) -> None:
        await self._delete_role.execute(caller_id(req), parse_uuid(role_id, "role_id"))
        resp.status = falcon.HTTP_204
