"""Organization member role and permission endpoints."""

import falcon.asgi

from crewline.application.dto.permission_dto import PermissionOverrideInput
from crewline.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from crewline.application.use_cases.permission.list_permissions import (
    ListPermissionCatalogueUseCase,
)
from crewline.application.use_cases.permission.remove_member import RemoveMemberUseCase
from crewline.application.use_cases.permission.update_member_permissions import (
    UpdateMemberPermissionsUseCase,
)
from crewline.application.use_cases.role.assign_role import AssignRoleUseCase
from crewline.domain.exceptions import ValidationError
from crewline.interfaces.api.params import (
    caller_id,
    json_body,
    optional_bool,
    optional_datetime,
    optional_uuid,
    parse_uuid,
    required,
)
from crewline.interfaces.api.serializers import to_json


class MemberRoleResource:
    """PUT /v1/members/{user_id}/role."""

    def __init__(self, assign_role: AssignRoleUseCase) -> None:
        self._assign_role = assign_role

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str) -> None:
        actor = caller_id(req)
        uid = parse_uuid(user_id, "user_id")
        body = await json_body(req)
        role_id = parse_uuid(required(body, "role_id"), "role_id")
        membership = await self._assign_role.execute(actor, uid, role_id)
        resp.media = to_json(membership)
        resp.status = falcon.HTTP_200


class MemberPermissionsResource:
    """GET/PUT /v1/members/{user_id}/permissions."""

    def __init__(
        self,
        get_permissions: GetUserPermissionsUseCase,
        update_permissions: UpdateMemberPermissionsUseCase,
    ) -> None:
        self._get_permissions = get_permissions
        self._update_permissions = update_permissions

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str) -> None:
        result = await self._get_permissions.execute(caller_id(req), parse_uuid(user_id, "user_id"))
        resp.media = to_json(result)
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str) -> None:
        """Body: {"role_id": uuid?, "overrides": [{"permission_id", "granted", "expires_at"?}]}."""
        actor = caller_id(req)
        uid = parse_uuid(user_id, "user_id")
        body = await json_body(req)
        raw_overrides = body.get("overrides") or []
        if not isinstance(raw_overrides, list):
            raise ValidationError("Invalid overrides: expected a list")
        overrides = []
        for item in raw_overrides:
            if not isinstance(item, dict):
                raise ValidationError("Invalid overrides: expected objects")
            overrides.append(
                PermissionOverrideInput(
                    permission_id=parse_uuid(required(item, "permission_id"), "permission_id"),
                    granted=optional_bool(required(item, "granted"), "granted"),
                    expires_at=optional_datetime(item.get("expires_at"), "expires_at"),
                )
            )
        await self._update_permissions.execute(
            actor,
            uid,
            role_id=optional_uuid(body.get("role_id"), "role_id"),
            overrides=overrides,
        )
        resp.status = falcon.HTTP_204


class MemberResource:
    """DELETE /v1/members/{user_id}?remove_from_projects=&remove_from_teams=."""

    def __init__(self, remove_member: RemoveMemberUseCase) -> None:
        self._remove_member = remove_member

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, user_id: str) -> None:
        await self._remove_member.execute(
            caller_id(req),
            parse_uuid(user_id, "user_id"),
            remove_from_projects=req.get_param_as_bool("remove_from_projects", default=False),
            remove_from_teams=req.get_param_as_bool("remove_from_teams", default=False),
        )
        resp.status = falcon.HTTP_204


class PermissionCatalogueResource:
    """GET /v1/permissions."""

    def __init__(self, list_permissions: ListPermissionCatalogueUseCase) -> None:
        self._list_permissions = list_permissions

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        groups = await self._list_permissions.execute(caller_id(req))
        resp.media = {"items": to_json(groups)}
        resp.status = falcon.HTTP_200
