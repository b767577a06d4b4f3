"""Get user permissions use case."""

from uuid import UUID

from crewline.application.dto.permission_dto import OverrideOutput, UserPermissionsOutput
from crewline.application.ports import PermissionChecker
from crewline.application.use_cases.context import current_organization_context
from crewline.domain.exceptions import NotFound, PermissionDenied
from crewline.domain.value_objects import PermissionAction, PermissionResource


class GetUserPermissionsUseCase:
    """Role, role permissions, overrides and effective permissions of a user."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, user_id: UUID) -> UserPermissionsOutput:
        """Users may always read their own permissions."""
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)

        if user_id != ctx.user.id:
            allowed = await self._permission_checker.check(
                ctx.user.id, PermissionResource.PERMISSIONS, PermissionAction.READ
            )
            if not allowed:
                raise PermissionDenied("Insufficient permissions to view user permissions")

        async with self._uow_factory() as uow:
            target = await uow.users.get_by_id(user_id)
            if not target:
                raise NotFound("User", str(user_id))

            membership = await uow.members.get(ctx.organization.id, user_id)
            role_id = membership.role_id if membership and membership.is_active else target.role_id
            role = await uow.roles.get_by_id(role_id) if role_id else None
            role_permissions = await uow.roles.list_permissions(role.id) if role else []

            overrides = []
            for override in await uow.user_permissions.list_by_user(user_id):
                permission = await uow.permissions.get_by_id(override.permission_id)
                if permission:
                    overrides.append(OverrideOutput(override=override, permission=permission))

        effective = await self._permission_checker.effective_permissions(user_id)
        return UserPermissionsOutput(
            user_id=user_id,
            role=role,
            role_permissions=role_permissions,
            overrides=overrides,
            effective=[f"{resource}:{action}" for resource, action in effective],
        )
