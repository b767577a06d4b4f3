"""Custom role bundles: creation, per-project bundles and their assignment."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.dto.role_dto import CustomRoleInput
from crewline.application.ports import PermissionChecker, UnitOfWork
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import ActorContext, current_organization_context
from crewline.application.use_cases.permission.project_access import (
    effective_project_level,
    load_project,
)
from crewline.domain.entities import CustomRole, UserCustomRole
from crewline.domain.exceptions import (
    InvariantViolation,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from crewline.domain.permission_catalogue import PROJECT_ROLES
from crewline.domain.policies import is_admin
from crewline.domain.value_objects import (
    AccessLevel,
    AuditAction,
    PermissionAction,
    PermissionResource,
    ProjectRoleType,
    RoleScope,
)

logger = logging.getLogger(__name__)


def normalize_bundle(permissions: dict) -> dict[str, list[str]]:
    """Validate a resource -> actions map against the known resources and actions."""
    if not isinstance(permissions, dict) or not permissions:
        raise ValidationError("Permissions must map resources to actions")
    bundle: dict[str, list[str]] = {}
    for resource, actions in permissions.items():
        try:
            resource = PermissionResource(resource)
        except ValueError:
            raise ValidationError(f"Unknown resource: {resource}") from None
        if not isinstance(actions, list) or not actions:
            raise ValidationError(f"Actions for {resource} must be a non-empty list")
        try:
            parsed = [PermissionAction(a) for a in actions]
        except ValueError:
            raise ValidationError(f"Unknown action for {resource}") from None
        bundle[str(resource)] = sorted(set(map(str, parsed)))
    return dict(sorted(bundle.items()))


async def ensure_project_roles(uow: UnitOfWork, project_id: UUID) -> dict[str, CustomRole]:
    """Create the member, admin and owner bundles of a project if missing."""
    roles: dict[str, CustomRole] = {}
    for role_type, spec in PROJECT_ROLES.items():
        role = await uow.custom_roles.get_by_name(spec.name, RoleScope.PROJECT, project_id)
        if role is None:
            role = CustomRole(
                id=uuid4(),
                name=spec.name,
                display_name=spec.display_name,
                scope=str(RoleScope.PROJECT),
                created_at=datetime.now(UTC),
                permissions={r: list(a) for r, a in spec.permissions.items()},
                description=spec.description,
                scope_id=project_id,
            )
            await uow.custom_roles.create(role)
        roles[role_type] = role
    return roles


class CreateCustomRoleUseCase:
    """Create a named permission bundle scoped to the organization or one of its projects."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, data: CustomRoleInput) -> CustomRole:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Role name is required")
        try:
            scope = RoleScope(data.scope)
        except ValueError:
            allowed = ", ".join(s.value for s in RoleScope)
            raise ValidationError(f"Invalid scope: expected one of {allowed}") from None
        permissions = normalize_bundle(data.permissions)

        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            if not is_admin(ctx.membership, ctx.role):
                raise PermissionDenied("Insufficient permissions to create roles")

            scope_id = await self._resolve_scope_id(uow, ctx, scope, data.scope_id)
            if await uow.custom_roles.get_by_name(name, scope, scope_id):
                raise InvariantViolation("Custom role already exists")
            for existing in await uow.custom_roles.list_by_scope(scope, scope_id):
                if normalize_bundle(existing.permissions) == permissions:
                    raise InvariantViolation("Duplicate permissions")

            role = CustomRole(
                id=uuid4(),
                name=name,
                display_name=data.display_name or name,
                scope=str(scope),
                created_at=datetime.now(UTC),
                permissions=permissions,
                description=data.description,
                scope_id=scope_id,
            )
            await uow.custom_roles.create(role)
            await record_audit(
                uow,
                ctx.user.id,
                AuditAction.CUSTOM_ROLE_CREATED,
                custom_role_id=role.id,
                name=name,
                scope=str(scope),
                scope_id=scope_id,
            )
            logger.info("Custom role %s created in scope %s", name, scope)

        return role

    async def _resolve_scope_id(
        self, uow: UnitOfWork, ctx: ActorContext, scope: RoleScope, scope_id: UUID | None
    ) -> UUID | None:
        if scope == RoleScope.ORGANIZATION:
            return ctx.organization.id
        if not scope.needs_scope_id:
            return None
        if scope_id is None:
            raise ValidationError(f"scope_id is required for {scope} roles")
        if scope == RoleScope.PROJECT:
            await load_project(uow, ctx, scope_id)
        elif scope == RoleScope.TEAM:
            team = await uow.teams.get_by_id(scope_id)
            if not team or team.organization_id != ctx.organization.id:
                raise NotFound("Team", str(scope_id))
        return scope_id


class ListProjectRolesUseCase:
    """Bundles defined on a project; the caller needs some tier on it."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, project_id: UUID) -> list[CustomRole]:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            await load_project(uow, ctx, project_id)

        level = await effective_project_level(self._permission_checker, ctx.user.id, project_id)
        if level is None:
            raise PermissionDenied("Insufficient permissions to view project roles")

        async with self._uow_factory() as uow:
            return await uow.custom_roles.list_by_scope(RoleScope.PROJECT, project_id)


class AssignProjectRoleUseCase:
    """Give a member the member, admin or owner bundle of a project."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        project_id: UUID,
        user_id: UUID,
        role_type: ProjectRoleType,
        expires_at: datetime | None = None,
    ) -> UserCustomRole:
        role_type = ProjectRoleType(role_type)

        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            await load_project(uow, ctx, project_id)
            membership = await uow.members.get(ctx.organization.id, user_id)
            if not membership or not membership.is_active:
                raise NotFound("Member", str(user_id), message="Member not found in organization")

        required = AccessLevel.OWNER if role_type == ProjectRoleType.OWNER else AccessLevel.ADMIN
        level = await effective_project_level(self._permission_checker, ctx.user.id, project_id)
        if level is None or not level.satisfies(required):
            raise PermissionDenied("Insufficient permissions to assign project roles")

        async with self._uow_factory() as uow:
            roles = await ensure_project_roles(uow, project_id)
            role = roles[role_type]
            assignment = await uow.user_custom_roles.get(user_id, role.id)
            if assignment:
                assignment.granted = True
                assignment.expires_at = expires_at
                await uow.user_custom_roles.update(assignment)
            else:
                assignment = UserCustomRole(
                    id=uuid4(),
                    user_id=user_id,
                    role_id=role.id,
                    created_at=datetime.now(UTC),
                    expires_at=expires_at,
                )
                await uow.user_custom_roles.create(assignment)
            await record_audit(
                uow,
                ctx.user.id,
                AuditAction.CUSTOM_ROLE_ASSIGNED,
                target_user_id=user_id,
                custom_role_id=role.id,
                project_id=project_id,
                role_type=str(role_type),
                expires_at=expires_at,
            )
            logger.info("User %s assigned %s on project %s", user_id, role.name, project_id)

        return assignment
