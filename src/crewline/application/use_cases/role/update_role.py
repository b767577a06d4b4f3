"""Update role use case."""

import logging
from dataclasses import asdict
from datetime import UTC, datetime
from uuid import UUID

from crewline.application.dto.role_dto import RoleUpdateInput
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import current_organization_context
from crewline.application.use_cases.role.create_role import validate_permission_ids
from crewline.domain.entities import Role
from crewline.domain.exceptions import NotFound, PermissionDenied
from crewline.domain.policies import is_admin, is_organization_owner
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class UpdateRoleUseCase:
    """Patch role fields; a given permission list replaces the whole set."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, role_id: UUID, changes: RoleUpdateInput) -> Role:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            if not is_admin(ctx.membership, ctx.role):
                raise PermissionDenied("Insufficient permissions to update roles")

            role = await uow.roles.get_by_id(role_id)
            if not role or role.organization_id not in (None, ctx.organization.id):
                raise NotFound("Role", str(role_id))
            if role.is_system and not is_organization_owner(ctx.organization, ctx.user.id):
                raise PermissionDenied("Cannot modify system roles")

            now = datetime.now(UTC)
            if changes.display_name is not None:
                role.display_name = changes.display_name
            if changes.description is not None:
                role.description = changes.description
            if changes.is_director is not None:
                role.is_director = changes.is_director
            if changes.priority is not None:
                role.priority = changes.priority
            role.updated_at = now
            await uow.roles.update(role)

            if changes.permission_ids is not None:
                permission_ids = await validate_permission_ids(uow, changes.permission_ids)
                await uow.roles.replace_permissions(role.id, permission_ids, now)

            details = {k: v for k, v in asdict(changes).items() if v is not None}
            await record_audit(
                uow, ctx.user.id, AuditAction.ROLE_UPDATED, target_role_id=role.id, **details
            )
            logger.info("Role %s updated by %s", role.id, ctx.user.id)

        return role
