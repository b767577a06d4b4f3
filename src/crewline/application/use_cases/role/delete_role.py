"""Delete role use case."""

import logging
from uuid import UUID

from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import current_organization_context
from crewline.domain.exceptions import InvariantViolation, NotFound, PermissionDenied
from crewline.domain.policies import is_organization_owner
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class DeleteRoleUseCase:
    """Delete an unused organization role. Owner only."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, role_id: UUID) -> None:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            if not is_organization_owner(ctx.organization, ctx.user.id):
                raise PermissionDenied("Only organization owner can delete roles")

            role = await uow.roles.get_by_id(role_id)
            if not role or role.organization_id not in (None, ctx.organization.id):
                raise NotFound("Role", str(role_id))
            if role.is_system:
                raise InvariantViolation("Cannot delete system roles")

            holders = await uow.members.count_with_role(ctx.organization.id, role_id)
            if holders > 0:
                raise InvariantViolation(
                    f"Cannot delete role: {holders} users still have this role"
                )

            await uow.roles.delete_permissions(role_id)
            await uow.roles.delete(role_id)
            await record_audit(
                uow, ctx.user.id, AuditAction.ROLE_DELETED, target_role_id=role_id, role_name=role.name
            )
            logger.info("Role %s deleted by %s", role.name, ctx.user.id)
