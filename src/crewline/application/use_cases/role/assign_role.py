"""Assign role use case."""

import logging
from uuid import UUID

from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import current_organization_context
from crewline.domain.entities import OrganizationMember
from crewline.domain.exceptions import NotFound, PermissionDenied
from crewline.domain.policies import can_manage_members, is_organization_owner
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class AssignRoleUseCase:
    """Change the role a member holds in the caller's organization."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, user_id: UUID, role_id: UUID) -> OrganizationMember:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            if not can_manage_members(ctx.organization, ctx.user.id, ctx.membership, ctx.role):
                raise PermissionDenied("Insufficient permissions to assign roles")

            membership = await uow.members.get(ctx.organization.id, user_id)
            if not membership:
                raise NotFound(
                    "Member", str(user_id), message="User is not a member of this organization"
                )

            role = await uow.roles.get_by_id(role_id)
            if not role or role.organization_id not in (None, ctx.organization.id):
                raise NotFound("Role", str(role_id))
            if role.is_director and not is_organization_owner(ctx.organization, ctx.user.id):
                raise PermissionDenied("Only organization owner can assign director role")

            old_role_id = membership.role_id
            membership.role_id = role_id
            await uow.members.update(membership)
            await record_audit(
                uow,
                ctx.user.id,
                AuditAction.ROLE_ASSIGNED,
                target_user_id=user_id,
                target_role_id=role_id,
                old_role_id=old_role_id,
                new_role_id=role_id,
            )
            logger.info("User %s assigned role %s", user_id, role.name)

        return membership
