"""Update member permissions use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.dto.permission_dto import PermissionOverrideInput
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import current_organization_context
from crewline.application.use_cases.role.create_role import validate_permission_ids
from crewline.domain.entities import UserPermission
from crewline.domain.exceptions import NotFound, PermissionDenied
from crewline.domain.policies import can_manage_members, is_organization_owner
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class UpdateMemberPermissionsUseCase:
    """Change a member's role and upsert their per-permission overrides."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        user_id: UUID,
        role_id: UUID | None = None,
        overrides: list[PermissionOverrideInput] | None = None,
    ) -> None:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            if not can_manage_members(ctx.organization, ctx.user.id, ctx.membership, ctx.role):
                raise PermissionDenied("Insufficient permissions to update member permissions")

            membership = await uow.members.get(ctx.organization.id, user_id)
            if not membership or not membership.is_active:
                raise NotFound("Member", str(user_id), message="Member not found in organization")

            if role_id:
                role = await uow.roles.get_by_id(role_id)
                if not role or role.organization_id not in (None, ctx.organization.id):
                    raise NotFound("Role", str(role_id))
                if role.is_director and not is_organization_owner(ctx.organization, ctx.user.id):
                    raise PermissionDenied("Only the organization owner can assign director roles")
                membership.role_id = role_id
                await uow.members.update(membership)

            overrides = overrides or []
            await validate_permission_ids(uow, [o.permission_id for o in overrides])
            now = datetime.now(UTC)
            for item in overrides:
                existing = await uow.user_permissions.get(user_id, item.permission_id)
                if existing:
                    existing.granted = item.granted
                    existing.expires_at = item.expires_at
                    await uow.user_permissions.update(existing)
                else:
                    await uow.user_permissions.create(
                        UserPermission(
                            id=uuid4(),
                            user_id=user_id,
                            permission_id=item.permission_id,
                            granted=item.granted,
                            created_at=now,
                            expires_at=item.expires_at,
                        )
                    )

            await record_audit(
                uow,
                ctx.user.id,
                AuditAction.PERMISSIONS_UPDATED,
                target_user_id=user_id,
                target_role_id=role_id,
                role_changed=role_id is not None,
                custom_permissions_count=len(overrides),
            )
            logger.info(
                "Permissions of user %s updated by %s (%d overrides)",
                user_id,
                ctx.user.id,
                len(overrides),
            )
