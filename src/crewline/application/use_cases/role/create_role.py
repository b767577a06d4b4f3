"""Create role use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.dto.role_dto import RoleInput
from crewline.application.ports import UnitOfWork
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import current_organization_context
from crewline.domain.entities import Role
from crewline.domain.exceptions import InvariantViolation, PermissionDenied, ValidationError
from crewline.domain.policies import is_admin
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


async def validate_permission_ids(uow: UnitOfWork, permission_ids: list[UUID]) -> list[UUID]:
    """Deduplicate permission ids, keeping order, and require that each exists."""
    unique = list(dict.fromkeys(permission_ids))
    found = {p.id for p in await uow.permissions.list_by_ids(unique)}
    missing = [str(pid) for pid in unique if pid not in found]
    if missing:
        raise ValidationError(f"Unknown permissions: {', '.join(missing)}")
    return unique


class CreateRoleUseCase:
    """Create an organization role with its permission set."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, data: RoleInput) -> Role:
        name = (data.name or "").strip()
        if not name:
            raise ValidationError("Role name is required")

        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            if not is_admin(ctx.membership, ctx.role):
                raise PermissionDenied("Insufficient permissions to create roles")

            if await uow.roles.get_by_name(name, ctx.organization.id):
                raise InvariantViolation("Role with this name already exists")

            permission_ids = await validate_permission_ids(uow, data.permission_ids)

            now = datetime.now(UTC)
            role = Role(
                id=uuid4(),
                name=name,
                display_name=data.display_name,
                priority=data.priority,
                created_at=now,
                updated_at=now,
                is_director=data.is_director,
                is_system=False,
                organization_id=ctx.organization.id,
                description=data.description,
            )
            await uow.roles.create(role)
            await uow.roles.replace_permissions(role.id, permission_ids, now)
            await record_audit(
                uow,
                ctx.user.id,
                AuditAction.ROLE_CREATED,
                target_role_id=role.id,
                name=name,
                is_director=data.is_director,
                permission_count=len(permission_ids),
            )
            logger.info("Role %s created in organization %s", name, ctx.organization.id)

        return role
