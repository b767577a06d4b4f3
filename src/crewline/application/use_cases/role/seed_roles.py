"""Seed permissions and system roles."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import uuid4

from crewline.domain.entities import Permission, Role
from crewline.domain.permission_catalogue import ALL_PERMISSIONS, SYSTEM_ROLES

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    permissions_created: int
    roles_created: int


class SeedRolesAndPermissionsUseCase:
    """Create missing catalogue permissions and system roles.

    Safe to run repeatedly: existing permissions and roles are left untouched,
    including any edits made to a system role's permission set.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self) -> SeedResult:
        now = datetime.now(UTC)
        async with self._uow_factory() as uow:
            by_key = {p.key: p for p in await uow.permissions.list_all()}
            permissions_created = 0
            for spec in ALL_PERMISSIONS:
                if spec.key in by_key:
                    continue
                permission = Permission(
                    id=uuid4(),
                    resource=str(spec.resource),
                    action=str(spec.action),
                    created_at=now,
                    description=spec.description,
                )
                await uow.permissions.create(permission)
                by_key[spec.key] = permission
                permissions_created += 1

            roles_created = 0
            for spec in SYSTEM_ROLES:
                if await uow.roles.get_by_name(spec.name):
                    continue
                role = Role(
                    id=uuid4(),
                    name=spec.name,
                    display_name=spec.display_name,
                    priority=spec.priority,
                    created_at=now,
                    updated_at=now,
                    is_director=spec.is_director,
                    is_system=True,
                    description=spec.description,
                )
                await uow.roles.create(role)
                permission_ids = [by_key[key].id for key in sorted(spec.permissions)]
                await uow.roles.replace_permissions(role.id, permission_ids, now)
                roles_created += 1

        logger.info(
            "Seeded %d permissions and %d system roles", permissions_created, roles_created
        )
        return SeedResult(permissions_created=permissions_created, roles_created=roles_created)
