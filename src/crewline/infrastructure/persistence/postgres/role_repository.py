"""PostgreSQL role repository implementation."""

from datetime import datetime
from uuid import UUID

from psycopg import AsyncConnection

from crewline.domain.entities import Permission, Role
from crewline.infrastructure.persistence.postgres.permission_repository import (
    PERMISSION_COLUMNS,
    to_permission,
)

_COLUMNS = (
    "id, name, display_name, priority, created_at, updated_at, is_director, is_system, "
    "organization_id, description"
)


def _to_role(r: tuple) -> Role:
    return Role(
        id=r[0],
        name=r[1],
        display_name=r[2],
        priority=r[3],
        created_at=r[4],
        updated_at=r[5],
        is_director=r[6],
        is_system=r[7],
        organization_id=r[8],
        description=r[9],
    )


class PostgresRoleRepository:
    """Role repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> Role | None:
        """Get role by id."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM role WHERE id = %s", (role_id,))
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def get_by_name(self, name: str, organization_id: UUID | None = None) -> Role | None:
        """Get role by name; without an organization only system roles match."""
        if organization_id is None:
            q = f"SELECT {_COLUMNS} FROM role WHERE name = %s AND organization_id IS NULL"
            params: tuple = (name,)
        else:
            q = f"SELECT {_COLUMNS} FROM role WHERE name = %s AND organization_id = %s"
            params = (name, organization_id)
        cur = await self._conn.execute(q, params)
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def list_for_organization(self, organization_id: UUID) -> list[Role]:
        """System roles plus the organization's own roles."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role "
            "WHERE organization_id IS NULL OR organization_id = %s "
            "ORDER BY priority DESC, name",
            (organization_id,),
        )
        return [_to_role(r) for r in await cur.fetchall()]

    async def list_all(self) -> list[Role]:
        """List all roles."""
        cur = await self._conn.execute(f"SELECT {_COLUMNS} FROM role ORDER BY priority DESC")
        return [_to_role(r) for r in await cur.fetchall()]

    async def create(self, role: Role) -> Role:
        await self._conn.execute(
            f"INSERT INTO role ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                role.id,
                role.name,
                role.display_name,
                role.priority,
                role.created_at,
                role.updated_at,
                role.is_director,
                role.is_system,
                role.organization_id,
                role.description,
            ),
        )
        return role

    async def update(self, role: Role) -> None:
        await self._conn.execute(
            "UPDATE role SET display_name = %s, description = %s, is_director = %s, "
            "priority = %s, updated_at = %s WHERE id = %s",
            (
                role.display_name,
                role.description,
                role.is_director,
                role.priority,
                role.updated_at,
                role.id,
            ),
        )

    async def delete(self, role_id: UUID) -> None:
        await self._conn.execute("DELETE FROM role WHERE id = %s", (role_id,))

    async def list_permissions(self, role_id: UUID) -> list[Permission]:
        """Permissions mapped to the role. Dangling mapping rows are skipped."""
        columns = ", ".join(f"p.{c.strip()}" for c in PERMISSION_COLUMNS.split(","))
        cur = await self._conn.execute(
            f"SELECT {columns} FROM role_permission rp "
            "JOIN permission p ON p.id = rp.permission_id "
            "WHERE rp.role_id = %s ORDER BY p.resource, p.action",
            (role_id,),
        )
        return [to_permission(r) for r in await cur.fetchall()]

    async def replace_permissions(
        self, role_id: UUID, permission_ids: list[UUID], created_at: datetime
    ) -> None:
        """Replace the role's permission set wholesale."""
        await self.delete_permissions(role_id)
        async with self._conn.cursor() as cur:
            await cur.executemany(
                "INSERT INTO role_permission (role_id, permission_id, created_at) "
                "VALUES (%s, %s, %s)",
                [(role_id, pid, created_at) for pid in permission_ids],
            )

    async def delete_permissions(self, role_id: UUID) -> None:
        await self._conn.execute("DELETE FROM role_permission WHERE role_id = %s", (role_id,))
