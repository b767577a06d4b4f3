"""PostgreSQL custom role bundle and assignment repositories."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from crewline.domain.entities import CustomRole, UserCustomRole

_ROLE_COLUMNS = "id, name, display_name, scope, created_at, permissions, description, scope_id"
_ASSIGNMENT_COLUMNS = "id, user_id, role_id, created_at, granted, expires_at"


def _to_role(r: tuple) -> CustomRole:
    return CustomRole(
        id=r[0],
        name=r[1],
        display_name=r[2],
        scope=r[3],
        created_at=r[4],
        permissions={resource: list(actions) for resource, actions in (r[5] or {}).items()},
        description=r[6],
        scope_id=r[7],
    )


def _to_assignment(r: tuple) -> UserCustomRole:
    return UserCustomRole(
        id=r[0], user_id=r[1], role_id=r[2], created_at=r[3], granted=r[4], expires_at=r[5]
    )


class PostgresCustomRoleRepository:
    """Custom role bundle repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, role_id: UUID) -> CustomRole | None:
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM custom_role WHERE id = %s", (role_id,)
        )
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def get_by_name(
        self, name: str, scope: str, scope_id: UUID | None = None
    ) -> CustomRole | None:
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM custom_role "
            "WHERE name = %s AND scope = %s AND scope_id IS NOT DISTINCT FROM %s",
            (name, str(scope), scope_id),
        )
        r = await cur.fetchone()
        return _to_role(r) if r else None

    async def list_by_scope(self, scope: str, scope_id: UUID | None = None) -> list[CustomRole]:
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM custom_role "
            "WHERE scope = %s AND scope_id IS NOT DISTINCT FROM %s ORDER BY created_at, name",
            (str(scope), scope_id),
        )
        return [_to_role(r) for r in await cur.fetchall()]

    async def list_by_ids(self, role_ids: list[UUID]) -> list[CustomRole]:
        if not role_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_ROLE_COLUMNS} FROM custom_role WHERE id = ANY(%s)", (list(role_ids),)
        )
        return [_to_role(r) for r in await cur.fetchall()]

    async def create(self, role: CustomRole) -> CustomRole:
        await self._conn.execute(
            f"INSERT INTO custom_role ({_ROLE_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                role.id,
                role.name,
                role.display_name,
                str(role.scope),
                role.created_at,
                Jsonb(role.permissions),
                role.description,
                role.scope_id,
            ),
        )
        return role


class PostgresUserCustomRoleRepository:
    """Custom role assignment repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, user_id: UUID, role_id: UUID) -> UserCustomRole | None:
        cur = await self._conn.execute(
            f"SELECT {_ASSIGNMENT_COLUMNS} FROM user_custom_role "
            "WHERE user_id = %s AND role_id = %s",
            (user_id, role_id),
        )
        r = await cur.fetchone()
        return _to_assignment(r) if r else None

    async def list_by_user(self, user_id: UUID) -> list[UserCustomRole]:
        cur = await self._conn.execute(
            f"SELECT {_ASSIGNMENT_COLUMNS} FROM user_custom_role WHERE user_id = %s "
            "ORDER BY created_at",
            (user_id,),
        )
        return [_to_assignment(r) for r in await cur.fetchall()]

    async def create(self, assignment: UserCustomRole) -> UserCustomRole:
        await self._conn.execute(
            f"INSERT INTO user_custom_role ({_ASSIGNMENT_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                assignment.id,
                assignment.user_id,
                assignment.role_id,
                assignment.created_at,
                assignment.granted,
                assignment.expires_at,
            ),
        )
        return assignment

    async def update(self, assignment: UserCustomRole) -> None:
        await self._conn.execute(
            "UPDATE user_custom_role SET granted = %s, expires_at = %s WHERE id = %s",
            (assignment.granted, assignment.expires_at, assignment.id),
        )
