"""PostgreSQL permission and user override repositories."""

from uuid import UUID

from psycopg import AsyncConnection

from crewline.domain.entities import Permission, UserPermission

PERMISSION_COLUMNS = "id, resource, action, created_at, description"
_OVERRIDE_COLUMNS = "id, user_id, permission_id, granted, created_at, expires_at"


def to_permission(r: tuple) -> Permission:
    return Permission(id=r[0], resource=r[1], action=r[2], created_at=r[3], description=r[4])


def _to_override(r: tuple) -> UserPermission:
    return UserPermission(
        id=r[0],
        user_id=r[1],
        permission_id=r[2],
        granted=r[3],
        created_at=r[4],
        expires_at=r[5],
    )


class PostgresPermissionRepository:
    """Permission catalogue repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission WHERE id = %s", (permission_id,)
        )
        r = await cur.fetchone()
        return to_permission(r) if r else None

    async def get_by_resource_action(self, resource: str, action: str) -> Permission | None:
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission WHERE resource = %s AND action = %s",
            (str(resource), str(action)),
        )
        r = await cur.fetchone()
        return to_permission(r) if r else None

    async def list_by_ids(self, permission_ids: list[UUID]) -> list[Permission]:
        if not permission_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission WHERE id = ANY(%s)",
            (list(permission_ids),),
        )
        return [to_permission(r) for r in await cur.fetchall()]

    async def list_all(self) -> list[Permission]:
        cur = await self._conn.execute(
            f"SELECT {PERMISSION_COLUMNS} FROM permission ORDER BY resource, action"
        )
        return [to_permission(r) for r in await cur.fetchall()]

    async def create(self, permission: Permission) -> Permission:
        await self._conn.execute(
            f"INSERT INTO permission ({PERMISSION_COLUMNS}) VALUES (%s, %s, %s, %s, %s)",
            (
                permission.id,
                permission.resource,
                permission.action,
                permission.created_at,
                permission.description,
            ),
        )
        return permission


class PostgresUserPermissionRepository:
    """Per-user permission override repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, user_id: UUID, permission_id: UUID) -> UserPermission | None:
        cur = await self._conn.execute(
            f"SELECT {_OVERRIDE_COLUMNS} FROM user_permission "
            "WHERE user_id = %s AND permission_id = %s",
            (user_id, permission_id),
        )
        r = await cur.fetchone()
        return _to_override(r) if r else None

    async def list_by_user(self, user_id: UUID) -> list[UserPermission]:
        cur = await self._conn.execute(
            f"SELECT {_OVERRIDE_COLUMNS} FROM user_permission WHERE user_id = %s "
            "ORDER BY created_at",
            (user_id,),
        )
        return [_to_override(r) for r in await cur.fetchall()]

    async def create(self, override: UserPermission) -> UserPermission:
        await self._conn.execute(
            f"INSERT INTO user_permission ({_OVERRIDE_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                override.id,
                override.user_id,
                override.permission_id,
                override.granted,
                override.created_at,
                override.expires_at,
            ),
        )
        return override

    async def update(self, override: UserPermission) -> None:
        await self._conn.execute(
            "UPDATE user_permission SET granted = %s, expires_at = %s WHERE id = %s",
            (override.granted, override.expires_at, override.id),
        )

    async def delete(self, override_id: UUID) -> None:
        await self._conn.execute("DELETE FROM user_permission WHERE id = %s", (override_id,))
