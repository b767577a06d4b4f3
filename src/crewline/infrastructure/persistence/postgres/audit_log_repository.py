"""PostgreSQL permission audit log repository. Append-only."""

from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from crewline.domain.entities import PermissionAuditLog

_COLUMNS = "id, actor_id, action, created_at, target_user_id, target_role_id, details"


def _to_entry(r: tuple) -> PermissionAuditLog:
    return PermissionAuditLog(
        id=r[0],
        actor_id=r[1],
        action=r[2],
        created_at=r[3],
        target_user_id=r[4],
        target_role_id=r[5],
        details=r[6] or {},
    )


class PostgresAuditLogRepository:
    """Audit log repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, entry: PermissionAuditLog) -> PermissionAuditLog:
        await self._conn.execute(
            f"INSERT INTO permission_audit_log ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                entry.id,
                entry.actor_id,
                entry.action,
                entry.created_at,
                entry.target_user_id,
                entry.target_role_id,
                Jsonb(entry.details),
            ),
        )
        return entry

    async def list_recent(self, limit: int = 50) -> list[PermissionAuditLog]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission_audit_log ORDER BY created_at DESC LIMIT %s",
            (limit,),
        )
        return [_to_entry(r) for r in await cur.fetchall()]

    async def list_by_target_user(self, user_id: UUID) -> list[PermissionAuditLog]:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM permission_audit_log WHERE target_user_id = %s "
            "ORDER BY created_at DESC",
            (user_id,),
        )
        return [_to_entry(r) for r in await cur.fetchall()]
