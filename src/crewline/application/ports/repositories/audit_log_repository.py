"""Audit log repository port."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import PermissionAuditLog


class AuditLogRepository(Protocol):
    """Port for the append-only permission audit log."""

    async def append(self, entry: PermissionAuditLog) -> PermissionAuditLog: ...

    async def list_recent(self, limit: int = 50) -> list[PermissionAuditLog]: ...

    async def list_by_target_user(self, user_id: UUID) -> list[PermissionAuditLog]: ...
