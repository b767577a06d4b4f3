"""Permission catalogue entities."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Permission:
    """Atomic (resource, action) capability."""

    id: UUID
    resource: str
    action: str
    created_at: datetime
    description: str | None = None

    @property
    def key(self) -> str:
        return f"{self.resource}:{self.action}"


@dataclass
class RolePermission:
    """Role -> permission mapping row."""

    role_id: UUID
    permission_id: UUID
    created_at: datetime


@dataclass
class UserPermission:
    """Per-user override. granted=False revokes a role-derived permission."""

    id: UUID
    user_id: UUID
    permission_id: UUID
    granted: bool
    created_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at is not None and self.expires_at < now
