"""Permission audit log entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID


@dataclass(frozen=True)
class PermissionAuditLog:
    """Append-only record of a permission-affecting change."""

    id: UUID
    actor_id: UUID
    action: str
    created_at: datetime
    target_user_id: UUID | None = None
    target_role_id: UUID | None = None
    details: dict[str, Any] = field(default_factory=dict)
