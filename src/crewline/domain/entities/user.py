"""User entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """User - identity record, never hard-deleted (soft-deactivated via is_active)."""

    id: UUID
    name: str
    email: str
    created_at: datetime
    avatar_url: str = ""
    auth_id: str | None = None
    role_id: UUID | None = None
    current_organization_id: UUID | None = None
    is_active: bool = True
