"""Custom role bundles: resource -> actions maps scoped to a project, team or organization."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

# manage on a resource covers these, and nothing outside them
_MANAGED_ACTIONS = frozenset({"read", "create", "update", "delete"})


@dataclass
class CustomRole:
    id: UUID
    name: str
    display_name: str
    scope: str
    created_at: datetime
    permissions: dict[str, list[str]] = field(default_factory=dict)
    description: str | None = None
    scope_id: UUID | None = None

    def allows(self, resource: str, action: str) -> bool:
        actions = self.permissions.get(str(resource)) or []
        if str(action) in actions:
            return True
        return "manage" in actions and str(action) in _MANAGED_ACTIONS

    def applies_to(self, scope: str, scope_id: UUID | None) -> bool:
        return self.scope == scope and self.scope_id == scope_id


@dataclass
class UserCustomRole:
    """Assignment of a custom role to a user."""

    id: UUID
    user_id: UUID
    role_id: UUID
    created_at: datetime
    granted: bool = True
    expires_at: datetime | None = None

    def is_active(self, now: datetime) -> bool:
        if not self.granted:
            return False
        return self.expires_at is None or self.expires_at >= now
