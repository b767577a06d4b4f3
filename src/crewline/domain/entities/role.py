"""Role entity for RBAC."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Role:
    """Role - named bundle of permissions with a priority in the hierarchy.

    organization_id is None for system roles, which apply to every
    organization and cannot be deleted.
    """

    id: UUID
    name: str
    display_name: str
    priority: int
    created_at: datetime
    updated_at: datetime
    is_director: bool = False
    is_system: bool = False
    organization_id: UUID | None = None
    description: str | None = None

    def outranks(self, other: "Role") -> bool:
        return self.priority > other.priority
