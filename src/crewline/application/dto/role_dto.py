"""Role DTOs."""

from dataclasses import dataclass, field
from uuid import UUID

from crewline.domain.entities import Permission, Role


@dataclass
class RoleInput:
    """Input for creating a role."""

    name: str
    display_name: str
    description: str | None = None
    is_director: bool = False
    priority: int = 0
    permission_ids: list[UUID] = field(default_factory=list)


@dataclass
class RoleUpdateInput:
    """Fields of a role update; None means leave unchanged."""

    display_name: str | None = None
    description: str | None = None
    is_director: bool | None = None
    priority: int | None = None
    permission_ids: list[UUID] | None = None


@dataclass
class RoleOutput:
    role: Role
    permissions: list[Permission]
    member_count: int = 0


@dataclass
class CustomRoleInput:
    """Input for creating a custom role bundle."""

    name: str
    display_name: str
    scope: str
    permissions: dict[str, list[str]] = field(default_factory=dict)
    description: str | None = None
    scope_id: UUID | None = None
