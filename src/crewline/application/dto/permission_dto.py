"""Permission and access DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from crewline.domain.entities import (
    Permission,
    Project,
    ProjectAccess,
    Role,
    TeamProjectAccess,
    UserPermission,
)
from crewline.domain.value_objects import AccessLevel


@dataclass
class PermissionOverrideInput:
    permission_id: UUID
    granted: bool
    expires_at: datetime | None = None


@dataclass
class OverrideOutput:
    """A user override together with the permission it applies to."""

    override: UserPermission
    permission: Permission


@dataclass
class UserPermissionsOutput:
    user_id: UUID
    role: Role | None
    role_permissions: list[Permission] = field(default_factory=list)
    overrides: list[OverrideOutput] = field(default_factory=list)
    effective: list[str] = field(default_factory=list)


@dataclass
class ProjectAccessOutput:
    """Direct user grants and team grants on one project."""

    users: list[ProjectAccess] = field(default_factory=list)
    teams: list[TeamProjectAccess] = field(default_factory=list)


@dataclass
class AccessibleProject:
    project: Project
    access_level: AccessLevel


@dataclass
class PermissionGroup:
    """Catalogue permissions that share a resource."""

    resource: str
    actions: list[Permission] = field(default_factory=list)
