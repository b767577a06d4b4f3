"""Domain entities."""

from crewline.domain.entities.access import (
    DocumentAccess,
    ProjectAccess,
    ResourcePermission,
    TeamProjectAccess,
)
from crewline.domain.entities.audit import PermissionAuditLog
from crewline.domain.entities.custom_role import CustomRole, UserCustomRole
from crewline.domain.entities.document import Document
from crewline.domain.entities.organization import Organization, OrganizationMember
from crewline.domain.entities.permission import Permission, RolePermission, UserPermission
from crewline.domain.entities.project import Project, Task
from crewline.domain.entities.role import Role
from crewline.domain.entities.team import Team, TeamMember
from crewline.domain.entities.user import User

__all__ = [
    "CustomRole",
    "Document",
    "DocumentAccess",
    "Organization",
    "OrganizationMember",
    "Permission",
    "PermissionAuditLog",
    "Project",
    "ProjectAccess",
    "ResourcePermission",
    "Role",
    "RolePermission",
    "Task",
    "Team",
    "TeamMember",
    "TeamProjectAccess",
    "User",
    "UserCustomRole",
    "UserPermission",
]
