"""Repository ports."""

from crewline.application.ports.repositories.access_repository import (
    DocumentAccessRepository,
    ProjectAccessRepository,
    ResourcePermissionRepository,
    TeamProjectAccessRepository,
)
from crewline.application.ports.repositories.audit_log_repository import (
    AuditLogRepository,
)
from crewline.application.ports.repositories.custom_role_repository import (
    CustomRoleRepository,
    UserCustomRoleRepository,
)
from crewline.application.ports.repositories.organization_repository import (
    MemberRepository,
    OrganizationRepository,
)
from crewline.application.ports.repositories.permission_repository import (
    PermissionRepository,
    UserPermissionRepository,
)
from crewline.application.ports.repositories.project_repository import (
    DocumentRepository,
    ProjectRepository,
    TaskRepository,
)
from crewline.application.ports.repositories.role_repository import RoleRepository
from crewline.application.ports.repositories.team_repository import (
    TeamMemberRepository,
    TeamRepository,
)
from crewline.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "AuditLogRepository",
    "CustomRoleRepository",
    "DocumentAccessRepository",
    "DocumentRepository",
    "MemberRepository",
    "OrganizationRepository",
    "PermissionRepository",
    "ProjectAccessRepository",
    "ProjectRepository",
    "ResourcePermissionRepository",
    "RoleRepository",
    "TaskRepository",
    "TeamMemberRepository",
    "TeamProjectAccessRepository",
    "TeamRepository",
    "UserCustomRoleRepository",
    "UserPermissionRepository",
    "UserRepository",
]
