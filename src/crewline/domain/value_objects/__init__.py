"""Domain value objects."""

from crewline.domain.value_objects.access_decision import AccessDecision
from crewline.domain.value_objects.access_level import (
    AccessLevel,
    DocumentAccessLevel,
    access_rank,
    document_access_rank,
)
from crewline.domain.value_objects.audit_action import AuditAction
from crewline.domain.value_objects.permission_action import PermissionAction
from crewline.domain.value_objects.permission_resource import (
    PROJECT_RESOURCES,
    PermissionResource,
)
from crewline.domain.value_objects.resource_type import ResourceScope, ResourceType
from crewline.domain.value_objects.role_scope import ProjectRoleType, RoleScope
from crewline.domain.value_objects.team_role import TeamRole
from crewline.domain.value_objects.timeline_filter import TimelineFilter, TimelineFilterKind

__all__ = [
    "PROJECT_RESOURCES",
    "AccessDecision",
    "AccessLevel",
    "AuditAction",
    "DocumentAccessLevel",
    "PermissionAction",
    "PermissionResource",
    "ProjectRoleType",
    "ResourceScope",
    "ResourceType",
    "RoleScope",
    "TeamRole",
    "TimelineFilter",
    "TimelineFilterKind",
    "access_rank",
    "document_access_rank",
]
