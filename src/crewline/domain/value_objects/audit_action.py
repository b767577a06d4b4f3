"""Audit log action names."""

from enum import StrEnum


class AuditAction(StrEnum):
    """What a permission audit log row records."""

    ROLE_CREATED = "role_created"
    ROLE_UPDATED = "role_updated"
    ROLE_DELETED = "role_deleted"
    ROLE_ASSIGNED = "role_assigned"
    PERMISSIONS_UPDATED = "permissions_updated"
    PROJECT_ACCESS_GRANTED = "project_access_granted"
    PROJECT_ACCESS_REVOKED = "project_access_revoked"
    TEAM_PROJECT_ACCESS_GRANTED = "team_project_access_granted"
    TEAM_PROJECT_ACCESS_REVOKED = "team_project_access_revoked"
    DOCUMENT_ACCESS_GRANTED = "document_access_granted"
    TEAM_MEMBER_ADDED = "team_member_added"
    TEAM_MEMBER_REMOVED = "team_member_removed"
    TEAM_LEADER_CHANGED = "team_leader_changed"
    TEAM_DELETED = "team_deleted"
    MEMBER_REMOVED = "member_removed"
    CUSTOM_ROLE_CREATED = "custom_role_created"
    CUSTOM_ROLE_ASSIGNED = "custom_role_assigned"
