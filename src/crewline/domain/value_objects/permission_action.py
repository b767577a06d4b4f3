"""Permission actions for RBAC."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Actions that can be performed on a resource."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    MANAGE = "manage"
    INVITE = "invite"
    REMOVE = "remove"
