"""Where a custom role bundle applies."""

from enum import StrEnum


class RoleScope(StrEnum):
    GLOBAL = "global"
    ORGANIZATION = "organization"
    PROJECT = "project"
    TEAM = "team"
    RESOURCE = "resource"

    @property
    def needs_scope_id(self) -> bool:
        return self not in (RoleScope.GLOBAL, RoleScope.ORGANIZATION)


class ProjectRoleType(StrEnum):
    """The three bundles every project gets."""

    MEMBER = "member"
    ADMIN = "admin"
    OWNER = "owner"

    @property
    def role_name(self) -> str:
        return f"project_{self.value}"
