"""Resources covered by the permission catalogue."""

from enum import StrEnum


class PermissionResource(StrEnum):
    """Resource half of a (resource, action) permission."""

    PROJECTS = "projects"
    CONSTRUCTION_PROJECTS = "constructionProjects"
    USERS = "users"
    TEAMS = "teams"
    CONSTRUCTION_TEAMS = "constructionTeams"
    ISSUES = "issues"
    ROLES = "roles"
    PERMISSIONS = "permissions"
    REVENUE = "revenue"
    WORK_CATEGORIES = "workCategories"
    DOCUMENTS = "documents"
    ORGANIZATIONS = "organizations"
    MEMBERS = "members"


PROJECT_RESOURCES = frozenset(
    {PermissionResource.PROJECTS, PermissionResource.CONSTRUCTION_PROJECTS}
)
