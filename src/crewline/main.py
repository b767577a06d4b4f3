"""Application entry point and composition root."""

import logging
from functools import partial

import falcon.asgi

from crewline import __version__
from crewline.application.use_cases.permission.accessible_projects import (
    ListAccessibleProjectsUseCase,
)
from crewline.application.use_cases.permission.document_access import GrantDocumentAccessUseCase
from crewline.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from crewline.application.use_cases.permission.list_audit_log import ListAuditLogUseCase
from crewline.application.use_cases.permission.list_permissions import (
    ListPermissionCatalogueUseCase,
)
from crewline.application.use_cases.permission.project_access import (
    CheckProjectAccessUseCase,
    GrantProjectAccessUseCase,
    ListProjectAccessUseCase,
    RevokeProjectAccessUseCase,
)
from crewline.application.use_cases.permission.remove_member import RemoveMemberUseCase
from crewline.application.use_cases.permission.update_member_permissions import (
    UpdateMemberPermissionsUseCase,
)
from crewline.application.use_cases.role.assign_role import AssignRoleUseCase
from crewline.application.use_cases.role.create_role import CreateRoleUseCase
from crewline.application.use_cases.role.custom_roles import (
    AssignProjectRoleUseCase,
    CreateCustomRoleUseCase,
    ListProjectRolesUseCase,
)
from crewline.application.use_cases.role.delete_role import DeleteRoleUseCase
from crewline.application.use_cases.role.list_roles import ListRolesUseCase
from crewline.application.use_cases.role.update_role import UpdateRoleUseCase
from crewline.application.use_cases.team.add_team_member import AddTeamMemberUseCase
from crewline.application.use_cases.team.create_team import CreateTeamUseCase
from crewline.application.use_cases.team.delete_team import DeleteTeamUseCase
from crewline.application.use_cases.team.list_teams import ListTeamsUseCase
from crewline.application.use_cases.team.remove_team_member import RemoveTeamMemberUseCase
from crewline.application.use_cases.team.update_team import UpdateTeamUseCase
from crewline.application.use_cases.timeline.filter_timeline import FilterTimelineUseCase
from crewline.config import Settings, get_settings
from crewline.infrastructure.auth.keycloak_provider import KeycloakProvider
from crewline.infrastructure.permission.permission_checker import RoleBasedPermissionChecker
from crewline.infrastructure.persistence.postgres.connection import create_pool, ping
from crewline.infrastructure.persistence.postgres.unit_of_work import create_uow_factory
from crewline.interfaces.api.errors import register_error_handlers
from crewline.interfaces.api.middleware.auth import AuthMiddleware
from crewline.interfaces.api.middleware.cors import CORSMiddleware
from crewline.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from crewline.interfaces.api.resources.access import (
    AccessibleProjectsResource,
    DocumentAccessResource,
    ProjectAccessResource,
)
from crewline.interfaces.api.resources.audit_log import AuditLogResource
from crewline.interfaces.api.resources.custom_roles import (
    CustomRolesResource,
    ProjectRolesResource,
)
from crewline.interfaces.api.resources.health import HealthResource
from crewline.interfaces.api.resources.members import (
    MemberPermissionsResource,
    MemberResource,
    MemberRoleResource,
    PermissionCatalogueResource,
)
from crewline.interfaces.api.resources.roles import RoleResource, RolesResource
from crewline.interfaces.api.resources.teams import (
    OrganizationTeamsResource,
    TeamMembersResource,
    TeamResource,
)
from crewline.interfaces.api.resources.timeline import TimelineResource

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_app(
    uow_factory,
    permission_checker,
    *,
    middleware: list | None = None,
    ready_check=None,
    audit_log_page_size: int = 50,
) -> falcon.asgi.App:
    """Wire use cases and resources onto a Falcon app.

    Kept separate from create_crewline_app so tests can supply fakes.
    """
    list_teams = ListTeamsUseCase(unit_of_work_factory=uow_factory)
    create_team = CreateTeamUseCase(unit_of_work_factory=uow_factory)
    update_team = UpdateTeamUseCase(unit_of_work_factory=uow_factory)
    delete_team = DeleteTeamUseCase(unit_of_work_factory=uow_factory)
    add_team_member = AddTeamMemberUseCase(unit_of_work_factory=uow_factory)
    remove_team_member = RemoveTeamMemberUseCase(unit_of_work_factory=uow_factory)

    list_roles = ListRolesUseCase(unit_of_work_factory=uow_factory)
    create_role = CreateRoleUseCase(unit_of_work_factory=uow_factory)
    update_role = UpdateRoleUseCase(unit_of_work_factory=uow_factory)
    delete_role = DeleteRoleUseCase(unit_of_work_factory=uow_factory)
    assign_role = AssignRoleUseCase(unit_of_work_factory=uow_factory)
    create_custom_role = CreateCustomRoleUseCase(unit_of_work_factory=uow_factory)
    list_project_roles = ListProjectRolesUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    assign_project_role = AssignProjectRoleUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )

    get_user_permissions = GetUserPermissionsUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    update_member_permissions = UpdateMemberPermissionsUseCase(unit_of_work_factory=uow_factory)
    remove_member = RemoveMemberUseCase(unit_of_work_factory=uow_factory)
    list_permissions = ListPermissionCatalogueUseCase(unit_of_work_factory=uow_factory)
    list_accessible_projects = ListAccessibleProjectsUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    list_project_access = ListProjectAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    check_project_access = CheckProjectAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    grant_project_access = GrantProjectAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    revoke_project_access = RevokeProjectAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    grant_document_access = GrantDocumentAccessUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    list_audit_log = ListAuditLogUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )
    filter_timeline = FilterTimelineUseCase(
        unit_of_work_factory=uow_factory,
        permission_checker=permission_checker,
    )

    health_resource = HealthResource(ready_check)
    organization_teams_resource = OrganizationTeamsResource(list_teams, create_team)
    team_resource = TeamResource(update_team, delete_team)
    team_members_resource = TeamMembersResource(add_team_member, remove_team_member)
    roles_resource = RolesResource(list_roles, create_role)
    role_resource = RoleResource(update_role, delete_role)
    member_role_resource = MemberRoleResource(assign_role)
    member_resource = MemberResource(remove_member)
    permission_catalogue_resource = PermissionCatalogueResource(list_permissions)
    member_permissions_resource = MemberPermissionsResource(
        get_user_permissions, update_member_permissions
    )
    project_access_resource = ProjectAccessResource(
        list_project_access, check_project_access, grant_project_access, revoke_project_access
    )
    accessible_projects_resource = AccessibleProjectsResource(list_accessible_projects)
    custom_roles_resource = CustomRolesResource(create_custom_role)
    project_roles_resource = ProjectRolesResource(list_project_roles, assign_project_role)
    document_access_resource = DocumentAccessResource(grant_document_access)
    audit_log_resource = AuditLogResource(list_audit_log, default_limit=audit_log_page_size)
    timeline_resource = TimelineResource(filter_timeline)

    app = falcon.asgi.App(middleware=middleware or [])
    register_error_handlers(app)

    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/organizations/{organization_id}/teams", organization_teams_resource)
    app.add_route("/v1/organizations/{organization_id}/timeline", timeline_resource)
    app.add_route("/v1/teams/{team_id}", team_resource)
    app.add_route("/v1/teams/{team_id}/members", team_members_resource)
    app.add_route(
        "/v1/teams/{team_id}/members/{user_id}",
        team_members_resource,
        suffix="member",
    )
    app.add_route("/v1/roles", roles_resource)
    app.add_route("/v1/roles/{role_id}", role_resource)
    app.add_route("/v1/custom-roles", custom_roles_resource)
    app.add_route("/v1/permissions", permission_catalogue_resource)
    app.add_route("/v1/members/{user_id}", member_resource)
    app.add_route("/v1/members/{user_id}/role", member_role_resource)
    app.add_route("/v1/members/{user_id}/permissions", member_permissions_resource)
    app.add_route("/v1/projects/accessible", accessible_projects_resource)
    app.add_route("/v1/projects/{project_id}/access", project_access_resource)
    app.add_route("/v1/projects/{project_id}/roles", project_roles_resource)
    app.add_route("/v1/documents/{document_id}/access", document_access_resource)
    app.add_route("/v1/audit-log", audit_log_resource)

    return app


def create_crewline_app() -> falcon.asgi.App:
    """Composition root - build Falcon app with all dependencies."""
    settings = get_settings()
    configure_logging(settings)

    pool = create_pool(
        settings.database_url,
        min_size=settings.database_pool_min_size,
        max_size=settings.database_pool_max_size,
    )
    uow_factory = create_uow_factory(pool)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )
    if keycloak is None:
        logger.warning("Keycloak client secret not set; all requests are unauthenticated")

    permission_checker = RoleBasedPermissionChecker(uow_factory)

    logger.info("Crewline v%s starting (%s)", __version__, settings.environment)
    return build_app(
        uow_factory,
        permission_checker,
        middleware=[
            CORSMiddleware(settings.cors_origin_list),
            PoolLifespanMiddleware(pool),
            AuthMiddleware(keycloak),
        ],
        ready_check=partial(ping, pool),
        audit_log_page_size=settings.audit_log_page_size,
    )


def run_server() -> None:
    """Run uvicorn server."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_crewline_app(), host=settings.host, port=settings.port)


def main() -> None:
    """CLI entry point."""
    run_server()
