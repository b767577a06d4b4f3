"""Member permissions, project and document sharing, audit log, timeline."""

from datetime import date
from uuid import uuid4

import pytest

from crewline.application.dto.permission_dto import PermissionOverrideInput
from crewline.application.use_cases.permission.document_access import GrantDocumentAccessUseCase
from crewline.application.use_cases.permission.get_user_permissions import (
    GetUserPermissionsUseCase,
)
from crewline.application.use_cases.permission.list_audit_log import ListAuditLogUseCase
from crewline.application.use_cases.permission.project_access import (
    CheckProjectAccessUseCase,
    GrantProjectAccessUseCase,
    ListProjectAccessUseCase,
    RevokeProjectAccessUseCase,
)
from crewline.application.use_cases.permission.update_member_permissions import (
    UpdateMemberPermissionsUseCase,
)
from crewline.application.use_cases.timeline.filter_timeline import FilterTimelineUseCase
from crewline.domain.exceptions import NotFound, PermissionDenied, ValidationError
from crewline.domain.value_objects import AccessLevel, DocumentAccessLevel, TimelineFilter
from crewline.infrastructure.permission.permission_checker import RoleBasedPermissionChecker

from tests.conftest import NOW, UnitTrackingChecker, actor


@pytest.fixture
def checker(uow_factory) -> RoleBasedPermissionChecker:
    return RoleBasedPermissionChecker(uow_factory, clock=lambda: NOW)


# --- UpdateMemberPermissionsUseCase ---


@pytest.mark.asyncio
async def test_update_member_permissions_upserts_overrides(uow_factory, world, fake_uow, org_setup) -> None:
    _, roles, users = org_setup
    perm = world.permission("revenue", "read")
    existing = world.override(users["bob"], "projects:read", granted=True)
    use_case = UpdateMemberPermissionsUseCase(uow_factory)

    await use_case.execute(
        actor(users["admin"]),
        users["bob"].id,
        role_id=roles["manager"].id,
        overrides=[
            PermissionOverrideInput(permission_id=perm.id, granted=True),
            PermissionOverrideInput(permission_id=existing.permission_id, granted=False),
        ],
    )

    rows = {o.permission_id: o.granted for o in fake_uow.user_permissions.rows.values()}
    assert rows == {perm.id: True, existing.permission_id: False}
    membership = await fake_uow.members.get(org_setup[0].id, users["bob"].id)
    assert membership.role_id == roles["manager"].id
    entry = fake_uow.audit_log.entries[-1]
    assert entry.action == "permissions_updated"
    assert entry.details == {"role_changed": True, "custom_permissions_count": 2}


@pytest.mark.asyncio
async def test_update_member_permissions_director_role_owner_only(uow_factory, org_setup) -> None:
    _, roles, users = org_setup
    with pytest.raises(PermissionDenied, match="owner can assign director roles"):
        await UpdateMemberPermissionsUseCase(uow_factory).execute(
            actor(users["admin"]), users["bob"].id, role_id=roles["owner"].id
        )


@pytest.mark.asyncio
async def test_update_member_permissions_requires_manager(uow_factory, org_setup) -> None:
    _, _, users = org_setup
    with pytest.raises(PermissionDenied, match="Insufficient permissions to update member permissions"):
        await UpdateMemberPermissionsUseCase(uow_factory).execute(
            actor(users["alice"]), users["bob"].id, overrides=[]
        )


@pytest.mark.asyncio
async def test_update_member_permissions_unknown_member(uow_factory, world, org_setup) -> None:
    _, _, users = org_setup
    with pytest.raises(NotFound, match="Member not found in organization"):
        await UpdateMemberPermissionsUseCase(uow_factory).execute(
            actor(users["owner"]), world.user("Zed").id
        )


# --- GetUserPermissionsUseCase ---


@pytest.mark.asyncio
async def test_user_reads_own_permissions(uow_factory, world, checker, org_setup) -> None:
    _, roles, users = org_setup
    world.override(users["alice"], "teams:read", granted=True)
    result = await GetUserPermissionsUseCase(uow_factory, checker).execute(
        actor(users["alice"]), users["alice"].id
    )
    assert result.role.id == roles["member"].id
    assert [p.key for p in result.role_permissions] == ["projects:read"]
    assert [o.permission.key for o in result.overrides] == ["teams:read"]
    assert result.effective == ["projects:read", "teams:read"]


@pytest.mark.asyncio
async def test_reading_others_permissions_needs_permissions_read(uow_factory, checker, org_setup) -> None:
    _, _, users = org_setup
    with pytest.raises(PermissionDenied, match="view user permissions"):
        await GetUserPermissionsUseCase(uow_factory, checker).execute(
            actor(users["alice"]), users["bob"].id
        )


# --- Project access ---


@pytest.mark.asyncio
async def test_project_lead_grants_user_access(uow_factory, world, fake_uow, checker, org_setup) -> None:
    org, _, users = org_setup
    project = world.project(org, "Tower", lead=users["alice"])
    grant = await GrantProjectAccessUseCase(uow_factory, checker).execute(
        actor(users["alice"]), project.id, AccessLevel.WRITE, user_id=users["bob"].id
    )
    assert grant.access_level == "write"
    assert await checker.project_access_level(users["bob"].id, project.id) == AccessLevel.WRITE

    regrant = await GrantProjectAccessUseCase(uow_factory, checker).execute(
        actor(users["alice"]), project.id, AccessLevel.READ, user_id=users["bob"].id
    )
    assert regrant.id == grant.id
    assert len(fake_uow.project_access.rows) == 1
    assert fake_uow.audit_log.actions() == ["project_access_granted", "project_access_granted"]


@pytest.mark.asyncio
async def test_grant_requires_exactly_one_grantee(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    project = world.project(org, "Tower")
    use_case = GrantProjectAccessUseCase(uow_factory, checker)
    with pytest.raises(ValidationError, match="either userId or teamId"):
        await use_case.execute(actor(users["owner"]), project.id, AccessLevel.READ)
    with pytest.raises(ValidationError):
        await use_case.execute(
            actor(users["owner"]), project.id, AccessLevel.READ, user_id=uuid4(), team_id=uuid4()
        )


@pytest.mark.asyncio
async def test_team_cannot_be_granted_owner(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    team = world.team(org, "Crew")
    project = world.project(org, "Tower")
    with pytest.raises(ValidationError, match="owner"):
        await GrantProjectAccessUseCase(uow_factory, checker).execute(
            actor(users["owner"]), project.id, AccessLevel.OWNER, team_id=team.id
        )


@pytest.mark.asyncio
async def test_writer_cannot_grant(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    project = world.project(org, "Tower", team_members=(users["bob"],))
    with pytest.raises(PermissionDenied, match="grant project access"):
        await GrantProjectAccessUseCase(uow_factory, checker).execute(
            actor(users["bob"]), project.id, AccessLevel.READ, user_id=users["alice"].id
        )


@pytest.mark.asyncio
async def test_team_grant_then_revoke(uow_factory, checker, world, fake_uow, org_setup) -> None:
    org, _, users = org_setup
    team = world.team(org, "Crew", members=(users["bob"],))
    project = world.project(org, "Tower")
    await GrantProjectAccessUseCase(uow_factory, checker).execute(
        actor(users["owner"]), project.id, AccessLevel.ADMIN, team_id=team.id
    )
    assert await checker.project_access_level(users["bob"].id, project.id) == AccessLevel.ADMIN

    listed = await ListProjectAccessUseCase(uow_factory, checker).execute(
        actor(users["bob"]), project.id
    )
    assert [t.team_id for t in listed.teams] == [team.id]

    removed = await RevokeProjectAccessUseCase(uow_factory, checker).execute(
        actor(users["owner"]), project.id, team_id=team.id, user_id=users["alice"].id
    )
    assert removed == 1
    assert fake_uow.team_project_access.rows == {}
    assert fake_uow.audit_log.actions()[-1] == "team_project_access_revoked"


@pytest.mark.asyncio
async def test_revoke_requires_grantee(uow_factory, checker, org_setup) -> None:
    _, _, users = org_setup
    with pytest.raises(ValidationError, match="Must provide userId or teamId"):
        await RevokeProjectAccessUseCase(uow_factory, checker).execute(actor(users["owner"]), uuid4())


@pytest.mark.asyncio
async def test_project_in_other_org_is_not_found(uow_factory, checker, world, org_setup) -> None:
    _, _, users = org_setup
    other = world.organization(world.user("Ivan"), name="Other")
    foreign = world.project(other, "Elsewhere")
    with pytest.raises(NotFound, match="Project not found"):
        await CheckProjectAccessUseCase(uow_factory, checker).execute(actor(users["owner"]), foreign.id)


@pytest.mark.asyncio
async def test_check_project_access(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    project = world.project(org, "Tower")
    world.project_access(project, users["bob"], "read")
    use_case = CheckProjectAccessUseCase(uow_factory, checker)

    assert await use_case.execute(actor(users["bob"]), project.id, AccessLevel.READ)
    denied = await use_case.execute(actor(users["bob"]), project.id, AccessLevel.WRITE)
    assert not denied
    assert denied.level == AccessLevel.READ
    no_access = await use_case.execute(actor(users["alice"]), project.id)
    assert no_access.reason == "No access to project"


@pytest.mark.asyncio
async def test_list_access_without_any_tier(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    project = world.project(org, "Tower")
    with pytest.raises(PermissionDenied, match="view project access"):
        await ListProjectAccessUseCase(uow_factory, checker).execute(actor(users["alice"]), project.id)


# --- Document access ---


@pytest.mark.asyncio
async def test_author_shares_document(uow_factory, checker, world, fake_uow, org_setup) -> None:
    org, _, users = org_setup
    doc = world.document(org, users["alice"])
    grant = await GrantDocumentAccessUseCase(uow_factory, checker).execute(
        actor(users["alice"]), doc.id, DocumentAccessLevel.COMMENTER, user_id=users["bob"].id
    )
    assert grant.access_level == "commenter"
    assert fake_uow.audit_log.actions() == ["document_access_granted"]


@pytest.mark.asyncio
async def test_viewer_cannot_share_document(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    doc = world.document(org, users["alice"])
    await GrantDocumentAccessUseCase(uow_factory, checker).execute(
        actor(users["alice"]), doc.id, DocumentAccessLevel.VIEWER, user_id=users["bob"].id
    )
    with pytest.raises(PermissionDenied, match="share document"):
        await GrantDocumentAccessUseCase(uow_factory, checker).execute(
            actor(users["bob"]), doc.id, DocumentAccessLevel.VIEWER, user_id=users["manager"].id
        )


# --- Audit log ---


@pytest.mark.asyncio
async def test_audit_log_requires_permissions_read(uow_factory, mock_permission_checker, org_setup) -> None:
    _, _, users = org_setup
    mock_permission_checker.check.return_value = False
    with pytest.raises(PermissionDenied, match="view audit log"):
        await ListAuditLogUseCase(uow_factory, mock_permission_checker).execute(actor(users["bob"]))


@pytest.mark.asyncio
async def test_audit_log_limit_is_clamped(uow_factory, mock_permission_checker, fake_uow, org_setup) -> None:
    org, roles, users = org_setup
    from crewline.application.use_cases.role.assign_role import AssignRoleUseCase

    for _ in range(3):
        await AssignRoleUseCase(uow_factory).execute(
            actor(users["owner"]), users["bob"].id, roles["manager"].id
        )
    use_case = ListAuditLogUseCase(uow_factory, mock_permission_checker, max_limit=2)
    assert len(await use_case.execute(actor(users["owner"]), limit=100)) == 2
    assert len(await use_case.execute(actor(users["owner"]), limit=0)) == 1


# --- Timeline ---


@pytest.mark.asyncio
async def test_timeline_filters_projects_and_tasks(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    early = world.project(org, "Early", start=date(2026, 1, 1), target=date(2026, 1, 31))
    late = world.project(org, "Late", start=date(2026, 6, 1), target=date(2026, 7, 1))
    world.task(early, "Dig", date(2026, 1, 2), date(2026, 1, 5))
    world.task(early, "Pour", date(2026, 1, 20))

    result = await FilterTimelineUseCase(uow_factory, checker).execute(
        actor(users["alice"]),
        org.id,
        TimelineFilter(start=date(2026, 1, 1), end=date(2026, 1, 10)),
    )

    assert result.total_projects == 2
    assert [p.project.id for p in result.projects] == [early.id]
    assert [t.title for t in result.projects[0].tasks] == ["Dig"]
    assert late.id not in {p.project.id for p in result.projects}


@pytest.mark.asyncio
async def test_timeline_requires_project_read(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    world.override(users["alice"], "projects:read", granted=False)
    with pytest.raises(PermissionDenied, match="view the timeline"):
        await FilterTimelineUseCase(uow_factory, checker).execute(
            actor(users["alice"]), org.id, TimelineFilter()
        )


@pytest.mark.asyncio
async def test_timeline_uses_role_of_requested_organization(uow_factory, checker, world, org_setup) -> None:
    _, _, users = org_setup
    alice = users["alice"]
    other_org = world.organization(world.user("Petr"), name="Other")
    world.member(other_org, alice, world.role("guest", organization=other_org, priority=10))
    world.project(other_org, "Secret tower")

    with pytest.raises(PermissionDenied, match="view the timeline"):
        await FilterTimelineUseCase(uow_factory, checker).execute(
            actor(alice), other_org.id, TimelineFilter()
        )


@pytest.mark.asyncio
async def test_timeline_allowed_by_role_in_requested_organization(
    uow_factory, checker, world, org_setup
) -> None:
    _, _, users = org_setup
    mark = users["manager"]
    other_org = world.organization(world.user("Petr"), name="Other")
    world.member(other_org, mark, world.role("viewer", "projects:read", organization=other_org))
    world.project(other_org, "Depot")

    result = await FilterTimelineUseCase(uow_factory, checker).execute(
        actor(mark), other_org.id, TimelineFilter()
    )
    assert [p.project.name for p in result.projects] == ["Depot"]


@pytest.mark.asyncio
async def test_project_owner_cannot_reshare_linked_document(uow_factory, checker, world, org_setup) -> None:
    org, _, users = org_setup
    project = world.project(org, "Tower")
    world.project_access(project, users["bob"], "owner")
    doc = world.document(org, users["alice"], project=project)
    with pytest.raises(PermissionDenied, match="share document"):
        await GrantDocumentAccessUseCase(uow_factory, checker).execute(
            actor(users["bob"]), doc.id, DocumentAccessLevel.EDITOR, user_id=users["manager"].id
        )


@pytest.mark.asyncio
async def test_checker_never_runs_inside_a_unit_of_work(
    uow_factory, checker, world, fake_uow, org_setup
) -> None:
    org, _, users = org_setup
    tracking = UnitTrackingChecker(checker, fake_uow)
    owner = actor(users["owner"])
    world.override(users["owner"], "permissions:read", granted=True)
    project = world.project(org, "Tower")
    doc = world.document(org, users["owner"], project=project)

    await CheckProjectAccessUseCase(uow_factory, tracking).execute(owner, project.id)
    await GrantProjectAccessUseCase(uow_factory, tracking).execute(
        owner, project.id, AccessLevel.WRITE, user_id=users["bob"].id
    )
    await ListProjectAccessUseCase(uow_factory, tracking).execute(owner, project.id)
    await RevokeProjectAccessUseCase(uow_factory, tracking).execute(
        owner, project.id, user_id=users["bob"].id
    )
    await GrantDocumentAccessUseCase(uow_factory, tracking).execute(
        owner, doc.id, DocumentAccessLevel.VIEWER, user_id=users["bob"].id
    )
    await GetUserPermissionsUseCase(uow_factory, tracking).execute(owner, users["bob"].id)
    await FilterTimelineUseCase(uow_factory, tracking).execute(owner, org.id, TimelineFilter())
    await ListAuditLogUseCase(uow_factory, tracking).execute(owner)

    assert tracking.open_units_seen
    assert set(tracking.open_units_seen) == {0}
    assert fake_uow.open_units == 0
