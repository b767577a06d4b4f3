"""Pytest fixtures for Crewline tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import UTC, date, datetime
from uuid import UUID, uuid4

import pytest

from crewline.domain.entities import (
    CustomRole,
    Document,
    DocumentAccess,
    Organization,
    OrganizationMember,
    Permission,
    PermissionAuditLog,
    Project,
    ProjectAccess,
    ResourcePermission,
    Role,
    Task,
    Team,
    TeamMember,
    TeamProjectAccess,
    User,
    UserCustomRole,
    UserPermission,
)
from crewline.domain.permission_catalogue import PROJECT_ROLES

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


# --- Fake repositories ---


class FakeOrganizationRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, Organization] = {}

    async def get_by_id(self, organization_id: UUID) -> Organization | None:
        return self.by_id.get(organization_id)

    async def create(self, organization: Organization) -> Organization:
        self.by_id[organization.id] = organization
        return organization


class FakeMemberRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, OrganizationMember] = {}

    async def get(self, organization_id: UUID, user_id: UUID) -> OrganizationMember | None:
        for m in self.rows.values():
            if m.organization_id == organization_id and m.user_id == user_id:
                return m
        return None

    async def list_by_organization(self, organization_id: UUID) -> list[OrganizationMember]:
        return [m for m in self.rows.values() if m.organization_id == organization_id]

    async def count_with_role(self, organization_id: UUID, role_id: UUID) -> int:
        return sum(
            1
            for m in self.rows.values()
            if m.organization_id == organization_id and m.role_id == role_id
        )

    async def create(self, member: OrganizationMember) -> OrganizationMember:
        self.rows[member.id] = member
        return member

    async def update(self, member: OrganizationMember) -> None:
        self.rows[member.id] = member


class FakeUserRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> User | None:
        return self.by_id.get(user_id)

    async def get_by_auth_id(self, auth_id: str) -> User | None:
        return next((u for u in self.by_id.values() if u.auth_id == auth_id), None)

    async def get_by_email(self, email: str) -> User | None:
        return next(
            (u for u in self.by_id.values() if u.email.lower() == email.lower()), None
        )

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]:
        return [self.by_id[i] for i in user_ids if i in self.by_id]

    async def create(self, user: User) -> User:
        self.by_id[user.id] = user
        return user

    async def update(self, user: User) -> None:
        self.by_id[user.id] = user


class FakeRoleRepository:
    def __init__(self, permissions: FakePermissionRepository) -> None:
        self.by_id: dict[UUID, Role] = {}
        self.role_permissions: dict[UUID, list[UUID]] = {}
        self._permissions = permissions

    async def get_by_id(self, role_id: UUID) -> Role | None:
        return self.by_id.get(role_id)

    async def get_by_name(self, name: str, organization_id: UUID | None = None) -> Role | None:
        return next(
            (
                r
                for r in self.by_id.values()
                if r.name == name and r.organization_id == organization_id
            ),
            None,
        )

    async def list_for_organization(self, organization_id: UUID) -> list[Role]:
        roles = [
            r
            for r in self.by_id.values()
            if r.organization_id is None or r.organization_id == organization_id
        ]
        return sorted(roles, key=lambda r: (-r.priority, r.name))

    async def list_all(self) -> list[Role]:
        return sorted(self.by_id.values(), key=lambda r: -r.priority)

    async def create(self, role: Role) -> Role:
        self.by_id[role.id] = role
        return role

    async def update(self, role: Role) -> None:
        self.by_id[role.id] = role

    async def delete(self, role_id: UUID) -> None:
        self.by_id.pop(role_id, None)

    async def list_permissions(self, role_id: UUID) -> list[Permission]:
        ids = self.role_permissions.get(role_id, [])
        perms = [self._permissions.by_id[i] for i in ids if i in self._permissions.by_id]
        return sorted(perms, key=lambda p: (p.resource, p.action))

    async def replace_permissions(
        self, role_id: UUID, permission_ids: list[UUID], created_at: datetime
    ) -> None:
        self.role_permissions[role_id] = list(permission_ids)

    async def delete_permissions(self, role_id: UUID) -> None:
        self.role_permissions.pop(role_id, None)


class FakePermissionRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, Permission] = {}

    async def get_by_id(self, permission_id: UUID) -> Permission | None:
        return self.by_id.get(permission_id)

    async def get_by_resource_action(self, resource: str, action: str) -> Permission | None:
        return next(
            (p for p in self.by_id.values() if p.resource == resource and p.action == action),
            None,
        )

    async def list_by_ids(self, permission_ids: list[UUID]) -> list[Permission]:
        return [self.by_id[i] for i in permission_ids if i in self.by_id]

    async def list_all(self) -> list[Permission]:
        return sorted(self.by_id.values(), key=lambda p: (p.resource, p.action))

    async def create(self, permission: Permission) -> Permission:
        self.by_id[permission.id] = permission
        return permission


class FakeUserPermissionRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, UserPermission] = {}

    async def get(self, user_id: UUID, permission_id: UUID) -> UserPermission | None:
        return next(
            (
                o
                for o in self.rows.values()
                if o.user_id == user_id and o.permission_id == permission_id
            ),
            None,
        )

    async def list_by_user(self, user_id: UUID) -> list[UserPermission]:
        return [o for o in self.rows.values() if o.user_id == user_id]

    async def create(self, override: UserPermission) -> UserPermission:
        self.rows[override.id] = override
        return override

    async def update(self, override: UserPermission) -> None:
        self.rows[override.id] = override

    async def delete(self, override_id: UUID) -> None:
        self.rows.pop(override_id, None)


class FakeTeamRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, Team] = {}

    async def get_by_id(self, team_id: UUID) -> Team | None:
        return self.by_id.get(team_id)

    async def list_by_organization(
        self, organization_id: UUID, include_inactive: bool = False
    ) -> list[Team]:
        teams = [
            t
            for t in self.by_id.values()
            if t.organization_id == organization_id and (include_inactive or t.is_active)
        ]
        return sorted(teams, key=lambda t: (t.created_at, t.name))

    async def list_children(self, team_id: UUID) -> list[Team]:
        return [t for t in self.by_id.values() if t.parent_team_id == team_id]

    async def create(self, team: Team) -> Team:
        self.by_id[team.id] = team
        return team

    async def update(self, team: Team) -> None:
        self.by_id[team.id] = team


class FakeTeamMemberRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, TeamMember] = {}

    async def get(self, team_id: UUID, user_id: UUID) -> TeamMember | None:
        return next(
            (m for m in self.rows.values() if m.team_id == team_id and m.user_id == user_id),
            None,
        )

    async def list_by_team(self, team_id: UUID) -> list[TeamMember]:
        return sorted(
            (m for m in self.rows.values() if m.team_id == team_id), key=lambda m: m.joined_at
        )

    async def list_by_user(self, user_id: UUID) -> list[TeamMember]:
        return [m for m in self.rows.values() if m.user_id == user_id]

    async def create(self, member: TeamMember) -> TeamMember:
        self.rows[member.id] = member
        return member

    async def update(self, member: TeamMember) -> None:
        self.rows[member.id] = member

    async def delete(self, member_id: UUID) -> None:
        self.rows.pop(member_id, None)


class FakeProjectRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, Project] = {}

    async def get_by_id(self, project_id: UUID) -> Project | None:
        return self.by_id.get(project_id)

    async def list_by_organization(self, organization_id: UUID) -> list[Project]:
        projects = [p for p in self.by_id.values() if p.organization_id == organization_id]
        return sorted(projects, key=lambda p: (p.start_date, p.name))

    async def create(self, project: Project) -> Project:
        self.by_id[project.id] = project
        return project


class FakeTaskRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, Task] = {}

    async def list_by_projects(self, project_ids: list[UUID]) -> list[Task]:
        wanted = set(project_ids)
        tasks = [t for t in self.by_id.values() if t.project_id in wanted]
        return sorted(tasks, key=lambda t: t.start_date)

    async def create(self, task: Task) -> Task:
        self.by_id[task.id] = task
        return task


class FakeDocumentRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, Document] = {}

    async def get_by_id(self, document_id: UUID) -> Document | None:
        return self.by_id.get(document_id)

    async def create(self, document: Document) -> Document:
        self.by_id[document.id] = document
        return document


class FakeProjectAccessRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, ProjectAccess] = {}

    async def get(self, project_id: UUID, user_id: UUID) -> ProjectAccess | None:
        return next(
            (a for a in self.rows.values() if a.project_id == project_id and a.user_id == user_id),
            None,
        )

    async def list_by_project(self, project_id: UUID) -> list[ProjectAccess]:
        return [a for a in self.rows.values() if a.project_id == project_id]

    async def list_by_user(self, user_id: UUID) -> list[ProjectAccess]:
        return [a for a in self.rows.values() if a.user_id == user_id]

    async def create(self, access: ProjectAccess) -> ProjectAccess:
        self.rows[access.id] = access
        return access

    async def update(self, access: ProjectAccess) -> None:
        self.rows[access.id] = access

    async def delete(self, access_id: UUID) -> None:
        self.rows.pop(access_id, None)


class FakeTeamProjectAccessRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, TeamProjectAccess] = {}

    async def get(self, team_id: UUID, project_id: UUID) -> TeamProjectAccess | None:
        return next(
            (a for a in self.rows.values() if a.team_id == team_id and a.project_id == project_id),
            None,
        )

    async def list_by_project(self, project_id: UUID) -> list[TeamProjectAccess]:
        return [a for a in self.rows.values() if a.project_id == project_id]

    async def create(self, access: TeamProjectAccess) -> TeamProjectAccess:
        self.rows[access.id] = access
        return access

    async def update(self, access: TeamProjectAccess) -> None:
        self.rows[access.id] = access

    async def delete(self, access_id: UUID) -> None:
        self.rows.pop(access_id, None)


class FakeDocumentAccessRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, DocumentAccess] = {}

    async def get_for_user(self, document_id: UUID, user_id: UUID) -> DocumentAccess | None:
        return next(
            (a for a in self.rows.values() if a.document_id == document_id and a.user_id == user_id),
            None,
        )

    async def get_for_team(self, document_id: UUID, team_id: UUID) -> DocumentAccess | None:
        return next(
            (a for a in self.rows.values() if a.document_id == document_id and a.team_id == team_id),
            None,
        )

    async def create(self, access: DocumentAccess) -> DocumentAccess:
        self.rows[access.id] = access
        return access

    async def update(self, access: DocumentAccess) -> None:
        self.rows[access.id] = access


class FakeResourcePermissionRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, ResourcePermission] = {}

    async def get_for_user(
        self, resource_type: str, resource_id: UUID, user_id: UUID
    ) -> ResourcePermission | None:
        return next(
            (
                p
                for p in self.rows.values()
                if p.resource_type == resource_type
                and p.resource_id == resource_id
                and p.user_id == user_id
            ),
            None,
        )

    async def get_for_team(
        self, resource_type: str, resource_id: UUID, team_id: UUID
    ) -> ResourcePermission | None:
        return next(
            (
                p
                for p in self.rows.values()
                if p.resource_type == resource_type
                and p.resource_id == resource_id
                and p.team_id == team_id
            ),
            None,
        )

    async def create(self, permission: ResourcePermission) -> ResourcePermission:
        self.rows[permission.id] = permission
        return permission


class FakeAuditLogRepository:
    def __init__(self) -> None:
        self.entries: list[PermissionAuditLog] = []

    async def append(self, entry: PermissionAuditLog) -> PermissionAuditLog:
        self.entries.append(entry)
        return entry

    async def list_recent(self, limit: int = 50) -> list[PermissionAuditLog]:
        return sorted(self.entries, key=lambda e: e.created_at, reverse=True)[:limit]

    async def list_by_target_user(self, user_id: UUID) -> list[PermissionAuditLog]:
        return [e for e in reversed(self.entries) if e.target_user_id == user_id]

    def actions(self) -> list[str]:
        return [str(e.action) for e in self.entries]


class FakeCustomRoleRepository:
    def __init__(self) -> None:
        self.by_id: dict[UUID, CustomRole] = {}

    async def get_by_id(self, role_id: UUID) -> CustomRole | None:
        return self.by_id.get(role_id)

    async def get_by_name(
        self, name: str, scope: str, scope_id: UUID | None = None
    ) -> CustomRole | None:
        return next(
            (
                r
                for r in self.by_id.values()
                if r.name == name and r.scope == scope and r.scope_id == scope_id
            ),
            None,
        )

    async def list_by_scope(self, scope: str, scope_id: UUID | None = None) -> list[CustomRole]:
        return [r for r in self.by_id.values() if r.scope == scope and r.scope_id == scope_id]

    async def list_by_ids(self, role_ids: list[UUID]) -> list[CustomRole]:
        return [self.by_id[i] for i in role_ids if i in self.by_id]

    async def create(self, role: CustomRole) -> CustomRole:
        self.by_id[role.id] = role
        return role


class FakeUserCustomRoleRepository:
    def __init__(self) -> None:
        self.rows: dict[UUID, UserCustomRole] = {}

    async def get(self, user_id: UUID, role_id: UUID) -> UserCustomRole | None:
        return next(
            (a for a in self.rows.values() if a.user_id == user_id and a.role_id == role_id),
            None,
        )

    async def list_by_user(self, user_id: UUID) -> list[UserCustomRole]:
        return [a for a in self.rows.values() if a.user_id == user_id]

    async def create(self, assignment: UserCustomRole) -> UserCustomRole:
        self.rows[assignment.id] = assignment
        return assignment

    async def update(self, assignment: UserCustomRole) -> None:
        self.rows[assignment.id] = assignment


class FakeUnitOfWork:
    """In-memory Unit of Work with fake repositories."""

    def __init__(self) -> None:
        self.organizations = FakeOrganizationRepository()
        self.members = FakeMemberRepository()
        self.users = FakeUserRepository()
        self.permissions = FakePermissionRepository()
        self.roles = FakeRoleRepository(self.permissions)
        self.user_permissions = FakeUserPermissionRepository()
        self.teams = FakeTeamRepository()
        self.team_members = FakeTeamMemberRepository()
        self.projects = FakeProjectRepository()
        self.tasks = FakeTaskRepository()
        self.documents = FakeDocumentRepository()
        self.project_access = FakeProjectAccessRepository()
        self.team_project_access = FakeTeamProjectAccessRepository()
        self.document_access = FakeDocumentAccessRepository()
        self.resource_permissions = FakeResourcePermissionRepository()
        self.audit_log = FakeAuditLogRepository()
        self.custom_roles = FakeCustomRoleRepository()
        self.user_custom_roles = FakeUserCustomRoleRepository()
        self.commits = 0
        self.rollbacks = 0
        self.open_units = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1


def make_uow_factory(uow: FakeUnitOfWork):
    """Factory whose every call yields the same in-memory UnitOfWork."""

    @asynccontextmanager
    async def _factory() -> AsyncIterator[FakeUnitOfWork]:
        uow.open_units += 1
        try:
            yield uow
        except Exception:
            await uow.rollback()
            raise
        else:
            await uow.commit()
        finally:
            uow.open_units -= 1

    return _factory


# --- World builder ---


class World:
    """Populates a FakeUnitOfWork with organizations, users, roles and projects.

    Writes go straight into the fake repositories, so no audit entries are
    produced by setup.
    """

    def __init__(self, uow: FakeUnitOfWork) -> None:
        self.uow = uow

    def permission(self, resource: str, action: str) -> Permission:
        existing = next(
            (
                p
                for p in self.uow.permissions.by_id.values()
                if p.resource == resource and p.action == action
            ),
            None,
        )
        if existing:
            return existing
        perm = Permission(id=uuid4(), resource=resource, action=action, created_at=NOW)
        self.uow.permissions.by_id[perm.id] = perm
        return perm

    def role(
        self,
        name: str,
        *keys: str,
        organization: Organization | None = None,
        is_director: bool = False,
        is_system: bool = False,
        priority: int = 50,
    ) -> Role:
        """Create a role holding the given "resource:action" permissions."""
        role = Role(
            id=uuid4(),
            name=name,
            display_name=name.title(),
            priority=priority,
            created_at=NOW,
            updated_at=NOW,
            is_director=is_director,
            is_system=is_system,
            organization_id=organization.id if organization else None,
        )
        self.uow.roles.by_id[role.id] = role
        self.uow.roles.role_permissions[role.id] = [
            self.permission(*key.split(":")).id for key in keys
        ]
        return role

    def user(self, name: str, *, organization: Organization | None = None) -> User:
        user = User(
            id=uuid4(),
            name=name,
            email=f"{name.lower()}@example.com",
            created_at=NOW,
            auth_id=f"kc-{name.lower()}",
            current_organization_id=organization.id if organization else None,
        )
        self.uow.users.by_id[user.id] = user
        return user

    def organization(self, owner: User, name: str = "Stroy") -> Organization:
        org = Organization(
            id=uuid4(),
            name=name,
            slug=name.lower(),
            owner_id=owner.id,
            created_at=NOW,
            updated_at=NOW,
        )
        self.uow.organizations.by_id[org.id] = org
        owner.current_organization_id = owner.current_organization_id or org.id
        return org

    def member(
        self,
        organization: Organization,
        user: User,
        role: Role,
        *,
        is_active: bool = True,
    ) -> OrganizationMember:
        membership = OrganizationMember(
            id=uuid4(),
            organization_id=organization.id,
            user_id=user.id,
            role_id=role.id,
            joined_at=NOW,
            is_active=is_active,
        )
        self.uow.members.rows[membership.id] = membership
        user.current_organization_id = user.current_organization_id or organization.id
        return membership

    def team(
        self,
        organization: Organization,
        name: str,
        *,
        leader: User | None = None,
        parent: Team | None = None,
        members: tuple[User, ...] = (),
        is_active: bool = True,
    ) -> Team:
        team = Team(
            id=uuid4(),
            organization_id=organization.id,
            name=name,
            created_at=NOW,
            updated_at=NOW,
            is_active=is_active,
            parent_team_id=parent.id if parent else None,
            leader_id=leader.id if leader else None,
        )
        self.uow.teams.by_id[team.id] = team
        if leader is not None:
            self.team_member(team, leader, role="leader")
        for user in members:
            self.team_member(team, user)
        return team

    def team_member(self, team: Team, user: User, role: str = "member") -> TeamMember:
        row = TeamMember(id=uuid4(), team_id=team.id, user_id=user.id, joined_at=NOW, role=role)
        self.uow.team_members.rows[row.id] = row
        return row

    def project(
        self,
        organization: Organization,
        name: str,
        *,
        start: date = date(2026, 1, 1),
        target: date | None = None,
        status_id: UUID | None = None,
        lead: User | None = None,
        team_members: tuple[User, ...] = (),
    ) -> Project:
        project = Project(
            id=uuid4(),
            organization_id=organization.id,
            name=name,
            start_date=start,
            created_at=NOW,
            target_date=target,
            status_id=status_id,
            lead_id=lead.id if lead else None,
            team_member_ids=[u.id for u in team_members],
        )
        self.uow.projects.by_id[project.id] = project
        return project

    def task(
        self, project: Project, title: str, start: date, due: date | None = None
    ) -> Task:
        task = Task(id=uuid4(), project_id=project.id, title=title, start_date=start, due_date=due)
        self.uow.tasks.by_id[task.id] = task
        return task

    def document(
        self, organization: Organization, author: User, project: Project | None = None
    ) -> Document:
        doc = Document(
            id=uuid4(),
            organization_id=organization.id,
            title="Spec sheet",
            author_id=author.id,
            created_at=NOW,
            project_id=project.id if project else None,
        )
        self.uow.documents.by_id[doc.id] = doc
        return doc

    def project_access(
        self,
        project: Project,
        user: User,
        level: str,
        *,
        expires_at: datetime | None = None,
    ) -> ProjectAccess:
        access = ProjectAccess(
            id=uuid4(),
            project_id=project.id,
            user_id=user.id,
            access_level=level,
            granted_by=user.id,
            granted_at=NOW,
            expires_at=expires_at,
        )
        self.uow.project_access.rows[access.id] = access
        return access

    def override(
        self,
        user: User,
        key: str,
        granted: bool,
        *,
        expires_at: datetime | None = None,
    ) -> UserPermission:
        row = UserPermission(
            id=uuid4(),
            user_id=user.id,
            permission_id=self.permission(*key.split(":")).id,
            granted=granted,
            created_at=NOW,
            expires_at=expires_at,
        )
        self.uow.user_permissions.rows[row.id] = row
        return row

    def project_role(
        self,
        project: Project,
        user: User,
        role_type: str = "member",
        *,
        expires_at: datetime | None = None,
    ) -> UserCustomRole:
        """Assign the user a project bundle built from the catalogue defaults."""
        spec = PROJECT_ROLES[role_type]
        bundle = CustomRole(
            id=uuid4(),
            name=spec.name,
            display_name=spec.display_name,
            scope="project",
            created_at=NOW,
            permissions={r: list(a) for r, a in spec.permissions.items()},
            scope_id=project.id,
        )
        self.uow.custom_roles.by_id[bundle.id] = bundle
        assignment = UserCustomRole(
            id=uuid4(), user_id=user.id, role_id=bundle.id, created_at=NOW, expires_at=expires_at
        )
        self.uow.user_custom_roles.rows[assignment.id] = assignment
        return assignment


class UnitTrackingChecker:
    """Delegates to a real checker and records how many units of work were open per call."""

    def __init__(self, inner, uow: FakeUnitOfWork) -> None:
        self._inner = inner
        self._uow = uow
        self.open_units_seen: list[int] = []

    async def check(self, *args, **kwargs):
        self.open_units_seen.append(self._uow.open_units)
        return await self._inner.check(*args, **kwargs)

    async def evaluate(self, *args, **kwargs):
        self.open_units_seen.append(self._uow.open_units)
        return await self._inner.evaluate(*args, **kwargs)

    async def project_access_level(self, *args, **kwargs):
        self.open_units_seen.append(self._uow.open_units)
        return await self._inner.project_access_level(*args, **kwargs)

    async def effective_permissions(self, *args, **kwargs):
        self.open_units_seen.append(self._uow.open_units)
        return await self._inner.effective_permissions(*args, **kwargs)


# --- Fixtures ---


@pytest.fixture
def fake_uow() -> FakeUnitOfWork:
    """Fresh in-memory UnitOfWork for each test."""
    return FakeUnitOfWork()


@pytest.fixture
def uow_factory(fake_uow: FakeUnitOfWork):
    """Factory returning async context manager with the shared FakeUnitOfWork."""
    return make_uow_factory(fake_uow)


@pytest.fixture
def world(fake_uow: FakeUnitOfWork) -> World:
    return World(fake_uow)


@pytest.fixture
def org_setup(world: World):
    """An organization with an owner, an admin, a manager and two plain members."""
    owner = world.user("Olga")
    org = world.organization(owner)
    roles = {
        "owner": world.role("owner", is_director=True, is_system=True, priority=100),
        "admin": world.role("admin", is_system=True, priority=90),
        "manager": world.role("manager", organization=org, priority=60),
        "member": world.role("member", "projects:read", organization=org, priority=20),
    }
    users = {
        "owner": owner,
        "admin": world.user("Anna"),
        "manager": world.user("Mark"),
        "alice": world.user("Alice"),
        "bob": world.user("Bob"),
    }
    world.member(org, owner, roles["owner"])
    world.member(org, users["admin"], roles["admin"])
    world.member(org, users["manager"], roles["manager"])
    world.member(org, users["alice"], roles["member"])
    world.member(org, users["bob"], roles["member"])
    return org, roles, users


def actor(user: User) -> str:
    """The auth subject a request for this user carries."""
    return user.auth_id


@pytest.fixture
def mock_permission_checker():
    """AsyncMock for PermissionChecker - allows by default."""
    from unittest.mock import AsyncMock

    from crewline.domain.value_objects import AccessDecision, AccessLevel

    checker = AsyncMock()
    checker.check.return_value = True
    checker.evaluate.return_value = AccessDecision.allow("mock", AccessLevel.ADMIN)
    checker.project_access_level.return_value = AccessLevel.ADMIN
    checker.effective_permissions.return_value = []
    return checker
