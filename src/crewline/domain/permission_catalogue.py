"""Seeded permissions and system roles."""

from dataclasses import dataclass

from crewline.domain.value_objects import PermissionAction as A
from crewline.domain.value_objects import PermissionResource as R


@dataclass(frozen=True)
class PermissionSpec:
    resource: R
    action: A
    description: str

    @property
    def key(self) -> str:
        return f"{self.resource}:{self.action}"


@dataclass(frozen=True)
class SystemRoleSpec:
    name: str
    display_name: str
    description: str
    priority: int
    is_director: bool
    permissions: frozenset[str]


_CRUD = (A.CREATE, A.READ, A.UPDATE, A.DELETE, A.MANAGE)

_DESCRIPTIONS = {
    R.PROJECTS: "projects",
    R.CONSTRUCTION_PROJECTS: "construction projects",
    R.USERS: "users",
    R.TEAMS: "teams",
    R.CONSTRUCTION_TEAMS: "construction teams",
    R.ISSUES: "issues/tasks",
    R.ROLES: "roles",
    R.REVENUE: "revenue entries",
    R.WORK_CATEGORIES: "work categories",
}


def _crud(resource: R) -> list[PermissionSpec]:
    noun = _DESCRIPTIONS[resource]
    verbs = {
        A.CREATE: f"Create {noun}",
        A.READ: f"View {noun}",
        A.UPDATE: f"Update {noun}",
        A.DELETE: f"Delete {noun}",
        A.MANAGE: f"Full {noun} management",
    }
    return [PermissionSpec(resource, action, verbs[action]) for action in _CRUD]


ALL_PERMISSIONS: tuple[PermissionSpec, ...] = (
    *_crud(R.PROJECTS),
    *_crud(R.CONSTRUCTION_PROJECTS),
    *_crud(R.USERS),
    *_crud(R.TEAMS),
    *_crud(R.CONSTRUCTION_TEAMS),
    *_crud(R.ISSUES),
    *_crud(R.ROLES),
    PermissionSpec(R.PERMISSIONS, A.READ, "View permissions"),
    PermissionSpec(R.PERMISSIONS, A.MANAGE, "Manage permissions"),
    *_crud(R.REVENUE),
    *_crud(R.WORK_CATEGORIES),
)

_ALL_KEYS = frozenset(p.key for p in ALL_PERMISSIONS)


def _keys(*pairs: tuple[R, A]) -> frozenset[str]:
    return frozenset(f"{resource}:{action}" for resource, action in pairs)


def _grid(resources: tuple[R, ...], actions: tuple[A, ...]) -> list[tuple[R, A]]:
    return [(r, a) for r in resources for a in actions]


_PROJECTS = (R.PROJECTS, R.CONSTRUCTION_PROJECTS)
_TEAMS = (R.TEAMS, R.CONSTRUCTION_TEAMS)
_WRITE = (A.CREATE, A.READ, A.UPDATE)
_WRITE_MANAGE = (A.CREATE, A.READ, A.UPDATE, A.MANAGE)

SYSTEM_ROLES: tuple[SystemRoleSpec, ...] = (
    SystemRoleSpec(
        name="owner",
        display_name="Владелец",
        description="Полный доступ ко всей системе и всем подразделениям",
        priority=100,
        is_director=True,
        permissions=_ALL_KEYS,
    ),
    SystemRoleSpec(
        name="ceo",
        display_name="Генеральный директор",
        description="Управление компанией, доступ ко всем проектам и отделам",
        priority=95,
        is_director=True,
        permissions=_ALL_KEYS,
    ),
    SystemRoleSpec(
        name="admin",
        display_name="Администратор",
        description="Управление настройками организации и участниками",
        priority=90,
        is_director=False,
        permissions=_ALL_KEYS,
    ),
    SystemRoleSpec(
        name="chief_engineer",
        display_name="Главный инженер проекта",
        description="Главный инженер проекта, управление всеми техническими аспектами",
        priority=80,
        is_director=False,
        permissions=frozenset(
            p.key
            for p in ALL_PERMISSIONS
            if not (p.resource == R.ROLES and p.action != A.READ)
            and not (p.resource == R.PERMISSIONS and p.action == A.MANAGE)
        ),
    ),
    SystemRoleSpec(
        name="department_head",
        display_name="Руководитель отдела",
        description="Руководитель отдела, управление сотрудниками и проектами отдела",
        priority=70,
        is_director=False,
        permissions=_keys(
            *_grid(_PROJECTS, _WRITE),
            *_grid(_TEAMS, _WRITE_MANAGE),
            *_grid((R.ISSUES, R.WORK_CATEGORIES), _WRITE_MANAGE),
            (R.USERS, A.READ),
            (R.USERS, A.UPDATE),
            (R.REVENUE, A.READ),
            (R.REVENUE, A.UPDATE),
            (R.ROLES, A.READ),
        ),
    ),
    SystemRoleSpec(
        name="project_manager",
        display_name="Руководитель проекта",
        description="Управление проектами, командами и назначение задач",
        priority=60,
        is_director=False,
        permissions=_keys(
            *_grid(_PROJECTS, _WRITE_MANAGE),
            *_grid(_TEAMS, _WRITE_MANAGE),
            *_grid((R.ISSUES, R.WORK_CATEGORIES), _WRITE_MANAGE),
            (R.USERS, A.READ),
            (R.REVENUE, A.READ),
            (R.REVENUE, A.UPDATE),
        ),
    ),
    SystemRoleSpec(
        name="engineer",
        display_name="Инженер",
        description="Просмотр и обновление назначенных задач и проектов",
        priority=30,
        is_director=False,
        permissions=_keys(
            *_grid(_PROJECTS + _TEAMS, (A.READ,)),
            (R.ISSUES, A.READ),
            (R.ISSUES, A.UPDATE),
            (R.USERS, A.READ),
            (R.WORK_CATEGORIES, A.READ),
        ),
    ),
    SystemRoleSpec(
        name="viewer",
        display_name="Наблюдатель",
        description="Только просмотр проектов и задач",
        priority=10,
        is_director=False,
        permissions=_keys(
            *_grid(
                _PROJECTS + _TEAMS + (R.ISSUES, R.USERS, R.REVENUE, R.WORK_CATEGORIES),
                (A.READ,),
            ),
        ),
    ),
)


@dataclass(frozen=True)
class ProjectRoleSpec:
    name: str
    display_name: str
    description: str
    permissions: dict[str, tuple[str, ...]]


def _bundle(**actions: tuple[A, ...]) -> dict[str, tuple[str, ...]]:
    return {str(R[key.upper()]): tuple(str(a) for a in acts) for key, acts in actions.items()}


# Created per project on first use; keyed by ProjectRoleType.
PROJECT_ROLES: dict[str, ProjectRoleSpec] = {
    "member": ProjectRoleSpec(
        name="project_member",
        display_name="Project Member",
        description="Basic project member with read access and ability to create/update tasks",
        permissions=_bundle(
            construction_projects=(A.READ,),
            issues=(A.READ, A.CREATE, A.UPDATE),
            documents=(A.READ, A.CREATE),
            members=(A.READ,),
        ),
    ),
    "admin": ProjectRoleSpec(
        name="project_admin",
        display_name="Project Admin",
        description="Project administrator with full management except project deletion",
        permissions=_bundle(
            construction_projects=(A.READ, A.UPDATE),
            issues=(A.READ, A.CREATE, A.UPDATE, A.DELETE, A.MANAGE),
            documents=(A.READ, A.CREATE, A.UPDATE, A.DELETE, A.MANAGE),
            members=(A.READ, A.CREATE, A.UPDATE, A.MANAGE),
        ),
    ),
    "owner": ProjectRoleSpec(
        name="project_owner",
        display_name="Project Owner",
        description="Project owner with every permission including project deletion",
        permissions=_bundle(
            construction_projects=(A.READ, A.UPDATE, A.DELETE, A.MANAGE),
            issues=(A.READ, A.CREATE, A.UPDATE, A.DELETE, A.MANAGE),
            documents=(A.READ, A.CREATE, A.UPDATE, A.DELETE, A.MANAGE),
            members=(A.READ, A.CREATE, A.UPDATE, A.DELETE, A.MANAGE),
        ),
    ),
}
