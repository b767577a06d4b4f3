"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from crewline.application.ports.repositories import (
    AuditLogRepository,
    CustomRoleRepository,
    DocumentAccessRepository,
    DocumentRepository,
    MemberRepository,
    OrganizationRepository,
    PermissionRepository,
    ProjectAccessRepository,
    ProjectRepository,
    ResourcePermissionRepository,
    RoleRepository,
    TaskRepository,
    TeamMemberRepository,
    TeamProjectAccessRepository,
    TeamRepository,
    UserCustomRoleRepository,
    UserPermissionRepository,
    UserRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def organizations(self) -> OrganizationRepository: ...

    @property
    def members(self) -> MemberRepository: ...

    @property
    def users(self) -> UserRepository: ...

    @property
    def roles(self) -> RoleRepository: ...

    @property
    def permissions(self) -> PermissionRepository: ...

    @property
    def user_permissions(self) -> UserPermissionRepository: ...

    @property
    def teams(self) -> TeamRepository: ...

    @property
    def team_members(self) -> TeamMemberRepository: ...

    @property
    def projects(self) -> ProjectRepository: ...

    @property
    def tasks(self) -> TaskRepository: ...

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def project_access(self) -> ProjectAccessRepository: ...

    @property
    def team_project_access(self) -> TeamProjectAccessRepository: ...

    @property
    def document_access(self) -> DocumentAccessRepository: ...

    @property
    def resource_permissions(self) -> ResourcePermissionRepository: ...

    @property
    def custom_roles(self) -> CustomRoleRepository: ...

    @property
    def user_custom_roles(self) -> UserCustomRoleRepository: ...

    @property
    def audit_log(self) -> AuditLogRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
