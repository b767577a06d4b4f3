"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg_pool import AsyncConnectionPool

from crewline.infrastructure.persistence.postgres.access_repository import (
    PostgresDocumentAccessRepository,
    PostgresProjectAccessRepository,
    PostgresResourcePermissionRepository,
    PostgresTeamProjectAccessRepository,
)
from crewline.infrastructure.persistence.postgres.audit_log_repository import (
    PostgresAuditLogRepository,
)
from crewline.infrastructure.persistence.postgres.custom_role_repository import (
    PostgresCustomRoleRepository,
    PostgresUserCustomRoleRepository,
)
from crewline.infrastructure.persistence.postgres.organization_repository import (
    PostgresMemberRepository,
    PostgresOrganizationRepository,
)
from crewline.infrastructure.persistence.postgres.permission_repository import (
    PostgresPermissionRepository,
    PostgresUserPermissionRepository,
)
from crewline.infrastructure.persistence.postgres.project_repository import (
    PostgresDocumentRepository,
    PostgresProjectRepository,
    PostgresTaskRepository,
)
from crewline.infrastructure.persistence.postgres.role_repository import (
    PostgresRoleRepository,
)
from crewline.infrastructure.persistence.postgres.team_repository import (
    PostgresTeamMemberRepository,
    PostgresTeamRepository,
)
from crewline.infrastructure.persistence.postgres.user_repository import (
    PostgresUserRepository,
)


class PostgresUnitOfWork:
    """PostgreSQL Unit of Work - one connection, one transaction."""

    def __init__(self, pool: AsyncConnectionPool) -> None:
        self._pool = pool
        self._conn: object | None = None
        self._conn_cm: object | None = None

    async def __aenter__(self) -> "PostgresUnitOfWork":
        self._conn_cm = self._pool.connection()
        self._conn = await self._conn_cm.__aenter__()
        conn = self._conn
        self._organizations = PostgresOrganizationRepository(conn)
        self._members = PostgresMemberRepository(conn)
        self._users = PostgresUserRepository(conn)
        self._roles = PostgresRoleRepository(conn)
        self._permissions = PostgresPermissionRepository(conn)
        self._user_permissions = PostgresUserPermissionRepository(conn)
        self._teams = PostgresTeamRepository(conn)
        self._team_members = PostgresTeamMemberRepository(conn)
        self._projects = PostgresProjectRepository(conn)
        self._tasks = PostgresTaskRepository(conn)
        self._documents = PostgresDocumentRepository(conn)
        self._project_access = PostgresProjectAccessRepository(conn)
        self._team_project_access = PostgresTeamProjectAccessRepository(conn)
        self._document_access = PostgresDocumentAccessRepository(conn)
        self._resource_permissions = PostgresResourcePermissionRepository(conn)
        self._audit_log = PostgresAuditLogRepository(conn)
        self._custom_roles = PostgresCustomRoleRepository(conn)
        self._user_custom_roles = PostgresUserCustomRoleRepository(conn)
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type and self._conn:
            await self._conn.rollback()
        if self._conn_cm:
            await self._conn_cm.__aexit__(exc_type, exc_val, exc_tb)

    @property
    def organizations(self) -> PostgresOrganizationRepository:
        return self._organizations

    @property
    def members(self) -> PostgresMemberRepository:
        return self._members

    @property
    def users(self) -> PostgresUserRepository:
        return self._users

    @property
    def roles(self) -> PostgresRoleRepository:
        return self._roles

    @property
    def permissions(self) -> PostgresPermissionRepository:
        return self._permissions

    @property
    def user_permissions(self) -> PostgresUserPermissionRepository:
        return self._user_permissions

    @property
    def teams(self) -> PostgresTeamRepository:
        return self._teams

    @property
    def team_members(self) -> PostgresTeamMemberRepository:
        return self._team_members

    @property
    def projects(self) -> PostgresProjectRepository:
        return self._projects

    @property
    def tasks(self) -> PostgresTaskRepository:
        return self._tasks

    @property
    def documents(self) -> PostgresDocumentRepository:
        return self._documents

    @property
    def project_access(self) -> PostgresProjectAccessRepository:
        return self._project_access

    @property
    def team_project_access(self) -> PostgresTeamProjectAccessRepository:
        return self._team_project_access

    @property
    def document_access(self) -> PostgresDocumentAccessRepository:
        return self._document_access

    @property
    def resource_permissions(self) -> PostgresResourcePermissionRepository:
        return self._resource_permissions

    @property
    def audit_log(self) -> PostgresAuditLogRepository:
        return self._audit_log

    @property
    def custom_roles(self) -> PostgresCustomRoleRepository:
        return self._custom_roles

    @property
    def user_custom_roles(self) -> PostgresUserCustomRoleRepository:
        return self._user_custom_roles

    async def commit(self) -> None:
        if self._conn:
            await self._conn.commit()

    async def rollback(self) -> None:
        if self._conn:
            await self._conn.rollback()


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager). Commits on success."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        uow = PostgresUnitOfWork(pool)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
