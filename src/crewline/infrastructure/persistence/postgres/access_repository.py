"""PostgreSQL repositories for resource-scoped access grants."""

from uuid import UUID

from psycopg import AsyncConnection

from crewline.domain.entities import (
    DocumentAccess,
    ProjectAccess,
    ResourcePermission,
    TeamProjectAccess,
)

_PROJECT_COLUMNS = "id, project_id, user_id, access_level, granted_by, granted_at, expires_at"
_TEAM_PROJECT_COLUMNS = (
    "id, team_id, project_id, access_level, granted_by, granted_at, inherit_to_members, "
    "expires_at"
)
_DOCUMENT_COLUMNS = (
    "id, document_id, access_level, granted_by, granted_at, user_id, team_id, expires_at"
)
_RESOURCE_COLUMNS = (
    "id, resource_type, resource_id, access_level, granted_by, granted_at, user_id, team_id, "
    "expires_at"
)


def _to_project_access(r: tuple) -> ProjectAccess:
    return ProjectAccess(
        id=r[0],
        project_id=r[1],
        user_id=r[2],
        access_level=r[3],
        granted_by=r[4],
        granted_at=r[5],
        expires_at=r[6],
    )


def _to_team_project_access(r: tuple) -> TeamProjectAccess:
    return TeamProjectAccess(
        id=r[0],
        team_id=r[1],
        project_id=r[2],
        access_level=r[3],
        granted_by=r[4],
        granted_at=r[5],
        inherit_to_members=r[6],
        expires_at=r[7],
    )


def _to_document_access(r: tuple) -> DocumentAccess:
    return DocumentAccess(
        id=r[0],
        document_id=r[1],
        access_level=r[2],
        granted_by=r[3],
        granted_at=r[4],
        user_id=r[5],
        team_id=r[6],
        expires_at=r[7],
    )


def _to_resource_permission(r: tuple) -> ResourcePermission:
    return ResourcePermission(
        id=r[0],
        resource_type=r[1],
        resource_id=r[2],
        access_level=r[3],
        granted_by=r[4],
        granted_at=r[5],
        user_id=r[6],
        team_id=r[7],
        expires_at=r[8],
    )


class PostgresProjectAccessRepository:
    """Direct user grants on projects."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, project_id: UUID, user_id: UUID) -> ProjectAccess | None:
        cur = await self._conn.execute(
            f"SELECT {_PROJECT_COLUMNS} FROM project_access "
            "WHERE project_id = %s AND user_id = %s",
            (project_id, user_id),
        )
        r = await cur.fetchone()
        return _to_project_access(r) if r else None

    async def list_by_project(self, project_id: UUID) -> list[ProjectAccess]:
        cur = await self._conn.execute(
            f"SELECT {_PROJECT_COLUMNS} FROM project_access WHERE project_id = %s "
            "ORDER BY granted_at",
            (project_id,),
        )
        return [_to_project_access(r) for r in await cur.fetchall()]

    async def list_by_user(self, user_id: UUID) -> list[ProjectAccess]:
        cur = await self._conn.execute(
            f"SELECT {_PROJECT_COLUMNS} FROM project_access WHERE user_id = %s", (user_id,)
        )
        return [_to_project_access(r) for r in await cur.fetchall()]

    async def create(self, access: ProjectAccess) -> ProjectAccess:
        await self._conn.execute(
            f"INSERT INTO project_access ({_PROJECT_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                access.id,
                access.project_id,
                access.user_id,
                access.access_level,
                access.granted_by,
                access.granted_at,
                access.expires_at,
            ),
        )
        return access

    async def update(self, access: ProjectAccess) -> None:
        await self._conn.execute(
            "UPDATE project_access SET access_level = %s, granted_by = %s, granted_at = %s, "
            "expires_at = %s WHERE id = %s",
            (
                access.access_level,
                access.granted_by,
                access.granted_at,
                access.expires_at,
                access.id,
            ),
        )

    async def delete(self, access_id: UUID) -> None:
        await self._conn.execute("DELETE FROM project_access WHERE id = %s", (access_id,))


class PostgresTeamProjectAccessRepository:
    """Team grants on projects."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, team_id: UUID, project_id: UUID) -> TeamProjectAccess | None:
        cur = await self._conn.execute(
            f"SELECT {_TEAM_PROJECT_COLUMNS} FROM team_project_access "
            "WHERE team_id = %s AND project_id = %s",
            (team_id, project_id),
        )
        r = await cur.fetchone()
        return _to_team_project_access(r) if r else None

    async def list_by_project(self, project_id: UUID) -> list[TeamProjectAccess]:
        cur = await self._conn.execute(
            f"SELECT {_TEAM_PROJECT_COLUMNS} FROM team_project_access WHERE project_id = %s "
            "ORDER BY granted_at",
            (project_id,),
        )
        return [_to_team_project_access(r) for r in await cur.fetchall()]

    async def create(self, access: TeamProjectAccess) -> TeamProjectAccess:
        await self._conn.execute(
            f"INSERT INTO team_project_access ({_TEAM_PROJECT_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                access.id,
                access.team_id,
                access.project_id,
                access.access_level,
                access.granted_by,
                access.granted_at,
                access.inherit_to_members,
                access.expires_at,
            ),
        )
        return access

    async def update(self, access: TeamProjectAccess) -> None:
        await self._conn.execute(
            "UPDATE team_project_access SET access_level = %s, granted_by = %s, "
            "granted_at = %s, inherit_to_members = %s, expires_at = %s WHERE id = %s",
            (
                access.access_level,
                access.granted_by,
                access.granted_at,
                access.inherit_to_members,
                access.expires_at,
                access.id,
            ),
        )

    async def delete(self, access_id: UUID) -> None:
        await self._conn.execute("DELETE FROM team_project_access WHERE id = %s", (access_id,))


class PostgresDocumentAccessRepository:
    """User and team grants on documents."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_for_user(self, document_id: UUID, user_id: UUID) -> DocumentAccess | None:
        cur = await self._conn.execute(
            f"SELECT {_DOCUMENT_COLUMNS} FROM document_access "
            "WHERE document_id = %s AND user_id = %s",
            (document_id, user_id),
        )
        r = await cur.fetchone()
        return _to_document_access(r) if r else None

    async def get_for_team(self, document_id: UUID, team_id: UUID) -> DocumentAccess | None:
        cur = await self._conn.execute(
            f"SELECT {_DOCUMENT_COLUMNS} FROM document_access "
            "WHERE document_id = %s AND team_id = %s",
            (document_id, team_id),
        )
        r = await cur.fetchone()
        return _to_document_access(r) if r else None

    async def create(self, access: DocumentAccess) -> DocumentAccess:
        await self._conn.execute(
            f"INSERT INTO document_access ({_DOCUMENT_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s)",
            (
                access.id,
                access.document_id,
                access.access_level,
                access.granted_by,
                access.granted_at,
                access.user_id,
                access.team_id,
                access.expires_at,
            ),
        )
        return access

    async def update(self, access: DocumentAccess) -> None:
        await self._conn.execute(
            "UPDATE document_access SET access_level = %s, granted_by = %s, granted_at = %s, "
            "expires_at = %s WHERE id = %s",
            (
                access.access_level,
                access.granted_by,
                access.granted_at,
                access.expires_at,
                access.id,
            ),
        )


class PostgresResourcePermissionRepository:
    """Grants on issues and teams."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_for_user(
        self, resource_type: str, resource_id: UUID, user_id: UUID
    ) -> ResourcePermission | None:
        cur = await self._conn.execute(
            f"SELECT {_RESOURCE_COLUMNS} FROM resource_permission "
            "WHERE resource_type = %s AND resource_id = %s AND user_id = %s",
            (str(resource_type), resource_id, user_id),
        )
        r = await cur.fetchone()
        return _to_resource_permission(r) if r else None

    async def get_for_team(
        self, resource_type: str, resource_id: UUID, team_id: UUID
    ) -> ResourcePermission | None:
        cur = await self._conn.execute(
            f"SELECT {_RESOURCE_COLUMNS} FROM resource_permission "
            "WHERE resource_type = %s AND resource_id = %s AND team_id = %s",
            (str(resource_type), resource_id, team_id),
        )
        r = await cur.fetchone()
        return _to_resource_permission(r) if r else None

    async def create(self, permission: ResourcePermission) -> ResourcePermission:
        await self._conn.execute(
            f"INSERT INTO resource_permission ({_RESOURCE_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                permission.id,
                permission.resource_type,
                permission.resource_id,
                permission.access_level,
                permission.granted_by,
                permission.granted_at,
                permission.user_id,
                permission.team_id,
                permission.expires_at,
            ),
        )
        return permission
