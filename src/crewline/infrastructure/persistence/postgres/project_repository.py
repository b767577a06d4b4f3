"""PostgreSQL project, task and document repositories."""

from uuid import UUID

from psycopg import AsyncConnection

from crewline.domain.entities import Document, Project, Task

_PROJECT_COLUMNS = (
    "id, organization_id, name, start_date, created_at, target_date, status_id, lead_id, "
    "team_member_ids"
)
_TASK_COLUMNS = "id, project_id, title, start_date, due_date, status_id, assignee_id"
_DOCUMENT_COLUMNS = "id, organization_id, title, author_id, created_at, project_id"


def _to_project(r: tuple) -> Project:
    return Project(
        id=r[0],
        organization_id=r[1],
        name=r[2],
        start_date=r[3],
        created_at=r[4],
        target_date=r[5],
        status_id=r[6],
        lead_id=r[7],
        team_member_ids=list(r[8] or []),
    )


def _to_task(r: tuple) -> Task:
    return Task(
        id=r[0],
        project_id=r[1],
        title=r[2],
        start_date=r[3],
        due_date=r[4],
        status_id=r[5],
        assignee_id=r[6],
    )


def _to_document(r: tuple) -> Document:
    return Document(
        id=r[0],
        organization_id=r[1],
        title=r[2],
        author_id=r[3],
        created_at=r[4],
        project_id=r[5],
    )


class PostgresProjectRepository:
    """Construction project repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, project_id: UUID) -> Project | None:
        cur = await self._conn.execute(
            f"SELECT {_PROJECT_COLUMNS} FROM project WHERE id = %s", (project_id,)
        )
        r = await cur.fetchone()
        return _to_project(r) if r else None

    async def list_by_organization(self, organization_id: UUID) -> list[Project]:
        cur = await self._conn.execute(
            f"SELECT {_PROJECT_COLUMNS} FROM project WHERE organization_id = %s "
            "ORDER BY start_date, name",
            (organization_id,),
        )
        return [_to_project(r) for r in await cur.fetchall()]

    async def create(self, project: Project) -> Project:
        await self._conn.execute(
            f"INSERT INTO project ({_PROJECT_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                project.id,
                project.organization_id,
                project.name,
                project.start_date,
                project.created_at,
                project.target_date,
                project.status_id,
                project.lead_id,
                list(project.team_member_ids),
            ),
        )
        return project


class PostgresTaskRepository:
    """Task (issue) repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def list_by_projects(self, project_ids: list[UUID]) -> list[Task]:
        if not project_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_TASK_COLUMNS} FROM task WHERE project_id = ANY(%s) ORDER BY start_date",
            (list(project_ids),),
        )
        return [_to_task(r) for r in await cur.fetchall()]

    async def create(self, task: Task) -> Task:
        await self._conn.execute(
            f"INSERT INTO task ({_TASK_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                task.id,
                task.project_id,
                task.title,
                task.start_date,
                task.due_date,
                task.status_id,
                task.assignee_id,
            ),
        )
        return task


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID) -> Document | None:
        cur = await self._conn.execute(
            f"SELECT {_DOCUMENT_COLUMNS} FROM document WHERE id = %s", (document_id,)
        )
        r = await cur.fetchone()
        return _to_document(r) if r else None

    async def create(self, document: Document) -> Document:
        await self._conn.execute(
            f"INSERT INTO document ({_DOCUMENT_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.organization_id,
                document.title,
                document.author_id,
                document.created_at,
                document.project_id,
            ),
        )
        return document
