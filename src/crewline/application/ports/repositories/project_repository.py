"""Project, task and document repository ports."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import Document, Project, Task


class ProjectRepository(Protocol):
    """Port for project persistence."""

    async def get_by_id(self, project_id: UUID) -> Project | None: ...

    async def list_by_organization(self, organization_id: UUID) -> list[Project]: ...

    async def create(self, project: Project) -> Project: ...


class TaskRepository(Protocol):
    """Port for task persistence."""

    async def list_by_projects(self, project_ids: list[UUID]) -> list[Task]: ...

    async def create(self, task: Task) -> Task: ...


class DocumentRepository(Protocol):
    """Port for document persistence."""

    async def get_by_id(self, document_id: UUID) -> Document | None: ...

    async def create(self, document: Document) -> Document: ...
