"""Resource-scoped access repository ports."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import (
    DocumentAccess,
    ProjectAccess,
    ResourcePermission,
    TeamProjectAccess,
)


class ProjectAccessRepository(Protocol):
    """Port for per-user project grants."""

    async def get(self, project_id: UUID, user_id: UUID) -> ProjectAccess | None: ...

    async def list_by_project(self, project_id: UUID) -> list[ProjectAccess]: ...

    async def list_by_user(self, user_id: UUID) -> list[ProjectAccess]: ...

    async def create(self, access: ProjectAccess) -> ProjectAccess: ...

    async def update(self, access: ProjectAccess) -> None: ...

    async def delete(self, access_id: UUID) -> None: ...


class TeamProjectAccessRepository(Protocol):
    """Port for per-team project grants."""

    async def get(self, team_id: UUID, project_id: UUID) -> TeamProjectAccess | None: ...

    async def list_by_project(self, project_id: UUID) -> list[TeamProjectAccess]: ...

    async def create(self, access: TeamProjectAccess) -> TeamProjectAccess: ...

    async def update(self, access: TeamProjectAccess) -> None: ...

    async def delete(self, access_id: UUID) -> None: ...


class DocumentAccessRepository(Protocol):
    """Port for document grants."""

    async def get_for_user(self, document_id: UUID, user_id: UUID) -> DocumentAccess | None: ...

    async def get_for_team(self, document_id: UUID, team_id: UUID) -> DocumentAccess | None: ...

    async def create(self, access: DocumentAccess) -> DocumentAccess: ...

    async def update(self, access: DocumentAccess) -> None: ...


class ResourcePermissionRepository(Protocol):
    """Port for grants on arbitrary resource instances."""

    async def get_for_user(
        self, resource_type: str, resource_id: UUID, user_id: UUID
    ) -> ResourcePermission | None: ...

    async def get_for_team(
        self, resource_type: str, resource_id: UUID, team_id: UUID
    ) -> ResourcePermission | None: ...

    async def create(self, permission: ResourcePermission) -> ResourcePermission: ...
