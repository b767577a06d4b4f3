"""Role repository port."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from crewline.domain.entities import Permission, Role


class RoleRepository(Protocol):
    """Port for role persistence and the role -> permission mapping."""

    async def get_by_id(self, role_id: UUID) -> Role | None: ...

    async def get_by_name(self, name: str, organization_id: UUID | None = None) -> Role | None:
        """Role by name within the organization; None looks up system roles."""
        ...

    async def list_for_organization(self, organization_id: UUID) -> list[Role]:
        """System roles plus the roles defined by the organization."""
        ...

    async def list_all(self) -> list[Role]: ...

    async def create(self, role: Role) -> Role: ...

    async def update(self, role: Role) -> None: ...

    async def delete(self, role_id: UUID) -> None: ...

    async def list_permissions(self, role_id: UUID) -> list[Permission]: ...

    async def replace_permissions(
        self, role_id: UUID, permission_ids: list[UUID], created_at: datetime
    ) -> None: ...

    async def delete_permissions(self, role_id: UUID) -> None: ...
