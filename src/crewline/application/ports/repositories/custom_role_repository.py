"""Custom role bundle repository ports."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import CustomRole, UserCustomRole


class CustomRoleRepository(Protocol):
    """Port for custom role bundles."""

    async def get_by_id(self, role_id: UUID) -> CustomRole | None: ...

    async def get_by_name(
        self, name: str, scope: str, scope_id: UUID | None = None
    ) -> CustomRole | None: ...

    async def list_by_scope(self, scope: str, scope_id: UUID | None = None) -> list[CustomRole]: ...

    async def list_by_ids(self, role_ids: list[UUID]) -> list[CustomRole]: ...

    async def create(self, role: CustomRole) -> CustomRole: ...


class UserCustomRoleRepository(Protocol):
    """Port for custom role assignments."""

    async def get(self, user_id: UUID, role_id: UUID) -> UserCustomRole | None: ...

    async def list_by_user(self, user_id: UUID) -> list[UserCustomRole]: ...

    async def create(self, assignment: UserCustomRole) -> UserCustomRole: ...

    async def update(self, assignment: UserCustomRole) -> None: ...
