"""Permission catalogue and user override repository ports."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import Permission, UserPermission


class PermissionRepository(Protocol):
    """Port for the (resource, action) catalogue."""

    async def get_by_id(self, permission_id: UUID) -> Permission | None: ...

    async def get_by_resource_action(self, resource: str, action: str) -> Permission | None: ...

    async def list_by_ids(self, permission_ids: list[UUID]) -> list[Permission]: ...

    async def list_all(self) -> list[Permission]: ...

    async def create(self, permission: Permission) -> Permission: ...


class UserPermissionRepository(Protocol):
    """Port for per-user overrides."""

    async def get(self, user_id: UUID, permission_id: UUID) -> UserPermission | None: ...

    async def list_by_user(self, user_id: UUID) -> list[UserPermission]: ...

    async def create(self, override: UserPermission) -> UserPermission: ...

    async def update(self, override: UserPermission) -> None: ...

    async def delete(self, override_id: UUID) -> None: ...