"""Permission checker port - RBAC authorization."""

from typing import Protocol
from uuid import UUID

from crewline.domain.value_objects import (
    AccessDecision,
    AccessLevel,
    PermissionAction,
    PermissionResource,
    ResourceScope,
)


class PermissionChecker(Protocol):
    """Port for deciding whether a user may act on a resource."""

    async def evaluate(
        self,
        user_id: UUID,
        resource: PermissionResource,
        action: PermissionAction,
        scope: ResourceScope | None = None,
        *,
        organization_id: UUID | None = None,
    ) -> AccessDecision: ...

    async def check(
        self,
        user_id: UUID,
        resource: PermissionResource,
        action: PermissionAction,
        scope: ResourceScope | None = None,
        *,
        organization_id: UUID | None = None,
    ) -> bool: ...

    async def project_access_level(self, user_id: UUID, project_id: UUID) -> AccessLevel | None: ...

    async def effective_permissions(self, user_id: UUID) -> list[tuple[str, str]]: ...
