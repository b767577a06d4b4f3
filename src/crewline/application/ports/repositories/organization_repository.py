"""Organization and membership repository ports."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import Organization, OrganizationMember


class OrganizationRepository(Protocol):
    """Port for organization persistence."""

    async def get_by_id(self, organization_id: UUID) -> Organization | None: ...

    async def create(self, organization: Organization) -> Organization: ...


class MemberRepository(Protocol):
    """Port for organization membership persistence."""

    async def get(self, organization_id: UUID, user_id: UUID) -> OrganizationMember | None: ...

    async def list_by_organization(self, organization_id: UUID) -> list[OrganizationMember]: ...

    async def count_with_role(self, organization_id: UUID, role_id: UUID) -> int: ...

    async def create(self, member: OrganizationMember) -> OrganizationMember: ...

    async def update(self, member: OrganizationMember) -> None: ...
