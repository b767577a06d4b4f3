"""Team and team membership repository ports."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import Team, TeamMember


class TeamRepository(Protocol):
    """Port for team persistence."""

    async def get_by_id(self, team_id: UUID) -> Team | None: ...

    async def list_by_organization(
        self, organization_id: UUID, include_inactive: bool = False
    ) -> list[Team]: ...

    async def list_children(self, team_id: UUID) -> list[Team]: ...

    async def create(self, team: Team) -> Team: ...

    async def update(self, team: Team) -> None: ...


class TeamMemberRepository(Protocol):
    """Port for team membership persistence."""

    async def get(self, team_id: UUID, user_id: UUID) -> TeamMember | None: ...

    async def list_by_team(self, team_id: UUID) -> list[TeamMember]: ...

    async def list_by_user(self, user_id: UUID) -> list[TeamMember]: ...

    async def create(self, member: TeamMember) -> TeamMember: ...

    async def update(self, member: TeamMember) -> None: ...

    async def delete(self, member_id: UUID) -> None: ...
