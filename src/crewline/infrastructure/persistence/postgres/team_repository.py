"""PostgreSQL team and team membership repositories."""

from uuid import UUID

from psycopg import AsyncConnection

from crewline.domain.entities import Team, TeamMember

_TEAM_COLUMNS = (
    "id, organization_id, name, created_at, updated_at, is_active, description, "
    "parent_team_id, leader_id"
)
_MEMBER_COLUMNS = "id, team_id, user_id, joined_at, role"


def _to_team(r: tuple) -> Team:
    return Team(
        id=r[0],
        organization_id=r[1],
        name=r[2],
        created_at=r[3],
        updated_at=r[4],
        is_active=r[5],
        description=r[6],
        parent_team_id=r[7],
        leader_id=r[8],
    )


def _to_member(r: tuple) -> TeamMember:
    return TeamMember(id=r[0], team_id=r[1], user_id=r[2], joined_at=r[3], role=r[4])


class PostgresTeamRepository:
    """Team repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, team_id: UUID) -> Team | None:
        cur = await self._conn.execute(
            f"SELECT {_TEAM_COLUMNS} FROM team WHERE id = %s", (team_id,)
        )
        r = await cur.fetchone()
        return _to_team(r) if r else None

    async def list_by_organization(
        self, organization_id: UUID, include_inactive: bool = False
    ) -> list[Team]:
        q = f"SELECT {_TEAM_COLUMNS} FROM team WHERE organization_id = %s"
        if not include_inactive:
            q += " AND is_active"
        cur = await self._conn.execute(q + " ORDER BY created_at, name", (organization_id,))
        return [_to_team(r) for r in await cur.fetchall()]

    async def list_children(self, team_id: UUID) -> list[Team]:
        """Direct sub-teams, active or not."""
        cur = await self._conn.execute(
            f"SELECT {_TEAM_COLUMNS} FROM team WHERE parent_team_id = %s", (team_id,)
        )
        return [_to_team(r) for r in await cur.fetchall()]

    async def create(self, team: Team) -> Team:
        await self._conn.execute(
            f"INSERT INTO team ({_TEAM_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                team.id,
                team.organization_id,
                team.name,
                team.created_at,
                team.updated_at,
                team.is_active,
                team.description,
                team.parent_team_id,
                team.leader_id,
            ),
        )
        return team

    async def update(self, team: Team) -> None:
        await self._conn.execute(
            "UPDATE team SET name = %s, description = %s, is_active = %s, "
            "parent_team_id = %s, leader_id = %s, updated_at = %s WHERE id = %s",
            (
                team.name,
                team.description,
                team.is_active,
                team.parent_team_id,
                team.leader_id,
                team.updated_at,
                team.id,
            ),
        )


class PostgresTeamMemberRepository:
    """Team membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, team_id: UUID, user_id: UUID) -> TeamMember | None:
        cur = await self._conn.execute(
            f"SELECT {_MEMBER_COLUMNS} FROM team_member WHERE team_id = %s AND user_id = %s",
            (team_id, user_id),
        )
        r = await cur.fetchone()
        return _to_member(r) if r else None

    async def list_by_team(self, team_id: UUID) -> list[TeamMember]:
        cur = await self._conn.execute(
            f"SELECT {_MEMBER_COLUMNS} FROM team_member WHERE team_id = %s ORDER BY joined_at",
            (team_id,),
        )
        return [_to_member(r) for r in await cur.fetchall()]

    async def list_by_user(self, user_id: UUID) -> list[TeamMember]:
        cur = await self._conn.execute(
            f"SELECT {_MEMBER_COLUMNS} FROM team_member WHERE user_id = %s", (user_id,)
        )
        return [_to_member(r) for r in await cur.fetchall()]

    async def create(self, member: TeamMember) -> TeamMember:
        await self._conn.execute(
            f"INSERT INTO team_member ({_MEMBER_COLUMNS}) VALUES (%s, %s, %s, %s, %s)",
            (member.id, member.team_id, member.user_id, member.joined_at, member.role),
        )
        return member

    async def update(self, member: TeamMember) -> None:
        await self._conn.execute(
            "UPDATE team_member SET role = %s WHERE id = %s", (member.role, member.id)
        )

    async def delete(self, member_id: UUID) -> None:
        await self._conn.execute("DELETE FROM team_member WHERE id = %s", (member_id,))
