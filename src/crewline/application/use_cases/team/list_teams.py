"""List teams use case."""

from uuid import UUID

from crewline.application.dto.team_dto import (
    TeamMemberOutput,
    TeamNode,
    TeamSummary,
    UserSummary,
)
from crewline.application.use_cases.context import organization_context
from crewline.domain.entities import Team, TeamMember, User


class ListTeamsUseCase:
    """Organization teams as a tree of root teams with nested sub-teams."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        organization_id: UUID,
        include_inactive: bool = False,
    ) -> list[TeamNode]:
        async with self._uow_factory() as uow:
            await organization_context(uow, actor_id, organization_id)

            all_teams = await uow.teams.list_by_organization(
                organization_id, include_inactive=True
            )
            teams_by_id = {t.id: t for t in all_teams}
            teams = [t for t in all_teams if include_inactive or t.is_active]

            memberships = {t.id: await uow.team_members.list_by_team(t.id) for t in teams}
            user_ids = {m.user_id for rows in memberships.values() for m in rows}
            user_ids.update(t.leader_id for t in teams if t.leader_id)
            users = {u.id: u for u in await uow.users.list_by_ids(sorted(user_ids, key=str))}

        nodes = {t.id: self._node(t, memberships[t.id], users, teams_by_id) for t in teams}
        for team in teams:
            if team.parent_team_id and team.parent_team_id in nodes:
                nodes[team.parent_team_id].children.append(nodes[team.id])
        return [nodes[t.id] for t in teams if t.parent_team_id is None]

    @staticmethod
    def _node(
        team: Team,
        memberships: list[TeamMember],
        users: dict[UUID, User],
        teams_by_id: dict[UUID, Team],
    ) -> TeamNode:
        members = [
            TeamMemberOutput(
                user_id=m.user_id,
                name=users[m.user_id].name,
                email=users[m.user_id].email,
                avatar_url=users[m.user_id].avatar_url,
                role=m.role,
                joined_at=m.joined_at,
            )
            for m in memberships
            if m.user_id in users
        ]
        leader = users.get(team.leader_id) if team.leader_id else None
        parent = teams_by_id.get(team.parent_team_id) if team.parent_team_id else None
        return TeamNode(
            id=team.id,
            organization_id=team.organization_id,
            name=team.name,
            is_active=team.is_active,
            created_at=team.created_at,
            updated_at=team.updated_at,
            description=team.description,
            parent_team_id=team.parent_team_id,
            leader_id=team.leader_id,
            leader=UserSummary(leader.id, leader.name, leader.email, leader.avatar_url)
            if leader
            else None,
            parent=TeamSummary(parent.id, parent.name) if parent else None,
            members=members,
            member_count=len(members),
        )
