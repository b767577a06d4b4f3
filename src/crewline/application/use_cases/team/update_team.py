"""Update team use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.dto.team_dto import TeamUpdateInput
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import require_membership, resolve_actor
from crewline.domain.entities import TeamMember
from crewline.domain.exceptions import NotFound, PermissionDenied, ValidationError
from crewline.domain.policies import TeamAction, decide_team_action
from crewline.domain.value_objects import AuditAction, TeamRole

logger = logging.getLogger(__name__)


class UpdateTeamUseCase:
    """Patch team fields; changing the leader moves the leader role between rows."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, team_id: UUID, changes: TeamUpdateInput) -> None:
        if changes.name is not None and not changes.name.strip():
            raise ValidationError("Team name cannot be empty")

        async with self._uow_factory() as uow:
            user = await resolve_actor(uow, actor_id)
            team = await uow.teams.get_by_id(team_id)
            if not team:
                raise NotFound("Team", str(team_id))
            ctx = await require_membership(uow, user, team.organization_id)

            decision = decide_team_action(ctx.role, user.id, TeamAction.UPDATE, team=team)
            if not decision:
                raise PermissionDenied(decision.reason)

            now = datetime.now(UTC)
            if changes.leader_id is not None:
                await self._assign_leader(uow, team, changes.leader_id, now)
                if changes.leader_id != team.leader_id:
                    await record_audit(
                        uow,
                        user.id,
                        AuditAction.TEAM_LEADER_CHANGED,
                        target_user_id=changes.leader_id,
                        team_id=team.id,
                        previous_leader_id=team.leader_id,
                    )
                team.leader_id = changes.leader_id

            if changes.name is not None:
                team.name = changes.name.strip()
            if changes.description is not None:
                team.description = changes.description
            if changes.is_active is not None:
                team.is_active = changes.is_active
            team.updated_at = now
            await uow.teams.update(team)
            logger.info("Team %s updated by %s", team.id, user.id)

    async def _assign_leader(self, uow, team, leader_id: UUID, now: datetime) -> None:
        leader_membership = await uow.members.get(team.organization_id, leader_id)
        if not leader_membership or not leader_membership.is_active:
            raise ValidationError("Team leader must be a member of the organization")

        row = await uow.team_members.get(team.id, leader_id)
        if row is None:
            await uow.team_members.create(
                TeamMember(
                    id=uuid4(),
                    team_id=team.id,
                    user_id=leader_id,
                    joined_at=now,
                    role=str(TeamRole.LEADER),
                )
            )
        else:
            row.role = str(TeamRole.LEADER)
            await uow.team_members.update(row)

        if team.leader_id and team.leader_id != leader_id:
            previous = await uow.team_members.get(team.id, team.leader_id)
            if previous and previous.role == TeamRole.LEADER:
                previous.role = str(TeamRole.MEMBER)
                await uow.team_members.update(previous)
