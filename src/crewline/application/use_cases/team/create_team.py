"""Create team use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.dto.team_dto import TeamCreated
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import organization_context
from crewline.domain.entities import Team, TeamMember
from crewline.domain.exceptions import PermissionDenied, ValidationError
from crewline.domain.policies import TeamAction, decide_team_action
from crewline.domain.value_objects import AuditAction, TeamRole

logger = logging.getLogger(__name__)


class CreateTeamUseCase:
    """Create a team; the creator joins it and the leader joins as leader."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        organization_id: UUID,
        name: str,
        description: str | None = None,
        parent_team_id: UUID | None = None,
        leader_id: UUID | None = None,
    ) -> TeamCreated:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Team name is required")

        async with self._uow_factory() as uow:
            ctx = await organization_context(uow, actor_id, organization_id)
            decision = decide_team_action(ctx.role, ctx.user.id, TeamAction.CREATE)
            if not decision:
                raise PermissionDenied(decision.reason)

            if parent_team_id:
                parent = await uow.teams.get_by_id(parent_team_id)
                if not parent or parent.organization_id != organization_id:
                    raise ValidationError("Invalid parent team")

            if leader_id:
                leader_membership = await uow.members.get(organization_id, leader_id)
                if not leader_membership or not leader_membership.is_active:
                    raise ValidationError("Team leader must be a member of the organization")

            now = datetime.now(UTC)
            team = Team(
                id=uuid4(),
                organization_id=organization_id,
                name=name,
                created_at=now,
                updated_at=now,
                is_active=True,
                description=description,
                parent_team_id=parent_team_id,
                leader_id=leader_id,
            )
            await uow.teams.create(team)

            creator_role = TeamRole.LEADER if leader_id == ctx.user.id else TeamRole.MEMBER
            await uow.team_members.create(
                TeamMember(
                    id=uuid4(),
                    team_id=team.id,
                    user_id=ctx.user.id,
                    joined_at=now,
                    role=str(creator_role),
                )
            )
            if leader_id and leader_id != ctx.user.id:
                await uow.team_members.create(
                    TeamMember(
                        id=uuid4(),
                        team_id=team.id,
                        user_id=leader_id,
                        joined_at=now,
                        role=str(TeamRole.LEADER),
                    )
                )
                await record_audit(
                    uow,
                    ctx.user.id,
                    AuditAction.TEAM_MEMBER_ADDED,
                    target_user_id=leader_id,
                    team_id=team.id,
                    role=str(TeamRole.LEADER),
                )

            logger.info("Team %s created in organization %s", team.id, organization_id)

        return TeamCreated(team_id=team.id)
