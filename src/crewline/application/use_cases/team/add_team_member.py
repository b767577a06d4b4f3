"""Add team member use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import require_membership, resolve_actor
from crewline.domain.entities import TeamMember
from crewline.domain.exceptions import (
    InvariantViolation,
    NotFound,
    PermissionDenied,
    ValidationError,
)
from crewline.domain.policies import TeamAction, decide_team_action
from crewline.domain.value_objects import AuditAction, TeamRole

logger = logging.getLogger(__name__)


class AddTeamMemberUseCase:
    """Add an organization member to an active team."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        team_id: UUID,
        user_id: UUID,
        role: str | None = None,
    ) -> TeamMember:
        async with self._uow_factory() as uow:
            user = await resolve_actor(uow, actor_id)
            team = await uow.teams.get_by_id(team_id)
            if not team or not team.is_active:
                raise NotFound("Team", str(team_id))
            ctx = await require_membership(uow, user, team.organization_id)

            decision = decide_team_action(ctx.role, user.id, TeamAction.ADD_MEMBER, team=team)
            if not decision:
                raise PermissionDenied(decision.reason)

            target = await uow.members.get(team.organization_id, user_id)
            if not target or not target.is_active:
                raise ValidationError("User must be a member of the organization")

            if await uow.team_members.get(team_id, user_id):
                raise InvariantViolation("User is already a team member")

            member = TeamMember(
                id=uuid4(),
                team_id=team_id,
                user_id=user_id,
                joined_at=datetime.now(UTC),
                role=role or str(TeamRole.MEMBER),
            )
            await uow.team_members.create(member)
            await record_audit(
                uow,
                user.id,
                AuditAction.TEAM_MEMBER_ADDED,
                target_user_id=user_id,
                team_id=team_id,
                role=member.role,
            )
            logger.info("User %s added to team %s", user_id, team_id)

        return member
