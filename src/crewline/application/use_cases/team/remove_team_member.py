"""Remove team member use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import require_membership, resolve_actor
from crewline.domain.exceptions import InvariantViolation, NotFound, PermissionDenied
from crewline.domain.policies import TeamAction, decide_team_action
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class RemoveTeamMemberUseCase:
    """Remove a member from a team. A leader may only remove themself."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, team_id: UUID, user_id: UUID) -> None:
        async with self._uow_factory() as uow:
            user = await resolve_actor(uow, actor_id)
            team = await uow.teams.get_by_id(team_id)
            if not team:
                raise NotFound("Team", str(team_id))
            ctx = await require_membership(uow, user, team.organization_id)

            decision = decide_team_action(
                ctx.role,
                user.id,
                TeamAction.REMOVE_MEMBER,
                team=team,
                target_user_id=user_id,
            )
            if not decision:
                raise PermissionDenied(decision.reason)

            is_self = user_id == user.id
            if user_id == team.leader_id and not is_self:
                raise InvariantViolation("Cannot remove team leader. Assign a new leader first.")

            row = await uow.team_members.get(team_id, user_id)
            if not row:
                raise NotFound("TeamMember", str(user_id), message="User is not a team member")
            await uow.team_members.delete(row.id)

            if team.leader_id == user_id:
                team.leader_id = None
                team.updated_at = datetime.now(UTC)
                await uow.teams.update(team)

            await record_audit(
                uow,
                user.id,
                AuditAction.TEAM_MEMBER_REMOVED,
                target_user_id=user_id,
                team_id=team_id,
            )
            logger.info("User %s removed from team %s", user_id, team_id)
