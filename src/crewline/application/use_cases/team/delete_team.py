"""Delete team use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import require_membership, resolve_actor
from crewline.domain.exceptions import InvariantViolation, NotFound, PermissionDenied
from crewline.domain.policies import TeamAction, decide_team_action
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class DeleteTeamUseCase:
    """Delete a team without sub-teams.

    Membership rows are hard-deleted while the team row is only deactivated,
    so the team record survives for history.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str, team_id: UUID) -> None:
        async with self._uow_factory() as uow:
            user = await resolve_actor(uow, actor_id)
            team = await uow.teams.get_by_id(team_id)
            if not team:
                raise NotFound("Team", str(team_id))
            ctx = await require_membership(uow, user, team.organization_id)

            decision = decide_team_action(ctx.role, user.id, TeamAction.DELETE, team=team)
            if not decision:
                raise PermissionDenied(decision.reason)

            # Inactive sub-teams block deletion too.
            if await uow.teams.list_children(team_id):
                raise InvariantViolation(
                    "Cannot delete team with sub-teams. Delete sub-teams first."
                )

            members = await uow.team_members.list_by_team(team_id)
            for member in members:
                await uow.team_members.delete(member.id)

            team.is_active = False
            team.updated_at = datetime.now(UTC)
            await uow.teams.update(team)

            await record_audit(
                uow,
                user.id,
                AuditAction.TEAM_DELETED,
                team_id=team_id,
                removed_members=[m.user_id for m in members],
            )
            logger.info("Team %s deleted by %s (%d members removed)", team_id, user.id, len(members))
