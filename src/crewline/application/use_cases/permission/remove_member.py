"""Remove organization member use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import current_organization_context
from crewline.domain.exceptions import NotFound, PermissionDenied, ValidationError
from crewline.domain.policies import can_manage_members, is_organization_owner
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """Deactivate a member of the caller's organization and strip their access."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        actor_id: str,
        user_id: UUID,
        remove_from_projects: bool = False,
        remove_from_teams: bool = False,
    ) -> None:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            organization = ctx.organization
            if not can_manage_members(organization, ctx.user.id, ctx.membership, ctx.role):
                raise PermissionDenied("Insufficient permissions to remove members")
            if is_organization_owner(organization, user_id):
                raise ValidationError("Cannot remove the organization owner")
            if user_id == ctx.user.id:
                raise ValidationError("Cannot remove yourself from the organization")

            membership = await uow.members.get(organization.id, user_id)
            if not membership or not membership.is_active:
                raise NotFound("Member", str(user_id), message="Member not found")

            member_role = await uow.roles.get_by_id(membership.role_id)
            if member_role and member_role.is_director:
                if not is_organization_owner(organization, ctx.user.id):
                    raise PermissionDenied("Only the organization owner can remove directors")

            membership.is_active = False
            await uow.members.update(membership)

            projects_removed = 0
            if remove_from_projects:
                for access in await uow.project_access.list_by_user(user_id):
                    project = await uow.projects.get_by_id(access.project_id)
                    if project and project.organization_id == organization.id:
                        await uow.project_access.delete(access.id)
                        projects_removed += 1

            teams_removed = 0
            if remove_from_teams:
                for row in await uow.team_members.list_by_user(user_id):
                    team = await uow.teams.get_by_id(row.team_id)
                    if not team or team.organization_id != organization.id:
                        continue
                    await uow.team_members.delete(row.id)
                    teams_removed += 1
                    if team.leader_id == user_id:
                        team.leader_id = None
                        team.updated_at = datetime.now(UTC)
                        await uow.teams.update(team)

            for override in await uow.user_permissions.list_by_user(user_id):
                await uow.user_permissions.delete(override.id)

            target = await uow.users.get_by_id(user_id)
            if target and target.current_organization_id == organization.id:
                target.current_organization_id = None
                await uow.users.update(target)

            await record_audit(
                uow,
                ctx.user.id,
                AuditAction.MEMBER_REMOVED,
                target_user_id=user_id,
                removed_from_projects=remove_from_projects,
                removed_from_teams=remove_from_teams,
                project_grants_removed=projects_removed,
                team_memberships_removed=teams_removed,
            )
            logger.info("User %s removed from organization %s", user_id, organization.id)
