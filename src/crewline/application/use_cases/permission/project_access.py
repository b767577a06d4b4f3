"""Project access use cases: check, grant, revoke, list."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.dto.permission_dto import ProjectAccessOutput
from crewline.application.ports import PermissionChecker, UnitOfWork
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import ActorContext, current_organization_context
from crewline.domain.entities import Project, ProjectAccess, TeamProjectAccess
from crewline.domain.exceptions import NotFound, PermissionDenied, ValidationError
from crewline.domain.value_objects import (
    AccessDecision,
    AccessLevel,
    AuditAction,
    PermissionAction,
    PermissionResource,
)

logger = logging.getLogger(__name__)


async def load_project(uow: UnitOfWork, ctx: ActorContext, project_id: UUID) -> Project:
    project = await uow.projects.get_by_id(project_id)
    if not project or project.organization_id != ctx.organization.id:
        raise NotFound("Project", str(project_id))
    return project


async def effective_project_level(
    checker: PermissionChecker, user_id: UUID, project_id: UUID
) -> AccessLevel | None:
    """Project tier, raised to admin by a global project-management permission."""
    level = await checker.project_access_level(user_id, project_id)
    if level is not None and level.satisfies(AccessLevel.ADMIN):
        return level
    if await checker.check(
        user_id, PermissionResource.CONSTRUCTION_PROJECTS, PermissionAction.MANAGE
    ):
        return AccessLevel.ADMIN
    return level


class CheckProjectAccessUseCase:
    """Decide whether the caller holds at least the required tier on a project."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        project_id: UUID,
        required_level: AccessLevel | None = None,
    ) -> AccessDecision:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            await load_project(uow, ctx, project_id)

        level = await effective_project_level(self._permission_checker, ctx.user.id, project_id)
        if level is None:
            return AccessDecision.deny("No access to project")
        if not level.satisfies(required_level):
            return AccessDecision(False, f"Access level {level} is below {required_level}", level)
        return AccessDecision.allow(f"Access level {level}", level)


class GrantProjectAccessUseCase:
    """Grant a user or a team a tier on a project, replacing any previous grant."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        project_id: UUID,
        access_level: AccessLevel,
        user_id: UUID | None = None,
        team_id: UUID | None = None,
        expires_at: datetime | None = None,
    ) -> ProjectAccess | TeamProjectAccess:
        if (user_id is None) == (team_id is None):
            raise ValidationError("Must provide either userId or teamId, not both")
        access_level = AccessLevel(access_level)
        if team_id is not None and access_level == AccessLevel.OWNER:
            raise ValidationError("Teams cannot be granted owner access")

        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            await load_project(uow, ctx, project_id)

        level = await effective_project_level(self._permission_checker, ctx.user.id, project_id)
        if level is None or not level.satisfies(AccessLevel.ADMIN):
            raise PermissionDenied("Insufficient permissions to grant project access")

        async with self._uow_factory() as uow:
            now = datetime.now(UTC)
            if user_id is not None:
                grant = await self._grant_user(
                    uow, ctx, project_id, user_id, access_level, expires_at, now
                )
            else:
                grant = await self._grant_team(
                    uow, ctx, project_id, team_id, access_level, expires_at, now
                )
            logger.info("Granted %s on project %s by %s", access_level, project_id, ctx.user.id)
            return grant

    async def _grant_user(
        self,
        uow: UnitOfWork,
        ctx: ActorContext,
        project_id: UUID,
        user_id: UUID,
        access_level: AccessLevel,
        expires_at: datetime | None,
        now: datetime,
    ) -> ProjectAccess:
        target = await uow.users.get_by_id(user_id)
        if not target:
            raise NotFound("User", str(user_id))
        existing = await uow.project_access.get(project_id, user_id)
        if existing:
            existing.access_level = str(access_level)
            existing.granted_by = ctx.user.id
            existing.granted_at = now
            existing.expires_at = expires_at
            await uow.project_access.update(existing)
            grant = existing
        else:
            grant = ProjectAccess(
                id=uuid4(),
                project_id=project_id,
                user_id=user_id,
                access_level=str(access_level),
                granted_by=ctx.user.id,
                granted_at=now,
                expires_at=expires_at,
            )
            await uow.project_access.create(grant)
        await record_audit(
            uow,
            ctx.user.id,
            AuditAction.PROJECT_ACCESS_GRANTED,
            target_user_id=user_id,
            project_id=project_id,
            access_level=str(access_level),
            expires_at=expires_at,
        )
        return grant

    async def _grant_team(
        self,
        uow: UnitOfWork,
        ctx: ActorContext,
        project_id: UUID,
        team_id: UUID,
        access_level: AccessLevel,
        expires_at: datetime | None,
        now: datetime,
    ) -> TeamProjectAccess:
        team = await uow.teams.get_by_id(team_id)
        if not team or team.organization_id != ctx.organization.id:
            raise NotFound("Team", str(team_id))
        existing = await uow.team_project_access.get(team_id, project_id)
        if existing:
            existing.access_level = str(access_level)
            existing.granted_by = ctx.user.id
            existing.granted_at = now
            existing.expires_at = expires_at
            await uow.team_project_access.update(existing)
            grant = existing
        else:
            grant = TeamProjectAccess(
                id=uuid4(),
                team_id=team_id,
                project_id=project_id,
                access_level=str(access_level),
                granted_by=ctx.user.id,
                granted_at=now,
                inherit_to_members=True,
                expires_at=expires_at,
            )
            await uow.team_project_access.create(grant)
        await record_audit(
            uow,
            ctx.user.id,
            AuditAction.TEAM_PROJECT_ACCESS_GRANTED,
            project_id=project_id,
            team_id=team_id,
            access_level=str(access_level),
        )
        return grant


class RevokeProjectAccessUseCase:
    """Remove a user's and/or a team's grant on a project."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        project_id: UUID,
        user_id: UUID | None = None,
        team_id: UUID | None = None,
    ) -> int:
        """Returns the number of grants removed."""
        if user_id is None and team_id is None:
            raise ValidationError("Must provide userId or teamId")

        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            await load_project(uow, ctx, project_id)

        allowed = await self._permission_checker.check(
            ctx.user.id, PermissionResource.CONSTRUCTION_PROJECTS, PermissionAction.MANAGE
        )
        if not allowed:
            raise PermissionDenied("Insufficient permissions to revoke project access")

        async with self._uow_factory() as uow:
            removed = 0
            if user_id is not None:
                access = await uow.project_access.get(project_id, user_id)
                if access:
                    await uow.project_access.delete(access.id)
                    await record_audit(
                        uow,
                        ctx.user.id,
                        AuditAction.PROJECT_ACCESS_REVOKED,
                        target_user_id=user_id,
                        project_id=project_id,
                    )
                    removed += 1
            if team_id is not None:
                team_access = await uow.team_project_access.get(team_id, project_id)
                if team_access:
                    await uow.team_project_access.delete(team_access.id)
                    await record_audit(
                        uow,
                        ctx.user.id,
                        AuditAction.TEAM_PROJECT_ACCESS_REVOKED,
                        project_id=project_id,
                        team_id=team_id,
                    )
                    removed += 1

            logger.info("Revoked %d grants on project %s", removed, project_id)
            return removed


class ListProjectAccessUseCase:
    """User and team grants on a project; the caller needs read access to it."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str, project_id: UUID) -> ProjectAccessOutput:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            await load_project(uow, ctx, project_id)

        level = await effective_project_level(self._permission_checker, ctx.user.id, project_id)
        if level is None:
            raise PermissionDenied("Insufficient permissions to view project access")

        async with self._uow_factory() as uow:
            return ProjectAccessOutput(
                users=await uow.project_access.list_by_project(project_id),
                teams=await uow.team_project_access.list_by_project(project_id),
            )
