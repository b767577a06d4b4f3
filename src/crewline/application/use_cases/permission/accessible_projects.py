"""List accessible projects use case."""

from crewline.application.dto.permission_dto import AccessibleProject
from crewline.application.ports import PermissionChecker
from crewline.application.use_cases.context import current_organization_context


class ListAccessibleProjectsUseCase:
    """Projects of the caller's organization on which the caller holds any tier."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(self, actor_id: str) -> list[AccessibleProject]:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            projects = await uow.projects.list_by_organization(ctx.organization.id)

        accessible = []
        for project in projects:
            level = await self._permission_checker.project_access_level(ctx.user.id, project.id)
            if level is not None:
                accessible.append(AccessibleProject(project=project, access_level=level))
        return accessible
