"""Filter timeline use case."""

from collections import defaultdict
from uuid import UUID

from crewline.application.dto.timeline_dto import TimelineOutput, TimelineProject
from crewline.application.ports import PermissionChecker
from crewline.application.use_cases.context import organization_context
from crewline.domain.entities import Task
from crewline.domain.exceptions import PermissionDenied
from crewline.domain.policies import filter_projects, filter_tasks
from crewline.domain.value_objects import PermissionAction, PermissionResource, TimelineFilter


class FilterTimelineUseCase:
    """Organization projects and their tasks, narrowed by a timeline filter."""

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
        organization_id: UUID,
        timeline_filter: TimelineFilter,
    ) -> TimelineOutput:
        async with self._uow_factory() as uow:
            ctx = await organization_context(uow, actor_id, organization_id)

        can_view = False
        for resource in (PermissionResource.PROJECTS, PermissionResource.CONSTRUCTION_PROJECTS):
            if await self._permission_checker.check(
                ctx.user.id, resource, PermissionAction.READ, organization_id=organization_id
            ):
                can_view = True
                break
        if not can_view:
            raise PermissionDenied("Insufficient permissions to view the timeline")

        async with self._uow_factory() as uow:
            projects = await uow.projects.list_by_organization(organization_id)
            tasks = await uow.tasks.list_by_projects([p.id for p in projects])

        tasks_by_project: dict[UUID, list[Task]] = defaultdict(list)
        for task in tasks:
            tasks_by_project[task.project_id].append(task)

        kept = filter_projects(projects, timeline_filter)
        return TimelineOutput(
            projects=[
                TimelineProject(
                    project=project,
                    tasks=filter_tasks(tasks_by_project[project.id], timeline_filter),
                )
                for project in kept
            ],
            total_projects=len(projects),
        )
