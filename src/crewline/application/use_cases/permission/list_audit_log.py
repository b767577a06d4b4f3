"""List audit log use case."""

from crewline.application.ports import PermissionChecker
from crewline.application.use_cases.context import current_organization_context
from crewline.domain.entities import PermissionAuditLog
from crewline.domain.exceptions import PermissionDenied
from crewline.domain.value_objects import PermissionAction, PermissionResource


class ListAuditLogUseCase:
    """Most recent permission changes, newest first."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
        max_limit: int = 200,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker
        self._max_limit = max_limit

    async def execute(self, actor_id: str, limit: int = 50) -> list[PermissionAuditLog]:
        limit = max(1, min(limit, self._max_limit))
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)

        allowed = await self._permission_checker.check(
            ctx.user.id, PermissionResource.PERMISSIONS, PermissionAction.READ
        )
        if not allowed:
            raise PermissionDenied("Insufficient permissions to view audit log")

        async with self._uow_factory() as uow:
            return await uow.audit_log.list_recent(limit)
