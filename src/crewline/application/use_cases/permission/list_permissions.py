"""List permission catalogue use case."""

from crewline.application.dto.permission_dto import PermissionGroup
from crewline.application.use_cases.context import resolve_actor


class ListPermissionCatalogueUseCase:
    """Every known permission, grouped by resource."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str) -> list[PermissionGroup]:
        async with self._uow_factory() as uow:
            await resolve_actor(uow, actor_id)
            permissions = await uow.permissions.list_all()

        groups: dict[str, PermissionGroup] = {}
        for permission in sorted(permissions, key=lambda p: (p.resource, p.action)):
            group = groups.setdefault(permission.resource, PermissionGroup(permission.resource))
            group.actions.append(permission)
        return list(groups.values())
