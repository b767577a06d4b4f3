"""List roles use case."""

from crewline.application.dto.role_dto import RoleOutput
from crewline.application.use_cases.context import current_organization_context


class ListRolesUseCase:
    """System and organization roles, highest priority first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, actor_id: str) -> list[RoleOutput]:
        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            roles = await uow.roles.list_for_organization(ctx.organization.id)
            roles.sort(key=lambda r: r.priority, reverse=True)
            return [
                RoleOutput(
                    role=role,
                    permissions=await uow.roles.list_permissions(role.id),
                    member_count=await uow.members.count_with_role(ctx.organization.id, role.id),
                )
                for role in roles
            ]
