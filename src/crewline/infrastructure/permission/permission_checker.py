"""Permission checker implementation - evaluates roles, overrides and scoped grants."""

import logging
from collections.abc import Callable, Iterable
from datetime import UTC, datetime
from uuid import UUID

from crewline.domain.entities import CustomRole, Organization, Role, User
from crewline.domain.exceptions import NotFound, PermissionDenied
from crewline.domain.value_objects import (
    PROJECT_RESOURCES,
    AccessDecision,
    AccessLevel,
    DocumentAccessLevel,
    PermissionAction,
    PermissionResource,
    ResourceScope,
    ResourceType,
    RoleScope,
    access_rank,
    document_access_rank,
)

logger = logging.getLogger(__name__)

# Any tier on the linked project reads its documents, nothing more.
_DOCUMENT_TIER_FROM_PROJECT = DocumentAccessLevel.VIEWER


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _highest(levels: Iterable[str]) -> AccessLevel | None:
    ranked = [level for level in levels if access_rank(level) > 0]
    if not ranked:
        return None
    return AccessLevel(max(ranked, key=access_rank))


def _highest_document(levels: Iterable[str]) -> DocumentAccessLevel | None:
    ranked = [level for level in levels if document_access_rank(level) > 0]
    if not ranked:
        return None
    return DocumentAccessLevel(max(ranked, key=document_access_rank))


class RoleBasedPermissionChecker:
    """Single policy evaluator for (user, resource, action, scope).

    Order of evaluation:
    1. organization owner / director role on project-scoped checks
    2. non-expired user override for the exact permission (authoritative)
    3. role permission set, where resource:manage implies every action
    4. scoped grants on the resource instance (user, then user's teams),
       then project role bundles assigned to the user
    5. deny

    Nothing is cached; every call reads fresh state.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def check(
        self,
        user_id: UUID,
        resource: PermissionResource,
        action: PermissionAction,
        scope: ResourceScope | None = None,
        *,
        organization_id: UUID | None = None,
    ) -> bool:
        """Check if user may perform action on resource."""
        decision = await self.evaluate(
            user_id, resource, action, scope, organization_id=organization_id
        )
        return decision.allowed

    async def evaluate(
        self,
        user_id: UUID,
        resource: PermissionResource,
        action: PermissionAction,
        scope: ResourceScope | None = None,
        *,
        organization_id: UUID | None = None,
    ) -> AccessDecision:
        """Evaluate and explain a permission check.

        organization_id selects the membership whose role applies; it defaults
        to the user's current organization.
        """
        resource = PermissionResource(resource)
        action = PermissionAction(action)
        async with self._uow_factory() as uow:
            decision = await self._evaluate(
                uow, user_id, resource, action, scope, organization_id
            )
        if not decision.allowed:
            logger.warning(
                "Denied %s:%s for user %s (%s)", resource, action, user_id, decision.reason
            )
        return decision

    async def project_access_level(self, user_id: UUID, project_id: UUID) -> AccessLevel | None:
        """Highest tier the user holds on the project, or None."""
        async with self._uow_factory() as uow:
            user = await self._load_user(uow, user_id)
            if not user.is_active:
                return None
            organization, role = await self._load_context(uow, user)
            return await self._project_level(uow, user, organization, role, project_id)

    async def effective_permissions(self, user_id: UUID) -> list[tuple[str, str]]:
        """Permissions the user holds: live overrides first, then role permissions."""
        now = self._clock()
        async with self._uow_factory() as uow:
            user = await self._load_user(uow, user_id)
            if not user.is_active:
                return []
            _, role = await self._load_context(uow, user)

            granted: set[tuple[str, str]] = set()
            decided: set[tuple[str, str]] = set()
            for override in await uow.user_permissions.list_by_user(user.id):
                if override.is_expired(now):
                    continue
                permission = await uow.permissions.get_by_id(override.permission_id)
                if not permission:
                    continue
                key = (permission.resource, permission.action)
                if override.granted:
                    granted.add(key)
                decided.add(key)

            if role:
                for permission in await uow.roles.list_permissions(role.id):
                    key = (permission.resource, permission.action)
                    if key not in decided:
                        granted.add(key)

        return sorted(granted)

    async def _evaluate(
        self,
        uow,
        user_id: UUID,
        resource: PermissionResource,
        action: PermissionAction,
        scope: ResourceScope | None,
        organization_id: UUID | None = None,
    ) -> AccessDecision:
        now = self._clock()
        user = await self._load_user(uow, user_id)
        if not user.is_active:
            return AccessDecision.deny("user is inactive")

        organization, role = await self._load_context(uow, user, organization_id)

        project_scoped = resource in PROJECT_RESOURCES or (
            scope is not None and scope.resource_type == ResourceType.PROJECT
        )
        if project_scoped:
            if organization and organization.owner_id == user.id:
                return AccessDecision.allow("organization owner", AccessLevel.OWNER)
            if role and role.is_director:
                return AccessDecision.allow("director role", AccessLevel.ADMIN)

        permission = await uow.permissions.get_by_resource_action(resource, action)
        if permission:
            override = await uow.user_permissions.get(user.id, permission.id)
            if override and not override.is_expired(now):
                if override.granted:
                    return AccessDecision.allow("granted by user override")
                return AccessDecision.deny("revoked by user override")

        if role:
            keys = {p.key for p in await uow.roles.list_permissions(role.id)}
            if f"{resource}:{action}" in keys:
                return AccessDecision.allow(f"role {role.name} grants {resource}:{action}")
            if f"{resource}:{PermissionAction.MANAGE}" in keys:
                return AccessDecision.allow(f"role {role.name} manages {resource}")

        if scope is not None:
            decision = await self._evaluate_scope(
                uow, user, organization, role, resource, action, scope
            )
            if decision.allowed:
                return decision

        return AccessDecision.deny(f"no permission for {resource}:{action}")

    async def _evaluate_scope(
        self,
        uow,
        user: User,
        organization: Organization | None,
        role: Role | None,
        resource: PermissionResource,
        action: PermissionAction,
        scope: ResourceScope,
    ) -> AccessDecision:
        if scope.resource_type == ResourceType.PROJECT:
            level = await self._project_level(uow, user, organization, role, scope.resource_id)
            required = AccessLevel.for_action(action)
            if level and level.satisfies(required):
                return AccessDecision.allow(f"project access {level}", level)
            bundle = await self._project_bundle(uow, user, resource, action, scope.resource_id)
            if bundle:
                return AccessDecision.allow(f"project role {bundle.display_name}", level)
            return AccessDecision.deny("insufficient project access")

        if scope.resource_type == ResourceType.DOCUMENT:
            doc_level = await self._document_level(
                uow, user, organization, role, scope.resource_id
            )
            required_doc = DocumentAccessLevel.for_action(action)
            if doc_level and doc_level.satisfies(required_doc):
                return AccessDecision.allow(f"document access {doc_level}")
            return AccessDecision.deny("insufficient document access")

        level = await self._resource_level(uow, user, scope)
        required = AccessLevel.for_action(action)
        if level and level.satisfies(required):
            return AccessDecision.allow(f"{scope.resource_type} access {level}", level)
        return AccessDecision.deny(f"insufficient {scope.resource_type} access")

    async def _project_bundle(
        self,
        uow,
        user: User,
        resource: PermissionResource,
        action: PermissionAction,
        project_id: UUID,
    ) -> CustomRole | None:
        """First live project role of the user that allows resource:action on the project."""
        now = self._clock()
        assignments = [
            a for a in await uow.user_custom_roles.list_by_user(user.id) if a.is_active(now)
        ]
        if not assignments:
            return None
        for bundle in await uow.custom_roles.list_by_ids([a.role_id for a in assignments]):
            if bundle.applies_to(RoleScope.PROJECT, project_id) and bundle.allows(resource, action):
                return bundle
        return None

    async def _load_user(self, uow, user_id: UUID) -> User:
        user = await uow.users.get_by_id(user_id)
        if not user:
            raise NotFound("User", str(user_id))
        return user

    async def _load_context(
        self, uow, user: User, organization_id: UUID | None = None
    ) -> tuple[Organization | None, Role | None]:
        """Resolve the user's organization and effective role.

        The active membership role in the organization (explicit, else the
        current one) wins over the user's global role. Dangling references are
        hard failures.
        """
        organization = None
        role_id = user.role_id
        organization_id = organization_id or user.current_organization_id
        if organization_id:
            organization = await uow.organizations.get_by_id(organization_id)
            if not organization:
                raise NotFound("Organization", str(organization_id))
            membership = await uow.members.get(organization.id, user.id)
            if not membership or not membership.is_active:
                raise PermissionDenied("Not an active member of the organization")
            role_id = membership.role_id

        if role_id is None:
            return organization, None
        role = await uow.roles.get_by_id(role_id)
        if not role:
            raise PermissionDenied("Role not found")
        return organization, role

    async def _project_level(
        self,
        uow,
        user: User,
        organization: Organization | None,
        role: Role | None,
        project_id: UUID,
    ) -> AccessLevel | None:
        if organization and organization.owner_id == user.id:
            return AccessLevel.OWNER
        if role and role.is_director:
            return AccessLevel.ADMIN

        now = self._clock()
        levels: list[str] = []
        direct = await uow.project_access.get(project_id, user.id)
        if direct and not direct.is_expired(now):
            levels.append(direct.access_level)

        for membership in await uow.team_members.list_by_user(user.id):
            team_access = await uow.team_project_access.get(membership.team_id, project_id)
            if team_access and team_access.inherit_to_members and not team_access.is_expired(now):
                levels.append(team_access.access_level)

        project = await uow.projects.get_by_id(project_id)
        if project:
            if project.lead_id == user.id:
                levels.append(AccessLevel.ADMIN)
            elif user.id in project.team_member_ids:
                levels.append(AccessLevel.WRITE)

        return _highest(levels)

    async def _document_level(
        self,
        uow,
        user: User,
        organization: Organization | None,
        role: Role | None,
        document_id: UUID,
    ) -> DocumentAccessLevel | None:
        document = await uow.documents.get_by_id(document_id)
        if not document:
            return None
        if document.author_id == user.id:
            return DocumentAccessLevel.OWNER

        now = self._clock()
        levels: list[str] = []
        if document.project_id:
            project_level = await self._project_level(
                uow, user, organization, role, document.project_id
            )
            if project_level:
                levels.append(_DOCUMENT_TIER_FROM_PROJECT)

        direct = await uow.document_access.get_for_user(document_id, user.id)
        if direct and not direct.is_expired(now):
            levels.append(direct.access_level)

        for membership in await uow.team_members.list_by_user(user.id):
            team_access = await uow.document_access.get_for_team(document_id, membership.team_id)
            if team_access and not team_access.is_expired(now):
                levels.append(team_access.access_level)

        return _highest_document(levels)

    async def _resource_level(self, uow, user: User, scope: ResourceScope) -> AccessLevel | None:
        now = self._clock()
        levels: list[str] = []
        direct = await uow.resource_permissions.get_for_user(
            scope.resource_type, scope.resource_id, user.id
        )
        if direct and not direct.is_expired(now):
            levels.append(direct.access_level)

        for membership in await uow.team_members.list_by_user(user.id):
            team_grant = await uow.resource_permissions.get_for_team(
                scope.resource_type, scope.resource_id, membership.team_id
            )
            if team_grant and not team_grant.is_expired(now):
                levels.append(team_grant.access_level)

        return _highest(levels)
