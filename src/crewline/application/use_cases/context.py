"""Caller resolution shared by the use cases."""

from dataclasses import dataclass
from uuid import UUID

from crewline.application.ports import UnitOfWork
from crewline.domain.entities import Organization, OrganizationMember, Role, User
from crewline.domain.exceptions import NotAuthenticated, NotFound, PermissionDenied

NOT_A_MEMBER = "Not a member of this organization"


@dataclass
class ActorContext:
    """The calling user inside one organization."""

    user: User
    organization: Organization
    membership: OrganizationMember
    role: Role | None


async def resolve_actor(uow: UnitOfWork, actor_id: str | None) -> User:
    """Map an auth subject to a user row; falls back to email for pre-linked accounts."""
    if not actor_id:
        raise NotAuthenticated("Not authenticated")
    user = await uow.users.get_by_auth_id(actor_id)
    if not user and "@" in actor_id:
        user = await uow.users.get_by_email(actor_id)
    if not user:
        raise NotFound("User", actor_id)
    return user


async def require_membership(
    uow: UnitOfWork,
    user: User,
    organization_id: UUID,
    denial: str = NOT_A_MEMBER,
) -> ActorContext:
    """Require an active membership of user in the organization."""
    organization = await uow.organizations.get_by_id(organization_id)
    if not organization:
        raise NotFound("Organization", str(organization_id))
    membership = await uow.members.get(organization_id, user.id)
    if not membership or not membership.is_active:
        raise PermissionDenied(denial)
    role = await uow.roles.get_by_id(membership.role_id)
    return ActorContext(user=user, organization=organization, membership=membership, role=role)


async def organization_context(
    uow: UnitOfWork, actor_id: str | None, organization_id: UUID
) -> ActorContext:
    user = await resolve_actor(uow, actor_id)
    return await require_membership(uow, user, organization_id)


async def current_organization_context(uow: UnitOfWork, actor_id: str | None) -> ActorContext:
    """Resolve the caller within the organization they currently work in."""
    user = await resolve_actor(uow, actor_id)
    if not user.current_organization_id:
        raise PermissionDenied("No organization selected")
    return await require_membership(
        uow, user, user.current_organization_id, denial="Not an active member of the organization"
    )
