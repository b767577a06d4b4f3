"""Organization-level role rules."""

from uuid import UUID

from crewline.domain.entities import Organization, OrganizationMember, Role

ADMIN_ROLE_NAMES = frozenset({"admin", "owner"})


def is_organization_owner(organization: Organization, user_id: UUID) -> bool:
    return organization.owner_id == user_id


def is_admin(membership: OrganizationMember | None, role: Role | None) -> bool:
    """Admin, owner and director roles on an active membership may manage roles."""
    if membership is None or not membership.is_active or role is None:
        return False
    return role.is_director or role.name in ADMIN_ROLE_NAMES


def can_manage_members(
    organization: Organization,
    user_id: UUID,
    membership: OrganizationMember | None,
    role: Role | None,
) -> bool:
    """Owner, directors and admins can add, remove and re-role members."""
    if is_organization_owner(organization, user_id):
        return True
    return is_admin(membership, role)
