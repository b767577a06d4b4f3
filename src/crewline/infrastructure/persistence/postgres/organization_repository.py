"""PostgreSQL organization and membership repositories."""

from uuid import UUID

from psycopg import AsyncConnection

from crewline.domain.entities import Organization, OrganizationMember

_ORG_COLUMNS = "id, name, slug, owner_id, created_at, updated_at, description"
_MEMBER_COLUMNS = "id, organization_id, user_id, role_id, joined_at, is_active, invited_by"


def _to_organization(r: tuple) -> Organization:
    return Organization(
        id=r[0],
        name=r[1],
        slug=r[2],
        owner_id=r[3],
        created_at=r[4],
        updated_at=r[5],
        description=r[6],
    )


def _to_member(r: tuple) -> OrganizationMember:
    return OrganizationMember(
        id=r[0],
        organization_id=r[1],
        user_id=r[2],
        role_id=r[3],
        joined_at=r[4],
        is_active=r[5],
        invited_by=r[6],
    )


class PostgresOrganizationRepository:
    """Organization repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, organization_id: UUID) -> Organization | None:
        cur = await self._conn.execute(
            f"SELECT {_ORG_COLUMNS} FROM organization WHERE id = %s",
            (organization_id,),
        )
        r = await cur.fetchone()
        return _to_organization(r) if r else None

    async def create(self, organization: Organization) -> Organization:
        await self._conn.execute(
            f"INSERT INTO organization ({_ORG_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                organization.id,
                organization.name,
                organization.slug,
                organization.owner_id,
                organization.created_at,
                organization.updated_at,
                organization.description,
            ),
        )
        return organization


class PostgresMemberRepository:
    """Organization membership repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, organization_id: UUID, user_id: UUID) -> OrganizationMember | None:
        cur = await self._conn.execute(
            f"SELECT {_MEMBER_COLUMNS} FROM organization_member "
            "WHERE organization_id = %s AND user_id = %s",
            (organization_id, user_id),
        )
        r = await cur.fetchone()
        return _to_member(r) if r else None

    async def list_by_organization(self, organization_id: UUID) -> list[OrganizationMember]:
        cur = await self._conn.execute(
            f"SELECT {_MEMBER_COLUMNS} FROM organization_member "
            "WHERE organization_id = %s ORDER BY joined_at",
            (organization_id,),
        )
        return [_to_member(r) for r in await cur.fetchall()]

    async def count_with_role(self, organization_id: UUID, role_id: UUID) -> int:
        """Count memberships (active or not) holding the role."""
        cur = await self._conn.execute(
            "SELECT COUNT(*) FROM organization_member WHERE organization_id = %s AND role_id = %s",
            (organization_id, role_id),
        )
        r = await cur.fetchone()
        return r[0] if r else 0

    async def create(self, member: OrganizationMember) -> OrganizationMember:
        await self._conn.execute(
            f"INSERT INTO organization_member ({_MEMBER_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s)",
            (
                member.id,
                member.organization_id,
                member.user_id,
                member.role_id,
                member.joined_at,
                member.is_active,
                member.invited_by,
            ),
        )
        return member

    async def update(self, member: OrganizationMember) -> None:
        await self._conn.execute(
            "UPDATE organization_member SET role_id = %s, is_active = %s WHERE id = %s",
            (member.role_id, member.is_active, member.id),
        )
