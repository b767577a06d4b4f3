"""PostgreSQL user repository implementation."""

from uuid import UUID

from psycopg import AsyncConnection

from crewline.domain.entities import User

_COLUMNS = (
    "id, name, email, created_at, avatar_url, auth_id, role_id, "
    "current_organization_id, is_active"
)


def _to_user(r: tuple) -> User:
    return User(
        id=r[0],
        name=r[1],
        email=r[2],
        created_at=r[3],
        avatar_url=r[4] or "",
        auth_id=r[5],
        role_id=r[6],
        current_organization_id=r[7],
        is_active=r[8],
    )


class PostgresUserRepository:
    """User repository implementation. Table is app_user since user is reserved."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, user_id: UUID) -> User | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = %s", (user_id,)
        )
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def get_by_auth_id(self, auth_id: str) -> User | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE auth_id = %s", (auth_id,)
        )
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def get_by_email(self, email: str) -> User | None:
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE lower(email) = lower(%s)", (email,)
        )
        r = await cur.fetchone()
        return _to_user(r) if r else None

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]:
        if not user_ids:
            return []
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM app_user WHERE id = ANY(%s)", (list(user_ids),)
        )
        return [_to_user(r) for r in await cur.fetchall()]

    async def create(self, user: User) -> User:
        await self._conn.execute(
            f"INSERT INTO app_user ({_COLUMNS}) VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                user.id,
                user.name,
                user.email,
                user.created_at,
                user.avatar_url,
                user.auth_id,
                user.role_id,
                user.current_organization_id,
                user.is_active,
            ),
        )
        return user

    async def update(self, user: User) -> None:
        await self._conn.execute(
            "UPDATE app_user SET name = %s, email = %s, avatar_url = %s, auth_id = %s, "
            "role_id = %s, current_organization_id = %s, is_active = %s WHERE id = %s",
            (
                user.name,
                user.email,
                user.avatar_url,
                user.auth_id,
                user.role_id,
                user.current_organization_id,
                user.is_active,
                user.id,
            ),
        )
