"""User repository port."""

from typing import Protocol
from uuid import UUID

from crewline.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence."""

    async def get_by_id(self, user_id: UUID) -> User | None: ...

    async def get_by_auth_id(self, auth_id: str) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def list_by_ids(self, user_ids: list[UUID]) -> list[User]: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...
