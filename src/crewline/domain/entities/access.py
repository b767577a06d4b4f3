"""Resource-scoped access grants."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


def _expired(expires_at: datetime | None, now: datetime) -> bool:
    return expires_at is not None and expires_at <= now


@dataclass
class ProjectAccess:
    """Explicit tier for one user on one project."""

    id: UUID
    project_id: UUID
    user_id: UUID
    access_level: str
    granted_by: UUID
    granted_at: datetime
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return _expired(self.expires_at, now)


@dataclass
class TeamProjectAccess:
    """Tier for a team on a project, inherited by members when inherit_to_members."""

    id: UUID
    team_id: UUID
    project_id: UUID
    access_level: str
    granted_by: UUID
    granted_at: datetime
    inherit_to_members: bool = True
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return _expired(self.expires_at, now)


@dataclass
class DocumentAccess:
    """Document tier for a user or a team (exactly one of user_id/team_id)."""

    id: UUID
    document_id: UUID
    access_level: str
    granted_by: UUID
    granted_at: datetime
    user_id: UUID | None = None
    team_id: UUID | None = None
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return _expired(self.expires_at, now)


@dataclass
class ResourcePermission:
    """Tier on an arbitrary resource instance for a user or a team."""

    id: UUID
    resource_type: str
    resource_id: UUID
    access_level: str
    granted_by: UUID
    granted_at: datetime
    user_id: UUID | None = None
    team_id: UUID | None = None
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        return _expired(self.expires_at, now)
