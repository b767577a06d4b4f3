"""Team entities."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Team:
    """Team - optionally nested under a parent team, soft-deleted via is_active."""

    id: UUID
    organization_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime
    is_active: bool = True
    description: str | None = None
    parent_team_id: UUID | None = None
    leader_id: UUID | None = None


@dataclass
class TeamMember:
    """Team membership row."""

    id: UUID
    team_id: UUID
    user_id: UUID
    joined_at: datetime
    role: str = "member"
