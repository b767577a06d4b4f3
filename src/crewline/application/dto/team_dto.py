"""Team DTOs."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass
class TeamCreated:
    team_id: UUID


@dataclass
class UserSummary:
    id: UUID
    name: str
    email: str
    avatar_url: str = ""


@dataclass
class TeamSummary:
    id: UUID
    name: str


@dataclass
class TeamMemberOutput:
    """Team member enriched with the user's profile."""

    user_id: UUID
    name: str
    email: str
    avatar_url: str
    role: str
    joined_at: datetime


@dataclass
class TeamNode:
    """One team in the organization tree, with its members and sub-teams."""

    id: UUID
    organization_id: UUID
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    parent_team_id: UUID | None = None
    leader_id: UUID | None = None
    leader: UserSummary | None = None
    parent: TeamSummary | None = None
    members: list[TeamMemberOutput] = field(default_factory=list)
    member_count: int = 0
    children: list["TeamNode"] = field(default_factory=list)


@dataclass
class TeamUpdateInput:
    """Fields of a team update; None means leave unchanged."""

    name: str | None = None
    description: str | None = None
    leader_id: UUID | None = None
    is_active: bool | None = None
