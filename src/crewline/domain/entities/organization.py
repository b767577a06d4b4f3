"""Organization and membership entities."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Organization:
    """Organization - top-level tenant boundary."""

    id: UUID
    name: str
    slug: str
    owner_id: UUID
    created_at: datetime
    updated_at: datetime
    description: str | None = None


@dataclass
class OrganizationMember:
    """Membership of a user in an organization, carrying the user's role there."""

    id: UUID
    organization_id: UUID
    user_id: UUID
    role_id: UUID
    joined_at: datetime
    is_active: bool = True
    invited_by: UUID | None = None
