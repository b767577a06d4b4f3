"""Construction project and task entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID


@dataclass
class Project:
    """Construction project."""

    id: UUID
    organization_id: UUID
    name: str
    start_date: date
    created_at: datetime
    target_date: date | None = None
    status_id: UUID | None = None
    lead_id: UUID | None = None
    team_member_ids: list[UUID] = field(default_factory=list)


@dataclass
class Task:
    """Task (issue) inside a project."""

    id: UUID
    project_id: UUID
    title: str
    start_date: date
    due_date: date | None = None
    status_id: UUID | None = None
    assignee_id: UUID | None = None
