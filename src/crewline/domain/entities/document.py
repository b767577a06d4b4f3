"""Legal document entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Document:
    """Document, optionally linked to a project."""

    id: UUID
    organization_id: UUID
    title: str
    author_id: UUID
    created_at: datetime
    project_id: UUID | None = None
