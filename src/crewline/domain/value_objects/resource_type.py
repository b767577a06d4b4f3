"""Kinds of resource that carry scoped access rows."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class ResourceType(StrEnum):
    """Resource instance types for scoped checks."""

    PROJECT = "project"
    DOCUMENT = "document"
    ISSUE = "issue"
    TEAM = "team"


@dataclass(frozen=True)
class ResourceScope:
    """A specific resource instance a permission check is scoped to."""

    resource_type: ResourceType
    resource_id: UUID
