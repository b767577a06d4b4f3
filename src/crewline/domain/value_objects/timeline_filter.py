"""Timeline (Gantt) filter state."""

from dataclasses import dataclass, replace
from datetime import date
from enum import StrEnum
from uuid import UUID


class TimelineFilterKind(StrEnum):
    PROJECT = "project"
    PROJECT_STATUS = "projectStatus"


@dataclass(frozen=True)
class TimelineFilter:
    """Selected projects, statuses and an optional date range.

    Immutable: the mutators return a new filter.
    """

    project_ids: tuple[UUID, ...] = ()
    status_ids: tuple[UUID, ...] = ()
    start: date | None = None
    end: date | None = None

    @property
    def has_active_filters(self) -> bool:
        """True when a project or status selection is active. Dates are not counted."""
        return bool(self.project_ids or self.status_ids)

    @property
    def active_filters_count(self) -> int:
        return len(self.project_ids) + len(self.status_ids)

    @property
    def has_date_range(self) -> bool:
        return self.start is not None or self.end is not None

    def ids_for(self, kind: TimelineFilterKind) -> tuple[UUID, ...]:
        if TimelineFilterKind(kind) == TimelineFilterKind.PROJECT:
            return self.project_ids
        return self.status_ids

    def set_filter(self, kind: TimelineFilterKind, ids: list[UUID]) -> "TimelineFilter":
        if TimelineFilterKind(kind) == TimelineFilterKind.PROJECT:
            return replace(self, project_ids=tuple(ids))
        return replace(self, status_ids=tuple(ids))

    def toggle(self, kind: TimelineFilterKind, item_id: UUID) -> "TimelineFilter":
        """Add the id if absent, remove it if present."""
        current = self.ids_for(kind)
        if item_id in current:
            return self.set_filter(kind, [i for i in current if i != item_id])
        return self.set_filter(kind, [*current, item_id])

    def clear(self, kind: TimelineFilterKind | None = None) -> "TimelineFilter":
        """Clear one selection kind, or both selections when kind is None."""
        if kind is not None:
            return self.set_filter(kind, [])
        return replace(self, project_ids=(), status_ids=())

    def with_date_range(self, start: date | None, end: date | None) -> "TimelineFilter":
        return replace(self, start=start, end=end)
