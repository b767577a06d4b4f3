"""Date-range and selection filtering for the project timeline."""

from datetime import date, timedelta

from crewline.domain.entities import Project, Task
from crewline.domain.value_objects import TimelineFilter

PROJECT_DEFAULT_SPAN = timedelta(days=90)
TASK_DEFAULT_SPAN = timedelta(days=7)


def project_interval(project: Project) -> tuple[date, date]:
    end = project.target_date or project.start_date + PROJECT_DEFAULT_SPAN
    return project.start_date, end


def task_interval(task: Task) -> tuple[date, date]:
    end = task.due_date or task.start_date + TASK_DEFAULT_SPAN
    return task.start_date, end


def in_date_range(start: date, end: date, timeline_filter: TimelineFilter) -> bool:
    """Half-open overlap of [start, end) with the filter range.

    One-sided ranges are open-ended: with only a start, anything ending on or
    after it is kept; with only an end, anything starting on or before it.
    """
    lower, upper = timeline_filter.start, timeline_filter.end
    if lower is not None and upper is not None:
        return start < upper and lower < end
    if lower is not None:
        return end >= lower
    if upper is not None:
        return start <= upper
    return True


def filter_projects(projects: list[Project], timeline_filter: TimelineFilter) -> list[Project]:
    result = projects
    if timeline_filter.project_ids:
        selected = set(timeline_filter.project_ids)
        result = [p for p in result if p.id in selected]
    if timeline_filter.status_ids:
        statuses = set(timeline_filter.status_ids)
        result = [p for p in result if p.status_id is not None and p.status_id in statuses]
    if timeline_filter.has_date_range:
        result = [p for p in result if in_date_range(*project_interval(p), timeline_filter)]
    return result


def filter_tasks(tasks: list[Task], timeline_filter: TimelineFilter) -> list[Task]:
    """Tasks are filtered by date only; status selection applies to projects."""
    if not timeline_filter.has_date_range:
        return list(tasks)
    return [t for t in tasks if in_date_range(*task_interval(t), timeline_filter)]
