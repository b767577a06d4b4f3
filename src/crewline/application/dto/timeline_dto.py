"""Timeline DTOs."""

from dataclasses import dataclass, field

from crewline.domain.entities import Project, Task


@dataclass
class TimelineProject:
    """A project with the tasks kept by the timeline filter."""

    project: Project
    tasks: list[Task] = field(default_factory=list)


@dataclass
class TimelineOutput:
    projects: list[TimelineProject]
    total_projects: int
