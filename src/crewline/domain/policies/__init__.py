"""Pure rules over already-loaded records."""

from crewline.domain.policies.role_policy import (
    ADMIN_ROLE_NAMES,
    can_manage_members,
    is_admin,
    is_organization_owner,
)
from crewline.domain.policies.team_policy import TeamAction, decide_team_action
from crewline.domain.policies.timeline_policy import (
    filter_projects,
    filter_tasks,
    in_date_range,
)

__all__ = [
    "ADMIN_ROLE_NAMES",
    "TeamAction",
    "can_manage_members",
    "decide_team_action",
    "filter_projects",
    "filter_tasks",
    "in_date_range",
    "is_admin",
    "is_organization_owner",
]
