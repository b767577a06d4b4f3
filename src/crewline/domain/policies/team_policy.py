"""Who may do what to a team.

Every team mutation goes through decide_team_action so the rules live in one
place:

- create: admin or manager
- update, add member: admin, manager, or the team leader
- remove member: admin, manager, the team leader, or the member themself
- delete: admin only

A caller whose membership has no resolvable role is always denied, even when
they lead the team.
"""

from enum import StrEnum
from uuid import UUID

from crewline.domain.entities import Role, Team
from crewline.domain.value_objects import AccessDecision


class TeamAction(StrEnum):
    CREATE = "create"
    UPDATE = "update"
    ADD_MEMBER = "add_member"
    REMOVE_MEMBER = "remove_member"
    DELETE = "delete"


TEAM_MANAGER_ROLES = frozenset({"admin", "manager"})
TEAM_ADMIN_ROLE = "admin"

_DENIALS = {
    TeamAction.CREATE: "Insufficient permissions to create teams",
    TeamAction.UPDATE: "Insufficient permissions to update team",
    TeamAction.ADD_MEMBER: "Insufficient permissions to add team members",
    TeamAction.REMOVE_MEMBER: "Insufficient permissions",
    TeamAction.DELETE: "Only administrators can delete teams",
}


def decide_team_action(
    role: Role | None,
    actor_id: UUID,
    action: TeamAction,
    team: Team | None = None,
    target_user_id: UUID | None = None,
) -> AccessDecision:
    """Decide a team action. The denial reason is the user-facing message."""
    denied = AccessDecision.deny(_DENIALS[action])
    if role is None:
        return denied

    if action == TeamAction.DELETE:
        if role.name == TEAM_ADMIN_ROLE:
            return AccessDecision.allow("administrator")
        return denied

    if role.name in TEAM_MANAGER_ROLES:
        return AccessDecision.allow(f"organization role {role.name}")
    if action == TeamAction.CREATE:
        return denied

    if team is not None and team.leader_id == actor_id:
        return AccessDecision.allow("team leader")
    if action == TeamAction.REMOVE_MEMBER and target_user_id == actor_id:
        return AccessDecision.allow("self-removal")
    return denied
