"""Team API resources."""

import falcon.asgi

from crewline.application.dto.team_dto import TeamUpdateInput
from crewline.application.use_cases.team.add_team_member import AddTeamMemberUseCase
from crewline.application.use_cases.team.create_team import CreateTeamUseCase
from crewline.application.use_cases.team.delete_team import DeleteTeamUseCase
from crewline.application.use_cases.team.list_teams import ListTeamsUseCase
from crewline.application.use_cases.team.remove_team_member import RemoveTeamMemberUseCase
from crewline.application.use_cases.team.update_team import UpdateTeamUseCase
from crewline.domain.value_objects import TeamRole
from crewline.interfaces.api.params import (
    caller_id,
    json_body,
    optional_bool,
    optional_str,
    optional_uuid,
    parse_enum,
    parse_uuid,
    required,
)
from crewline.interfaces.api.serializers import to_json


class OrganizationTeamsResource:
    """GET/POST /v1/organizations/{organization_id}/teams - team tree and team creation."""

    def __init__(self, list_teams: ListTeamsUseCase, create_team: CreateTeamUseCase) -> None:
        self._list_teams = list_teams
        self._create_team = create_team

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        """Root teams with nested children. ?include_inactive=true shows deactivated teams."""
        actor = caller_id(req)
        org_id = parse_uuid(organization_id, "organization_id")
        include_inactive = req.get_param_as_bool("include_inactive") or False
        tree = await self._list_teams.execute(actor, org_id, include_inactive=include_inactive)
        resp.media = {"items": to_json(tree)}
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        actor = caller_id(req)
        org_id = parse_uuid(organization_id, "organization_id")
        body = await json_body(req)
        name = optional_str(required(body, "name"), "name")
        created = await self._create_team.execute(
            actor,
            org_id,
            name,
            description=optional_str(body.get("description"), "description"),
            parent_team_id=optional_uuid(body.get("parent_team_id"), "parent_team_id"),
            leader_id=optional_uuid(body.get("leader_id"), "leader_id"),
        )
        resp.media = {"id": str(created.team_id)}
        resp.status = falcon.HTTP_201


class TeamResource:
    """PATCH/DELETE /v1/teams/{team_id}."""

    def __init__(self, update_team: UpdateTeamUseCase, delete_team: DeleteTeamUseCase) -> None:
        self._update_team = update_team
        self._delete_team = delete_team

    async def on_patch(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, team_id: str) -> None:
        actor = caller_id(req)
        tid = parse_uuid(team_id, "team_id")
        body = await json_body(req)
        changes = TeamUpdateInput(
            name=optional_str(body.get("name"), "name"),
            description=optional_str(body.get("description"), "description"),
            leader_id=optional_uuid(body.get("leader_id"), "leader_id"),
            is_active=optional_bool(body.get("is_active"), "is_active"),
        )
        await self._update_team.execute(actor, tid, changes)
        resp.status = falcon.HTTP_204

    async def on_delete(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, team_id: str) -> None:
        actor = caller_id(req)
        await self._delete_team.execute(actor, parse_uuid(team_id, "team_id"))
        resp.status = falcon.HTTP_204


class TeamMembersResource:
    """POST /v1/teams/{team_id}/members, DELETE /v1/teams/{team_id}/members/{user_id}."""

    def __init__(
        self, add_member: AddTeamMemberUseCase, remove_member: RemoveTeamMemberUseCase
    ) -> None:
        self._add_member = add_member
        self._remove_member = remove_member

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response, team_id: str) -> None:
        actor = caller_id(req)
        tid = parse_uuid(team_id, "team_id")
        body = await json_body(req)
        user_id = parse_uuid(required(body, "user_id"), "user_id")
        role = body.get("role")
        if role is not None:
            role = parse_enum(TeamRole, role, "role")
        member = await self._add_member.execute(actor, tid, user_id, role=role)
        resp.media = to_json(member)
        resp.status = falcon.HTTP_201

    async def on_delete_member(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, team_id: str, user_id: str
    ) -> None:
        actor = caller_id(req)
        tid = parse_uuid(team_id, "team_id")
        uid = parse_uuid(user_id, "user_id")
        await self._remove_member.execute(actor, tid, uid)
        resp.status = falcon.HTTP_204
