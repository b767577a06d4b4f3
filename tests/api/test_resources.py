"""API resource tests."""

from uuid import uuid4

from tests.api.conftest import as_user


class TestAuthAndErrors:
    def test_missing_caller_is_401(self, client, org_setup) -> None:
        org, _, _ = org_setup
        result = client.simulate_get(f"/v1/organizations/{org.id}/teams")
        assert result.status_code == 401
        assert result.json == {"error": "Not authenticated"}

    def test_malformed_uuid_is_400(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_get("/v1/organizations/not-a-uuid/teams", headers=as_user(users["bob"]))
        assert result.status_code == 400
        assert result.json["error"] == "Invalid organization_id"

    def test_permission_denied_is_403(self, client, org_setup) -> None:
        org, _, users = org_setup
        result = client.simulate_post(
            f"/v1/organizations/{org.id}/teams",
            json={"name": "Rogue"},
            headers=as_user(users["alice"]),
        )
        assert result.status_code == 403
        assert result.json["error"] == "Insufficient permissions to create teams"

    def test_not_found_is_404(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_delete(f"/v1/teams/{uuid4()}", headers=as_user(users["admin"]))
        assert result.status_code == 404
        assert result.json["error"] == "Team not found"


class TestTeams:
    def test_create_then_list(self, client, org_setup) -> None:
        org, _, users = org_setup
        created = client.simulate_post(
            f"/v1/organizations/{org.id}/teams",
            json={"name": "Masons", "leader_id": str(users["alice"].id)},
            headers=as_user(users["manager"]),
        )
        assert created.status_code == 201
        team_id = created.json["id"]

        listed = client.simulate_get(
            f"/v1/organizations/{org.id}/teams", headers=as_user(users["bob"])
        )
        assert listed.status_code == 200
        (team,) = listed.json["items"]
        assert team["id"] == team_id
        assert team["leader"]["name"] == "Alice"
        assert team["member_count"] == 2
        assert team["children"] == []

    def test_create_without_name_is_400(self, client, org_setup) -> None:
        org, _, users = org_setup
        result = client.simulate_post(
            f"/v1/organizations/{org.id}/teams", json={}, headers=as_user(users["admin"])
        )
        assert result.status_code == 400
        assert result.json["error"] == "Missing required field: name"

    def test_leader_reassigns_leadership(self, client, world, fake_uow, org_setup) -> None:
        org, _, users = org_setup
        team = world.team(org, "Crew", leader=users["alice"])
        result = client.simulate_patch(
            f"/v1/teams/{team.id}",
            json={"leader_id": str(users["bob"].id)},
            headers=as_user(users["alice"]),
        )
        assert result.status_code == 204
        assert fake_uow.teams.by_id[team.id].leader_id == users["bob"].id

    def test_add_and_remove_member(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        team = world.team(org, "Crew", leader=users["alice"])
        added = client.simulate_post(
            f"/v1/teams/{team.id}/members",
            json={"user_id": str(users["bob"].id)},
            headers=as_user(users["alice"]),
        )
        assert added.status_code == 201
        assert added.json["role"] == "member"

        again = client.simulate_post(
            f"/v1/teams/{team.id}/members",
            json={"user_id": str(users["bob"].id)},
            headers=as_user(users["alice"]),
        )
        assert again.status_code == 409

        removed = client.simulate_delete(
            f"/v1/teams/{team.id}/members/{users['bob'].id}", headers=as_user(users["bob"])
        )
        assert removed.status_code == 204

    def test_invalid_team_role_is_400(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        team = world.team(org, "Crew")
        result = client.simulate_post(
            f"/v1/teams/{team.id}/members",
            json={"user_id": str(users["bob"].id), "role": "captain"},
            headers=as_user(users["admin"]),
        )
        assert result.status_code == 400
        assert result.json["error"] == "Invalid role: expected one of leader, member"

    def test_delete_team_with_children_is_409(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        parent = world.team(org, "Crew")
        world.team(org, "Night", parent=parent)
        result = client.simulate_delete(f"/v1/teams/{parent.id}", headers=as_user(users["admin"]))
        assert result.status_code == 409


class TestRolesAndMembers:
    def test_list_roles(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_get("/v1/roles", headers=as_user(users["bob"]))
        assert result.status_code == 200
        assert [r["role"]["name"] for r in result.json["items"]] == [
            "owner",
            "admin",
            "manager",
            "member",
        ]

    def test_create_update_delete_role(self, client, world, org_setup) -> None:
        _, _, users = org_setup
        perm = world.permission("issues", "read")
        created = client.simulate_post(
            "/v1/roles",
            json={"name": "foreman", "priority": 40, "permission_ids": [str(perm.id)]},
            headers=as_user(users["admin"]),
        )
        assert created.status_code == 201
        role_id = created.json["id"]
        assert created.json["display_name"] == "foreman"

        patched = client.simulate_patch(
            f"/v1/roles/{role_id}", json={"priority": 45}, headers=as_user(users["admin"])
        )
        assert patched.status_code == 200
        assert patched.json["priority"] == 45

        denied = client.simulate_delete(f"/v1/roles/{role_id}", headers=as_user(users["admin"]))
        assert denied.status_code == 403
        deleted = client.simulate_delete(f"/v1/roles/{role_id}", headers=as_user(users["owner"]))
        assert deleted.status_code == 204

    def test_priority_must_be_integer(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_post(
            "/v1/roles", json={"name": "x", "priority": "high"}, headers=as_user(users["admin"])
        )
        assert result.status_code == 400

    def test_assign_role(self, client, org_setup) -> None:
        _, roles, users = org_setup
        result = client.simulate_put(
            f"/v1/members/{users['bob'].id}/role",
            json={"role_id": str(roles["manager"].id)},
            headers=as_user(users["admin"]),
        )
        assert result.status_code == 200
        assert result.json["role_id"] == str(roles["manager"].id)

    def test_member_permissions_roundtrip(self, client, world, org_setup) -> None:
        _, _, users = org_setup
        perm = world.permission("teams", "read")
        put = client.simulate_put(
            f"/v1/members/{users['bob'].id}/permissions",
            json={"overrides": [{"permission_id": str(perm.id), "granted": True}]},
            headers=as_user(users["owner"]),
        )
        assert put.status_code == 204

        got = client.simulate_get(
            f"/v1/members/{users['bob'].id}/permissions", headers=as_user(users["bob"])
        )
        assert got.status_code == 200
        assert got.json["effective"] == ["projects:read", "teams:read"]
        assert got.json["overrides"][0]["permission"]["resource"] == "teams"


class TestAccess:
    def test_grant_list_check_revoke_project_access(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        project = world.project(org, "Tower")
        url = f"/v1/projects/{project.id}/access"

        granted = client.simulate_post(
            url,
            json={"user_id": str(users["bob"].id), "access_level": "write"},
            headers=as_user(users["owner"]),
        )
        assert granted.status_code == 201

        listed = client.simulate_get(url, headers=as_user(users["bob"]))
        assert [u["user_id"] for u in listed.json["users"]] == [str(users["bob"].id)]

        check = client.simulate_get(
            url, params={"required_level": "admin"}, headers=as_user(users["bob"])
        )
        assert check.json["allowed"] is False
        assert check.json["level"] == "write"

        revoked = client.simulate_delete(
            url, params={"user_id": str(users["bob"].id)}, headers=as_user(users["owner"])
        )
        assert revoked.json == {"removed": 1}

    def test_invalid_access_level_is_400(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        project = world.project(org, "Tower")
        result = client.simulate_post(
            f"/v1/projects/{project.id}/access",
            json={"user_id": str(users["bob"].id), "access_level": "god"},
            headers=as_user(users["owner"]),
        )
        assert result.status_code == 400

    def test_share_document(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        doc = world.document(org, users["alice"])
        result = client.simulate_post(
            f"/v1/documents/{doc.id}/access",
            json={"user_id": str(users["bob"].id), "access_level": "editor"},
            headers=as_user(users["alice"]),
        )
        assert result.status_code == 201
        assert result.json["access_level"] == "editor"


class TestAuditLogAndTimeline:
    def test_audit_log_requires_permission(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_get("/v1/audit-log", headers=as_user(users["bob"]))
        assert result.status_code == 403

    def test_audit_log_lists_entries(self, client, world, org_setup) -> None:
        org, roles, users = org_setup
        world.override(users["admin"], "permissions:read", granted=True)
        client.simulate_put(
            f"/v1/members/{users['bob'].id}/role",
            json={"role_id": str(roles["manager"].id)},
            headers=as_user(users["admin"]),
        )
        result = client.simulate_get("/v1/audit-log", params={"limit": "5"}, headers=as_user(users["admin"]))
        assert result.status_code == 200
        assert [e["action"] for e in result.json["items"]] == ["role_assigned"]

    def test_timeline_query_params(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        status = uuid4()
        kept = world.project(org, "Kept", status_id=status)
        world.project(org, "Dropped")
        result = client.simulate_get(
            f"/v1/organizations/{org.id}/timeline",
            params={"status": str(status), "start": "2026-01-01", "end": "2026-02-01"},
            headers=as_user(users["alice"]),
        )
        assert result.status_code == 200
        assert result.json["total_projects"] == 2
        assert [p["project"]["id"] for p in result.json["projects"]] == [str(kept.id)]

    def test_timeline_bad_date_is_400(self, client, org_setup) -> None:
        org, _, users = org_setup
        result = client.simulate_get(
            f"/v1/organizations/{org.id}/timeline",
            params={"start": "yesterday"},
            headers=as_user(users["alice"]),
        )
        assert result.status_code == 400


class TestMembershipAndCustomRoles:
    def test_remove_member(self, client, world, fake_uow, org_setup) -> None:
        org, _, users = org_setup
        project = world.project(org, "Tower")
        world.project_access(project, users["bob"], "write")
        result = client.simulate_delete(
            f"/v1/members/{users['bob'].id}",
            params={"remove_from_projects": "true"},
            headers=as_user(users["admin"]),
        )
        assert result.status_code == 204
        assert fake_uow.project_access.rows == {}

    def test_remove_owner_is_400(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_delete(
            f"/v1/members/{users['owner'].id}", headers=as_user(users["admin"])
        )
        assert result.status_code == 400
        assert result.json == {"error": "Cannot remove the organization owner"}

    def test_accessible_projects(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        project = world.project(org, "Tower")
        world.project(org, "Depot")
        world.project_access(project, users["bob"], "write")
        result = client.simulate_get("/v1/projects/accessible", headers=as_user(users["bob"]))
        assert result.status_code == 200
        (item,) = result.json["items"]
        assert item["project"]["name"] == "Tower"
        assert item["access_level"] == "write"

    def test_permission_catalogue(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_get("/v1/permissions", headers=as_user(users["bob"]))
        assert result.status_code == 200
        (group,) = result.json["items"]
        assert group["resource"] == "projects"
        assert [p["action"] for p in group["actions"]] == ["read"]

    def test_create_custom_role(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        project = world.project(org, "Tower")
        body = {
            "name": "inspector",
            "scope": "project",
            "scope_id": str(project.id),
            "permissions": {"issues": ["read"]},
        }
        created = client.simulate_post("/v1/custom-roles", json=body, headers=as_user(users["admin"]))
        assert created.status_code == 201
        assert created.json["scope_id"] == str(project.id)
        assert created.json["display_name"] == "inspector"

        again = client.simulate_post("/v1/custom-roles", json=body, headers=as_user(users["admin"]))
        assert again.status_code == 409

    def test_custom_role_permissions_must_be_object(self, client, org_setup) -> None:
        _, _, users = org_setup
        result = client.simulate_post(
            "/v1/custom-roles",
            json={"name": "x", "scope": "organization", "permissions": ["issues"]},
            headers=as_user(users["admin"]),
        )
        assert result.status_code == 400

    def test_assign_and_list_project_roles(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        project = world.project(org, "Tower")
        url = f"/v1/projects/{project.id}/roles"
        assigned = client.simulate_post(
            url,
            json={"user_id": str(users["bob"].id), "role_type": "member"},
            headers=as_user(users["owner"]),
        )
        assert assigned.status_code == 201
        assert assigned.json["user_id"] == str(users["bob"].id)

        listed = client.simulate_get(url, headers=as_user(users["owner"]))
        assert sorted(r["name"] for r in listed.json["items"]) == [
            "project_admin",
            "project_member",
            "project_owner",
        ]

    def test_invalid_project_role_type_is_400(self, client, world, org_setup) -> None:
        org, _, users = org_setup
        project = world.project(org, "Tower")
        result = client.simulate_post(
            f"/v1/projects/{project.id}/roles",
            json={"user_id": str(users["bob"].id), "role_type": "king"},
            headers=as_user(users["owner"]),
        )
        assert result.status_code == 400
        assert result.json["error"] == "Invalid role_type: expected one of member, admin, owner"
