"""Initial schema - users, organizations, roles, permissions, teams, projects, access grants.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _created_at() -> sa.Column:
    return sa.Column("created_at", sa.DateTime(timezone=True), nullable=False)


def upgrade() -> None:
    op.create_table(
        "app_user",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=False),
        _created_at(),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("auth_id", sa.String(255), nullable=True),
        sa.Column("role_id", sa.UUID(), nullable=True),
        sa.Column("current_organization_id", sa.UUID(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_app_user_email", "app_user", [sa.text("lower(email)")], unique=True)
    op.create_index("ix_app_user_auth_id", "app_user", ["auth_id"], unique=True)

    op.create_table(
        "organization",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("ix_organization_slug", "organization", ["slug"], unique=True)

    op.create_table(
        "organization_member",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("organization_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("role_id", sa.UUID(), nullable=True),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("invited_by", sa.UUID(), nullable=True),
    )
    op.create_index(
        "ix_organization_member_org_user",
        "organization_member",
        ["organization_id", "user_id"],
        unique=True,
    )
    op.create_index("ix_organization_member_role_id", "organization_member", ["role_id"])

    op.create_table(
        "permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("resource", sa.String(100), nullable=False),
        sa.Column("action", sa.String(50), nullable=False),
        _created_at(),
        sa.Column("description", sa.Text(), nullable=True),
    )
    op.create_index("ix_permission_resource_action", "permission", ["resource", "action"], unique=True)

    op.create_table(
        "role",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("display_name", sa.String(255), nullable=False),
        sa.Column("priority", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_director", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_system", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("organization_id", sa.UUID(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
    )
    # System roles have no organization; names are unique per organization.
    op.create_index(
        "ix_role_org_name",
        "role",
        [sa.text("coalesce(organization_id, '00000000-0000-0000-0000-000000000000'::uuid)"), "name"],
        unique=True,
    )

    op.create_table(
        "role_permission",
        sa.Column("role_id", sa.UUID(), primary_key=True),
        sa.Column("permission_id", sa.UUID(), primary_key=True),
        _created_at(),
    )

    op.create_table(
        "user_permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("permission_id", sa.UUID(), nullable=False),
        sa.Column("granted", sa.Boolean(), nullable=False),
        _created_at(),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "ix_user_permission_user_permission",
        "user_permission",
        ["user_id", "permission_id"],
        unique=True,
    )

    op.create_table(
        "team",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("organization_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        _created_at(),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("parent_team_id", sa.UUID(), nullable=True),
        sa.Column("leader_id", sa.UUID(), nullable=True),
    )
    op.create_index("ix_team_organization_id", "team", ["organization_id"])
    op.create_index("ix_team_parent_team_id", "team", ["parent_team_id"])

    op.create_table(
        "team_member",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("joined_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="member"),
    )
    op.create_index("ix_team_member_team_user", "team_member", ["team_id", "user_id"], unique=True)
    op.create_index("ix_team_member_user_id", "team_member", ["user_id"])

    op.create_table(
        "project",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("organization_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        _created_at(),
        sa.Column("target_date", sa.Date(), nullable=True),
        sa.Column("status_id", sa.UUID(), nullable=True),
        sa.Column("lead_id", sa.UUID(), nullable=True),
        sa.Column(
            "team_member_ids",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
    )
    op.create_index("ix_project_organization_id", "project", ["organization_id"])

    op.create_table(
        "task",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("due_date", sa.Date(), nullable=True),
        sa.Column("status_id", sa.UUID(), nullable=True),
        sa.Column("assignee_id", sa.UUID(), nullable=True),
    )
    op.create_index("ix_task_project_id", "task", ["project_id"])

    op.create_table(
        "document",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("organization_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(500), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.Column("project_id", sa.UUID(), nullable=True),
    )

    op.create_table(
        "project_access",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("access_level", sa.String(20), nullable=False),
        sa.Column("granted_by", sa.UUID(), nullable=True),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "ix_project_access_project_user", "project_access", ["project_id", "user_id"], unique=True
    )

    op.create_table(
        "team_project_access",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("team_id", sa.UUID(), nullable=False),
        sa.Column("project_id", sa.UUID(), nullable=False),
        sa.Column("access_level", sa.String(20), nullable=False),
        sa.Column("granted_by", sa.UUID(), nullable=True),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("inherit_to_members", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "ix_team_project_access_team_project",
        "team_project_access",
        ["team_id", "project_id"],
        unique=True,
    )

    op.create_table(
        "document_access",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("document_id", sa.UUID(), nullable=False),
        sa.Column("access_level", sa.String(20), nullable=False),
        sa.Column("granted_by", sa.UUID(), nullable=True),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("team_id", sa.UUID(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index("ix_document_access_document_id", "document_access", ["document_id"])

    op.create_table(
        "resource_permission",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("resource_type", sa.String(20), nullable=False),
        sa.Column("resource_id", sa.UUID(), nullable=False),
        sa.Column("access_level", sa.String(20), nullable=False),
        sa.Column("granted_by", sa.UUID(), nullable=True),
        sa.Column("granted_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column("team_id", sa.UUID(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index(
        "ix_resource_permission_resource",
        "resource_permission",
        ["resource_type", "resource_id"],
    )

    op.create_table(
        "permission_audit_log",
        sa.Column("id", sa.UUID(), primary_key=True),
        sa.Column("actor_id", sa.UUID(), nullable=False),
        sa.Column("action", sa.String(50), nullable=False),
        _created_at(),
        sa.Column("target_user_id", sa.UUID(), nullable=True),
        sa.Column("target_role_id", sa.UUID(), nullable=True),
        sa.Column("details", postgresql.JSONB(), nullable=False, server_default="{}"),
    )
    op.create_index("ix_permission_audit_log_created_at", "permission_audit_log", ["created_at"])


def downgrade() -> None:
    for table in (
        "permission_audit_log",
        "resource_permission",
        "document_access",
        "team_project_access",
        "project_access",
        "document",
        "task",
        "project",
        "team_member",
        "team",
        "user_permission",
        "role_permission",
        "role",
        "permission",
        "organization_member",
        "organization",
        "app_user",
    ):
        op.drop_table(table)
