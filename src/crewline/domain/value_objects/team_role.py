"""Roles inside a team."""

from enum import StrEnum


class TeamRole(StrEnum):
    """Team membership role. Stored as free text; these are the known values."""

    LEADER = "leader"
    MEMBER = "member"
