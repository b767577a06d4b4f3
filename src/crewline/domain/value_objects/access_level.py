"""Ordered access tiers for resource-scoped grants."""

from enum import StrEnum

from crewline.domain.value_objects.permission_action import PermissionAction


class AccessLevel(StrEnum):
    """Project / resource tier: owner > admin > write > read."""

    OWNER = "owner"
    ADMIN = "admin"
    WRITE = "write"
    READ = "read"

    @property
    def rank(self) -> int:
        return _ACCESS_RANKS[self]

    def satisfies(self, required: "AccessLevel | None") -> bool:
        """A higher tier implies every lower-tier capability."""
        if required is None:
            return True
        return self.rank >= required.rank

    @classmethod
    def for_action(cls, action: PermissionAction) -> "AccessLevel":
        """Tier an action needs on a scoped resource."""
        if action == PermissionAction.READ:
            return cls.READ
        if action in (PermissionAction.CREATE, PermissionAction.UPDATE):
            return cls.WRITE
        return cls.ADMIN


class DocumentAccessLevel(StrEnum):
    """Document tier: owner > editor > commenter > viewer."""

    OWNER = "owner"
    EDITOR = "editor"
    COMMENTER = "commenter"
    VIEWER = "viewer"

    @property
    def rank(self) -> int:
        return _DOCUMENT_RANKS[self]

    def satisfies(self, required: "DocumentAccessLevel | None") -> bool:
        if required is None:
            return True
        return self.rank >= required.rank

    @classmethod
    def for_action(cls, action: PermissionAction) -> "DocumentAccessLevel":
        if action == PermissionAction.READ:
            return cls.VIEWER
        if action in (PermissionAction.CREATE, PermissionAction.UPDATE):
            return cls.EDITOR
        return cls.OWNER


_ACCESS_RANKS = {
    AccessLevel.OWNER: 4,
    AccessLevel.ADMIN: 3,
    AccessLevel.WRITE: 2,
    AccessLevel.READ: 1,
}

_DOCUMENT_RANKS = {
    DocumentAccessLevel.OWNER: 4,
    DocumentAccessLevel.EDITOR: 3,
    DocumentAccessLevel.COMMENTER: 2,
    DocumentAccessLevel.VIEWER: 1,
}


def access_rank(level: str | None) -> int:
    """Rank of a stored project tier; unknown values rank 0."""
    try:
        return AccessLevel(level).rank
    except ValueError:
        return 0


def document_access_rank(level: str | None) -> int:
    """Rank of a stored document tier; unknown values rank 0."""
    try:
        return DocumentAccessLevel(level).rank
    except ValueError:
        return 0
