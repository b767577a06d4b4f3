"""Domain exceptions."""


class CrewlineError(Exception):
    """Base exception for Crewline."""

    pass


class NotAuthenticated(CrewlineError):
    """No caller identity was supplied."""

    pass


class PermissionDenied(CrewlineError):
    """User does not have permission for the requested action."""

    pass


class NotFound(CrewlineError):
    """Requested resource was not found."""

    def __init__(
        self, entity: str, identifier: str | None = None, message: str | None = None
    ) -> None:
        super().__init__(message or f"{entity} not found")
        self.entity = entity
        self.identifier = identifier


class ValidationError(CrewlineError):
    """Validation failed for input data."""

    pass


class InvariantViolation(CrewlineError):
    """Operation would break a data invariant (e.g. deleting a team with sub-teams)."""

    pass
