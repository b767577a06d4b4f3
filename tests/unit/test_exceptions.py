"""Unit tests for domain exceptions."""

import pytest

from crewline.domain.exceptions import (
    CrewlineError,
    InvariantViolation,
    NotAuthenticated,
    NotFound,
    PermissionDenied,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_type",
    [NotAuthenticated, PermissionDenied, NotFound, ValidationError, InvariantViolation],
)
def test_domain_errors_inherit_crewline_error(error_type) -> None:
    assert issubclass(error_type, CrewlineError)


def test_not_found_default_message() -> None:
    err = NotFound("Team", "123")
    assert str(err) == "Team not found"
    assert err.entity == "Team"
    assert err.identifier == "123"


def test_not_found_custom_message() -> None:
    err = NotFound("TeamMember", message="User is not a team member")
    assert str(err) == "User is not a team member"


def test_raise_permission_denied_catchable_as_crewline_error() -> None:
    with pytest.raises(CrewlineError, match="no access"):
        raise PermissionDenied("no access")
