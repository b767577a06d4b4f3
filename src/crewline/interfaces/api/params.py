"""Request parsing helpers. Malformed input raises ValidationError (HTTP 400)."""

from datetime import date, datetime
from enum import StrEnum
from typing import Any, TypeVar
from uuid import UUID

import falcon.asgi

from crewline.domain.exceptions import NotAuthenticated, ValidationError

E = TypeVar("E", bound=StrEnum)


def caller_id(req: falcon.asgi.Request) -> str:
    user = getattr(req.context, "user", None)
    if not user:
        raise NotAuthenticated("Not authenticated")
    return user.user_id


def parse_uuid(value: Any, field: str) -> UUID:
    try:
        return UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field}") from None


def optional_uuid(value: Any, field: str) -> UUID | None:
    if value is None or value == "":
        return None
    return parse_uuid(value, field)


def parse_enum(enum_type: type[E], value: Any, field: str) -> E:
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_type)
        raise ValidationError(f"Invalid {field}: expected one of {allowed}") from None


def optional_date(value: Any, field: str) -> date | None:
    if value is None or value == "":
        return None
    try:
        return date.fromisoformat(str(value)[:10])
    except ValueError:
        raise ValidationError(f"Invalid {field}: expected YYYY-MM-DD") from None


def optional_datetime(value: Any, field: str) -> datetime | None:
    if value is None or value == "":
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {field}: expected ISO 8601 timestamp") from None


def optional_bool(value: Any, field: str) -> bool | None:
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ValidationError(f"Invalid {field}: expected boolean")
    return value


def optional_str(value: Any, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field}: expected string")
    return value


def required(body: dict, field: str) -> Any:
    if field not in body or body[field] is None:
        raise ValidationError(f"Missing required field: {field}")
    return body[field]


async def json_body(req: falcon.asgi.Request) -> dict:
    body = await req.get_media(default_when_empty={})
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    return body
