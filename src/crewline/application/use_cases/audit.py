"""Audit trail helper."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.ports import UnitOfWork
from crewline.domain.entities import PermissionAuditLog
from crewline.domain.value_objects import AuditAction

logger = logging.getLogger(__name__)


async def record_audit(
    uow: UnitOfWork,
    actor_id: UUID,
    action: AuditAction,
    target_user_id: UUID | None = None,
    target_role_id: UUID | None = None,
    **details: object,
) -> PermissionAuditLog:
    """Append an audit row in the caller's unit of work."""
    entry = PermissionAuditLog(
        id=uuid4(),
        actor_id=actor_id,
        action=str(action),
        created_at=datetime.now(UTC),
        target_user_id=target_user_id,
        target_role_id=target_role_id,
        details={key: _jsonable(value) for key, value in details.items()},
    )
    await uow.audit_log.append(entry)
    logger.info("Audit %s by %s", action, actor_id)
    return entry


def _jsonable(value: object) -> object:
    if isinstance(value, UUID | datetime):
        return value.isoformat() if isinstance(value, datetime) else str(value)
    if isinstance(value, list | tuple):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    return value
