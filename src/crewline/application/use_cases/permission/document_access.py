"""Grant document access use case."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from crewline.application.ports import PermissionChecker
from crewline.application.use_cases.audit import record_audit
from crewline.application.use_cases.context import current_organization_context
from crewline.domain.entities import DocumentAccess
from crewline.domain.exceptions import NotFound, PermissionDenied, ValidationError
from crewline.domain.value_objects import (
    AuditAction,
    DocumentAccessLevel,
    PermissionAction,
    PermissionResource,
    ResourceScope,
    ResourceType,
)

logger = logging.getLogger(__name__)


class GrantDocumentAccessUseCase:
    """Share a document with a user or a team at a document tier."""

    def __init__(
        self,
        unit_of_work_factory: type,
        permission_checker: PermissionChecker,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._permission_checker = permission_checker

    async def execute(
        self,
        actor_id: str,
        document_id: UUID,
        access_level: DocumentAccessLevel,
        user_id: UUID | None = None,
        team_id: UUID | None = None,
        expires_at: datetime | None = None,
    ) -> DocumentAccess:
        if (user_id is None) == (team_id is None):
            raise ValidationError("Must provide either userId or teamId, not both")
        access_level = DocumentAccessLevel(access_level)

        async with self._uow_factory() as uow:
            ctx = await current_organization_context(uow, actor_id)
            document = await uow.documents.get_by_id(document_id)
            if not document or document.organization_id != ctx.organization.id:
                raise NotFound("Document", str(document_id))

        decision = await self._permission_checker.evaluate(
            ctx.user.id,
            PermissionResource.DOCUMENTS,
            PermissionAction.MANAGE,
            ResourceScope(ResourceType.DOCUMENT, document_id),
        )
        if not decision.allowed:
            raise PermissionDenied("Insufficient permissions to share document")

        async with self._uow_factory() as uow:
            if user_id is not None:
                existing = await uow.document_access.get_for_user(document_id, user_id)
            else:
                existing = await uow.document_access.get_for_team(document_id, team_id)

            now = datetime.now(UTC)
            if existing:
                existing.access_level = str(access_level)
                existing.granted_by = ctx.user.id
                existing.granted_at = now
                existing.expires_at = expires_at
                await uow.document_access.update(existing)
                grant = existing
            else:
                grant = DocumentAccess(
                    id=uuid4(),
                    document_id=document_id,
                    access_level=str(access_level),
                    granted_by=ctx.user.id,
                    granted_at=now,
                    user_id=user_id,
                    team_id=team_id,
                    expires_at=expires_at,
                )
                await uow.document_access.create(grant)

            await record_audit(
                uow,
                ctx.user.id,
                AuditAction.DOCUMENT_ACCESS_GRANTED,
                target_user_id=user_id,
                document_id=document_id,
                team_id=team_id,
                access_level=str(access_level),
            )
            logger.info("Granted %s on document %s by %s", access_level, document_id, ctx.user.id)

        return grant
