"""Permission audit log endpoint."""

import falcon.asgi

from crewline.application.use_cases.permission.list_audit_log import ListAuditLogUseCase
from crewline.interfaces.api.params import caller_id
from crewline.interfaces.api.serializers import to_json


class AuditLogResource:
    """GET /v1/audit-log?limit=N - newest entries first."""

    def __init__(self, list_audit_log: ListAuditLogUseCase, default_limit: int = 50) -> None:
        self._list_audit_log = list_audit_log
        self._default_limit = default_limit

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        actor = caller_id(req)
        limit = req.get_param_as_int("limit") or self._default_limit
        entries = await self._list_audit_log.execute(actor, limit=limit)
        resp.media = {"items": to_json(entries)}
        resp.status = falcon.HTTP_200
