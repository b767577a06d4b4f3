"""Timeline endpoint."""

import falcon.asgi

from crewline.application.use_cases.timeline.filter_timeline import FilterTimelineUseCase
from crewline.domain.value_objects import TimelineFilter
from crewline.interfaces.api.params import caller_id, optional_date, parse_uuid
from crewline.interfaces.api.serializers import to_json


class TimelineResource:
    """GET /v1/organizations/{organization_id}/timeline.

    Query: project=<id> and status=<id> (repeatable or comma separated),
    start=YYYY-MM-DD, end=YYYY-MM-DD.
    """

    def __init__(self, filter_timeline: FilterTimelineUseCase) -> None:
        self._filter_timeline = filter_timeline

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, organization_id: str
    ) -> None:
        actor = caller_id(req)
        org_id = parse_uuid(organization_id, "organization_id")
        start = optional_date(req.get_param("start"), "start")
        end = optional_date(req.get_param("end"), "end")
        timeline_filter = TimelineFilter(
            project_ids=tuple(parse_uuid(v, "project") for v in req.get_param_as_list("project") or []),
            status_ids=tuple(parse_uuid(v, "status") for v in req.get_param_as_list("status") or []),
            start=start,
            end=end,
        )
        result = await self._filter_timeline.execute(actor, org_id, timeline_filter)
        resp.media = to_json(result)
        resp.status = falcon.HTTP_200
