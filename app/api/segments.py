from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from app.core.chart import to_chart_points
from app.schemas.dashboard_state import DashboardResponse
from app.schemas.timezone_name import OptionalTimeZoneName, load_timezone
from app.services.dashboard import DashboardService
from app.utils.dashboard import get_dashboard_service
from app.utils.env import get_display_timezone

router = APIRouter(tags=["Watch Segments"])


@router.get("/api/watch-segments", response_model=DashboardResponse)
def watch_segments(request: Request,
                   tz: Annotated[OptionalTimeZoneName, Query()] = None,
                   service: DashboardService = Depends(get_dashboard_service)) -> JSONResponse:
    """@brief Return the dashboard state and chart points as JSON.

    @description Unlike the HTML page, this endpoint never submits a default
    window: an unresolved window yields an empty state without any fetch.

    @param request Incoming request; its query parameters are resolved.
    @param tz Optional IANA time zone used for chart labels.
    @param service Dashboard loader.
    @return JSON `DashboardResponse`, with the status chosen by the loader.
    """
    state = service.load(request.query_params)
    points = to_chart_points(state.segments, load_timezone(tz or get_display_timezone()))

    payload = DashboardResponse(
        **state.model_dump(exclude={"total_watched_duration_seconds"}),
        chart_points=points,
    )
    return JSONResponse(content=payload.model_dump(mode="json"), status_code=state.status_code)
