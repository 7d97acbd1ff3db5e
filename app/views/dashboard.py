from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request, Response, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.core.session import DashboardSession
from app.schemas.catalog import IdentifierCatalog
from app.schemas.navigation import SubmittedForm
from app.schemas.timezone_name import OptionalTimeZoneName, load_timezone
from app.services.dashboard import DashboardService
from app.services.plot import PlotService
from app.utils.dashboard import get_dashboard_service, get_identifier_catalog
from app.utils.env import get_display_timezone

router = APIRouter(tags=["View"])


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request,
              tz: Annotated[OptionalTimeZoneName, Query()] = None,
              service: DashboardService = Depends(get_dashboard_service)) -> Response:
    """@brief Render the watch-time dashboard.

    @description Loads the state for the query parameters and mounts the page.
    When no window, data or error is present, the page submits the default
    window of the local day once, as a redirect carrying explicit UTC bounds.

    @param request Incoming request; its query parameters are resolved.
    @param tz Optional IANA time zone of the viewer.
    @param service Dashboard loader.
    @return HTML page, or a 303 redirect for the default-window submission.
    """
    tz_name = tz or get_display_timezone()
    session = DashboardSession(load_timezone(tz_name))
    state = session.load(service, request.query_params)

    navigation = session.mount()
    if navigation is not None:
        return RedirectResponse(url=navigation.to_url("/"), status_code=status.HTTP_303_SEE_OTHER)

    html = PlotService(session.tz, tz_name).render_page(state, service.catalog)
    return HTMLResponse(content=html, status_code=state.status_code)


@router.get("/submit")
def submit(identifier: Annotated[str, Query()] = "",
           interval: Annotated[str, Query()] = "1h",
           start_local: Annotated[str, Query()] = "",
           end_local: Annotated[str, Query()] = "",
           tz: Annotated[OptionalTimeZoneName, Query()] = None,
           catalog: IdentifierCatalog = Depends(get_identifier_catalog)) -> Response:
    """@brief Handle a manual submission of the dashboard form.

    @param identifier Video identifier typed or picked in the form.
    @param interval Interval picked in the form.
    @param start_local Start as `YYYY-MM-DDTHH:MM` in the page time zone.
    @param end_local End as `YYYY-MM-DDTHH:MM` in the page time zone.
    @param tz Optional IANA time zone the local values are expressed in.
    @param catalog Catalog providing the default identifier.
    @return 303 redirect to the dashboard with UTC bounds, or 204 (the page
    stays as it is) when a bound is not a valid local time.
    """
    tz_name = tz or get_display_timezone()
    session = DashboardSession(load_timezone(tz_name))
    form = SubmittedForm(
        identifier=identifier,
        interval=interval,
        start_local=start_local,
        end_local=end_local,
    )

    navigation = session.submit(form, catalog.default)
    if navigation is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return RedirectResponse(url=navigation.to_url("/"), status_code=status.HTTP_303_SEE_OTHER)
