import logging
from typing import Mapping

from fastapi import status

from app.core.errors import (
    BusinessFailure,
    HttpFailure,
    InvalidInterval,
    InvalidTimeWindow,
    TransportFailure,
)
from app.core.resolver import resolve
from app.core.time_converter import format_utc
from app.schemas.catalog import IdentifierCatalog
from app.schemas.dashboard_state import DashboardState
from app.schemas.interval import Interval
from app.services.segment_fetcher import SegmentFetcher

_LOGGER = logging.getLogger(__name__)


def _page_status(upstream_status: int) -> int:
    """@brief Keep upstream 4xx/5xx codes; anything else becomes 502 Bad Gateway."""
    if 400 <= upstream_status < 600:
        return upstream_status
    return status.HTTP_502_BAD_GATEWAY


class DashboardService:
    def __init__(self, catalog: IdentifierCatalog, fetcher: SegmentFetcher) -> None:
        """@brief Initialize the dashboard loader.

        @param catalog Identifier catalog read for this request.
        @param fetcher Client of the aggregation service.
        """
        self.catalog = catalog
        self.fetcher = fetcher

    def _rejected_state(self, params: Mapping[str, str], exc: ValueError) -> DashboardState:
        """@brief Build the state shown when request parameters are rejected.

        @param params Raw query parameters, echoed back to the form.
        @param exc Validation error raised by the resolver.
        @return State with the error message and HTTP 400.
        """
        return DashboardState(
            identifier=(params.get("identifier") or "").strip() or self.catalog.default,
            interval=(params.get("interval") or "").strip() or Interval.default().value,
            start=params.get("start") or None,
            end=params.get("end") or None,
            error=str(exc),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    def load(self, params: Mapping[str, str]) -> DashboardState:
        """@brief Resolve the request and fetch segments when the window is resolved.

        @param params Query parameters of the dashboard request.
        @return State for the rendering layer. Fetch failures are reported
        through `error` and `status_code`, never raised.
        """
        _LOGGER.info("Loading dashboard for params %s", dict(params))

        try:
            request = resolve(params, self.catalog)
        except (InvalidInterval, InvalidTimeWindow) as exc:
            _LOGGER.warning("Rejected dashboard parameters: %s", exc)
            return self._rejected_state(params, exc)

        state = DashboardState(
            identifier=request.identifier,
            interval=request.interval.value,
        )
        if request.window is None:
            return state

        state.start = format_utc(request.window.start)
        state.end = format_utc(request.window.end)

        try:
            state.segments = self.fetcher.fetch(request)
        except HttpFailure as exc:
            state.error = str(exc)
            state.status_code = _page_status(exc.status_code)
        except BusinessFailure as exc:
            state.error = str(exc)
        except TransportFailure as exc:
            _LOGGER.error("Segment fetch failed: %s", exc.message)
            state.error = exc.message
            state.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

        return state
