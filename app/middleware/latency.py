import logging
import time

from fastapi import Request

from app.database.latency import LatencyRecord, RouteName

_LOGGER = logging.getLogger(__name__)

_TRACKED_PATHS: dict[str, RouteName] = {
    "/": "dashboard",
    "/api/watch-segments": "segments",
}


def _route_from_path(path: str) -> RouteName | None:
    """@brief Map a request path to its latency bucket, if tracked."""
    return _TRACKED_PATHS.get(path)


async def track_request_latency(request: Request, call_next):
    """@brief FastAPI middleware that stores the latency of dashboard requests.

    @details
    Only answers below 400 are recorded, so the default-window redirect counts
    while rejected parameters and upstream failures do not. Telemetry errors
    are logged and never fail the request.
    """
    started = time.perf_counter()
    response = await call_next(request)

    route = _route_from_path(request.url.path)
    if route is not None and response.status_code < 400:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        try:
            LatencyRecord().push_latency(route, elapsed_ms)
        except Exception as exc:
            _LOGGER.warning("Failed to store latency in Redis: %s", exc)

    return response
