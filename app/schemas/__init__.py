from app.schemas.catalog import IdentifierCatalog
from app.schemas.chart_point import ChartPoint
from app.schemas.dashboard_state import DashboardResponse, DashboardState
from app.schemas.interval import Interval
from app.schemas.navigation import Navigation, SubmittedForm
from app.schemas.request_parameters import RequestParameters
from app.schemas.time_window import TimeWindow
from app.schemas.watch_segment import SegmentsEnvelope, SegmentsQuery, WatchSegment

__all__ = [
    "ChartPoint",
    "DashboardResponse",
    "DashboardState",
    "IdentifierCatalog",
    "Interval",
    "Navigation",
    "RequestParameters",
    "SegmentsEnvelope",
    "SegmentsQuery",
    "SubmittedForm",
    "TimeWindow",
    "WatchSegment",
]
