from pydantic import BaseModel, Field, computed_field

from app.schemas.chart_point import ChartPoint
from app.schemas.watch_segment import WatchSegment


class DashboardState(BaseModel):
    """@brief Everything the rendering layer receives for one dashboard request.

    @details `start` and `end` are canonical UTC strings, or `None` while the
    window is unresolved. `status_code` is the HTTP status the page should be
    answered with and is not part of the serialized payload.
    """

    identifier: str
    interval: str
    start: str | None = None
    end: str | None = None
    segments: list[WatchSegment] = Field(default_factory=list)
    error: str | None = None
    status_code: int = Field(default=200, exclude=True)

    @computed_field
    @property
    def total_watched_duration_seconds(self) -> float:
        return sum(segment.watched_duration_seconds for segment in self.segments)

    @property
    def has_window(self) -> bool:
        return bool(self.start) and bool(self.end)


class DashboardResponse(DashboardState):
    """@brief JSON payload of `/api/watch-segments`: state plus chart points."""

    chart_points: list[ChartPoint] = Field(default_factory=list)
