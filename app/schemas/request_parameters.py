from pydantic import BaseModel, ConfigDict

from app.schemas.interval import Interval
from app.schemas.time_window import TimeWindow


class RequestParameters(BaseModel):
    """@brief Effective parameters of one dashboard request.

    @var identifier: Video identifier to query.
    @var interval: Aggregation interval.
    @var window: Resolved window, or `None` while unresolved (no fetch).
    """

    model_config = ConfigDict(frozen=True)

    identifier: str
    interval: Interval
    window: TimeWindow | None = None

    @property
    def is_resolved(self) -> bool:
        return self.window is not None
