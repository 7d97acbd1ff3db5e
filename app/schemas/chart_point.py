from pydantic import BaseModel, ConfigDict


class ChartPoint(BaseModel):
    """@brief One plotted point derived from a `WatchSegment`.

    @var time_label: Local `HH:MM` of the segment start, used on the x axis.
    @var duration: Watched seconds, used on the y axis.
    @var original_start_time: Segment start exactly as received.
    @var original_end_time: Segment end exactly as received.
    """

    model_config = ConfigDict(frozen=True)

    time_label: str
    duration: float
    original_start_time: str
    original_end_time: str
