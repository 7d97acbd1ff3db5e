from datetime import tzinfo
from typing import Iterable

from app.core.time_converter import utc_to_local_hhmm
from app.schemas.chart_point import ChartPoint
from app.schemas.watch_segment import WatchSegment


def to_chart_points(segments: Iterable[WatchSegment], tz: tzinfo) -> list[ChartPoint]:
    """@brief Map watch segments to chart points, one per segment, in order.

    @param segments Segments as returned by the aggregation service.
    @param tz Time zone used for the `HH:MM` axis labels.
    @return Chart points; empty when there are no segments.
    """
    return [
        ChartPoint(
            time_label=utc_to_local_hhmm(segment.segment_start_time, tz),
            duration=segment.watched_duration_seconds,
            original_start_time=segment.segment_start_time,
            original_end_time=segment.segment_end_time,
        )
        for segment in segments
    ]
