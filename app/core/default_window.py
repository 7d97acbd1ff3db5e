from datetime import datetime, time, tzinfo

from app.core.time_converter import utc_to_local_input_string
from app.schemas.time_window import TimeWindow

_END_OF_DAY = time(23, 59, 59, 999000)


def default_window(now: datetime, tz: tzinfo) -> TimeWindow:
    """@brief Return the window covering the caller's local calendar day.

    @description The day is taken from `now` expressed in `tz`, never from the
    UTC date: a UTC day boundary can fall in the middle of the local day.

    @param now Current instant (timezone-aware).
    @param tz Time zone of the caller.
    @return Window from local midnight to local 23:59:59.999, in UTC.
    @throws ValueError If `now` is naive.
    """
    if now.tzinfo is None:
        raise ValueError("now must be a timezone-aware datetime.")

    local_day = now.astimezone(tz).date()
    return TimeWindow(
        start=datetime.combine(local_day, time.min, tzinfo=tz),
        end=datetime.combine(local_day, _END_OF_DAY, tzinfo=tz),
    )


def default_local_inputs(now: datetime, tz: tzinfo) -> tuple[str, str]:
    """@brief Return the default window as local form input values.

    @param now Current instant (timezone-aware).
    @param tz Time zone of the caller.
    @return `(start, end)` as `YYYY-MM-DDTHH:MM` strings, e.g.
    `("2024-03-10T00:00", "2024-03-10T23:59")`.
    """
    window = default_window(now, tz)
    return (
        utc_to_local_input_string(window.start, tz),
        utc_to_local_input_string(window.end, tz),
    )
