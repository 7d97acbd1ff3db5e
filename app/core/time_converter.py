import re
from datetime import datetime, timezone, tzinfo

from app.core.errors import InvalidTimeFormat

INVALID_DATE_LABEL = "Invalid Date"

_LOCAL_INPUT_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(:\d{2})?")
_LOCAL_INPUT_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _format_date(value: datetime) -> str:
    # strftime("%Y") does not zero-pad years below 1000 on every platform.
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_utc(instant: datetime) -> str:
    """@brief Serialize an aware datetime as a canonical UTC instant string.

    @param instant Timezone-aware datetime.
    @return String shaped like `2024-03-10T08:00:00.000Z`.
    """
    value = instant.astimezone(timezone.utc)
    return (
        f"{_format_date(value)}T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def parse_utc(value: str | datetime) -> datetime:
    """@brief Parse an ISO-8601 instant that carries an offset into UTC.

    @param value ISO-8601 string (`Z` or `+HH:MM` offset) or aware datetime.
    @return Timezone-aware datetime in UTC.
    @throws ValueError If the value does not parse or has no offset.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"'{value}' is not an ISO-8601 instant.")
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValueError(f"'{value}' is not an ISO-8601 instant.") from exc

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise ValueError(f"'{value}' must carry a UTC offset.")

    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError(f"'{value}' is outside the representable UTC range.") from exc


def local_input_to_utc(value: str, tz: tzinfo) -> datetime:
    """@brief Interpret a `YYYY-MM-DDTHH:MM` wall-clock value in `tz` as a UTC instant.

    @description Seconds are appended when absent. Ambiguous wall-clock times
    (DST fall-back) resolve to their first occurrence; times skipped by a DST
    spring-forward transition do not exist and are rejected.

    @param value Local input string as produced by a datetime-local form field.
    @param tz Time zone of the caller.
    @return Timezone-aware datetime in UTC.
    @throws InvalidTimeFormat If the value is malformed, not a calendar
    date/time, or does not exist in `tz`.
    """
    if not isinstance(value, str) or not _LOCAL_INPUT_PATTERN.fullmatch(value.strip()):
        raise InvalidTimeFormat(f"'{value}' is not a YYYY-MM-DDTHH:MM local time.")

    text = value.strip()
    if len(text) == 16:
        text += ":00"

    try:
        naive = datetime.strptime(text, _LOCAL_INPUT_FORMAT)
    except ValueError as exc:
        raise InvalidTimeFormat(f"'{value}' is not a valid calendar date/time.") from exc

    try:
        instant = naive.replace(tzinfo=tz).astimezone(timezone.utc)
    except (OverflowError, ValueError) as exc:
        raise InvalidTimeFormat(f"'{value}' is out of the representable range.") from exc

    # Wall-clock times inside a DST gap do not survive the trip back.
    if instant.astimezone(tz).replace(tzinfo=None) != naive:
        raise InvalidTimeFormat(f"'{value}' does not exist in time zone {tz}.")

    return instant


def utc_to_local_input_string(instant: str | datetime, tz: tzinfo) -> str:
    """@brief Render a UTC instant as a `YYYY-MM-DDTHH:MM` wall-clock value in `tz`.

    @param instant Aware datetime or ISO-8601 string with offset.
    @param tz Time zone of the caller.
    @return Local input string; seconds are discarded.
    @throws ValueError If `instant` does not parse.
    """
    try:
        local = parse_utc(instant).astimezone(tz)
    except OverflowError as exc:
        raise ValueError(f"'{instant}' is outside the representable range in {tz}.") from exc
    return f"{_format_date(local)}T{local.hour:02d}:{local.minute:02d}"


def utc_to_local_hhmm(value: str | datetime | None, tz: tzinfo) -> str:
    """@brief Render only the local hour and minute of an instant, for axis labels.

    @param value Aware datetime or ISO-8601 string with offset.
    @param tz Time zone of the caller.
    @return Zero-padded `HH:MM`, or `"Invalid Date"` when `value` does not parse.
    """
    try:
        local = parse_utc(value).astimezone(tz)
    except (TypeError, ValueError, OverflowError):
        return INVALID_DATE_LABEL
    return f"{local.hour:02d}:{local.minute:02d}"
