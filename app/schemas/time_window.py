from datetime import datetime

from pydantic import BaseModel, ConfigDict, ValidationError, field_serializer, field_validator, model_validator

from app.core.errors import InvalidTimeWindow
from app.core.time_converter import format_utc, parse_utc


class TimeWindow(BaseModel):
    """@brief Resolved time window bounded by two UTC instants.

    @note Validation rules:
    both bounds must be timezone-aware and `start` must not be after `end`.
    Bounds are normalized to UTC on construction.
    """

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def validate_aware(cls, value: datetime) -> datetime:
        """@brief Reject naive datetimes and normalize aware ones to UTC."""
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("window bounds must carry a UTC offset.")
        return parse_utc(value)

    @model_validator(mode="after")
    def validate_order(self) -> "TimeWindow":
        """@brief Enforce `start <= end`."""
        if self.start > self.end:
            raise ValueError("window start must not be after window end.")
        return self

    @field_serializer("start", "end")
    def serialize_bound(self, value: datetime) -> str:
        return format_utc(value)

    @classmethod
    def from_strings(cls, start: str, end: str) -> "TimeWindow":
        """@brief Build a window from two ISO-8601 strings with offsets.

        @param start Window start, e.g. `2024-03-10T08:00:00.000Z`.
        @param end Window end.
        @return Validated `TimeWindow`.
        @throws InvalidTimeWindow If a bound does not parse or the window is inverted.
        """
        try:
            return cls(start=parse_utc(start), end=parse_utc(end))
        except ValidationError as exc:
            raise InvalidTimeWindow(exc.errors()[0]["msg"]) from exc
        except ValueError as exc:
            raise InvalidTimeWindow(str(exc)) from exc
