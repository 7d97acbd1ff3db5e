from math import isfinite

from pydantic import BaseModel, Field, field_validator


class WatchSegment(BaseModel):
    """@brief Aggregated watch time for one time bucket.

    @details Produced by the external aggregation service and treated as
    read-only input. Bucket bounds are kept verbatim as received so they can
    be shown unchanged in segment details.
    """

    segment_start_time: str = Field(..., description="Bucket start as an ISO-8601 instant")
    segment_end_time: str = Field(..., description="Bucket end as an ISO-8601 instant")
    watched_duration_seconds: float = Field(
        ..., ge=0, description="Seconds watched inside the bucket"
    )

    @field_validator("watched_duration_seconds")
    @classmethod
    def validate_duration(cls, value: float) -> float:
        """@brief Reject NaN and infinite durations."""
        if not isfinite(value):
            raise ValueError("watched_duration_seconds must be a finite number.")
        return value


class SegmentsData(BaseModel):
    segments: list[WatchSegment] = Field(default_factory=list)


class SegmentsEnvelope(BaseModel):
    """@brief Response envelope of the aggregation service.

    @var code: Business status code, `0` means success.
    @var msg: Service message, used as error text when `code` is non-zero.
    @var data: Payload, absent or null on failures.
    """

    code: int
    msg: str = ""
    data: SegmentsData | None = None


class SegmentsQuery(BaseModel):
    """@brief JSON body posted to the aggregation service."""

    identifier: str
    start_time: str
    end_time: str
    interval: str
