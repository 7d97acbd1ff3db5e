import os


def _get_first_env(keys: tuple[str, ...], default: str) -> str:
    """@brief Return the first non-empty environment variable from a key list.

    @param keys Candidate environment variable names in lookup order.
    @param default Fallback value when all keys are unset/empty.
    @return Resolved environment value.
    """
    for key in keys:
        value = os.getenv(key)
        if value:
            return value
    return default


def get_segments_api_url() -> str:
    """@brief Return the aggregation service endpoint for watch segments.

    @return First value from `SEGMENTS_API_URL`/`BACKEND_API_URL`,
    otherwise `http://localhost:8081/api/v1/video/watch-segments`.
    """
    return _get_first_env(
        ("SEGMENTS_API_URL", "BACKEND_API_URL"),
        "http://localhost:8081/api/v1/video/watch-segments",
    )


def get_video_identifiers() -> str | None:
    """@brief Return the raw comma-separated identifier catalog.

    @return Value of `VIDEO_IDENTIFIERS`, or None when unset.
    """
    return os.getenv("VIDEO_IDENTIFIERS")


def get_default_video_identifier() -> str:
    """@brief Return the identifier used when the catalog provides none.

    @return Identifier from `DEFAULT_VIDEO_IDENTIFIER` (default `BV1rT9EYbEJa`).
    """
    return os.getenv("DEFAULT_VIDEO_IDENTIFIER", "").strip() or "BV1rT9EYbEJa"


def get_display_timezone() -> str:
    """@brief Return the time zone used by pages that do not pass `tz`.

    @return IANA name from `DISPLAY_TIMEZONE` (default `UTC`).
    """
    return os.getenv("DISPLAY_TIMEZONE", "").strip() or "UTC"


def get_latency_history_limit() -> int:
    """@brief Return max number of latency samples retained in Redis lists.

    @return Integer history limit from `LATENCY_HISTORY_LIMIT` (default `100`).
    """
    return int(os.getenv("LATENCY_HISTORY_LIMIT", "100"))


def get_redis_url() -> str:
    """@brief Return Redis connection URL used by application components.

    @return Redis URL from `REDIS_URL` (default `redis://redis:6379/0`).
    """
    return os.getenv("REDIS_URL", "redis://redis:6379/0")
