from typing import Annotated
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BeforeValidator


def load_timezone(name: str) -> ZoneInfo:
    """@brief Resolve an IANA time zone name.

    @param name Time zone name such as `Asia/Shanghai`.
    @return Matching `ZoneInfo`.
    @throws ValueError If the name is unknown or malformed.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"tz must be a valid IANA time zone name; got '{name}'.") from exc


def _validate_timezone_name(value: object) -> str:
    """@brief Validate and normalize a time zone query value."""
    if isinstance(value, bool):
        raise ValueError("tz must be a string.")

    name = str(value).strip()
    if not name:
        raise ValueError("tz must be a non-empty string.")

    load_timezone(name)
    return name


TimeZoneName = Annotated[str, BeforeValidator(_validate_timezone_name)]


def _blank_as_none(value: object) -> object:
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalTimeZoneName = Annotated[TimeZoneName | None, BeforeValidator(_blank_as_none)]
