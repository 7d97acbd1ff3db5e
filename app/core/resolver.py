from typing import Mapping

from app.schemas.catalog import IdentifierCatalog
from app.schemas.interval import Interval
from app.schemas.request_parameters import RequestParameters
from app.schemas.time_window import TimeWindow


def _present(params: Mapping[str, str], key: str) -> str | None:
    value = params.get(key)
    if value is None or not str(value).strip():
        return None
    return str(value).strip()


def resolve(params: Mapping[str, str], catalog: IdentifierCatalog) -> RequestParameters:
    """@brief Turn incoming query parameters into effective request parameters.

    @description The window is resolved only when both `start` and `end` are
    present; otherwise it stays unresolved and no fetch should happen. No
    default window is substituted here because the caller's time zone is not
    known at this point.

    @param params Query-string mapping with optional `identifier`, `interval`,
    `start` and `end`.
    @param catalog Configured identifier catalog.
    @return Immutable `RequestParameters`.
    @throws InvalidInterval If `interval` is not a supported value.
    @throws InvalidTimeWindow If the bounds do not parse or are inverted.
    """
    identifier = _present(params, "identifier") or catalog.default
    interval = Interval.parse(_present(params, "interval") or Interval.default())

    start = _present(params, "start")
    end = _present(params, "end")
    window = TimeWindow.from_strings(start, end) if start and end else None

    return RequestParameters(identifier=identifier, interval=interval, window=window)
