from datetime import datetime, timezone

import pytest

from app.core.catalog import parse_catalog
from app.core.errors import InvalidInterval, InvalidTimeWindow
from app.core.resolver import resolve
from app.schemas.interval import Interval

CATALOG = parse_catalog("BV1,BV2", "X")


def test_resolve_without_params_is_unresolved_with_defaults():
    request = resolve({}, CATALOG)

    assert request.identifier == "BV1"
    assert request.interval is Interval.ONE_HOUR
    assert request.window is None
    assert not request.is_resolved


def test_resolve_with_both_bounds_resolves_window():
    request = resolve(
        {
            "identifier": "BV2",
            "interval": "30m",
            "start": "2024-03-10T00:00:00.000Z",
            "end": "2024-03-10T23:59:59.999Z",
        },
        CATALOG,
    )

    assert request.identifier == "BV2"
    assert request.interval is Interval.THIRTY_MINUTES
    assert request.is_resolved
    assert request.window.start == datetime(2024, 3, 10, 0, 0, tzinfo=timezone.utc)
    assert request.window.end == datetime(2024, 3, 10, 23, 59, 59, 999000, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "params",
    [
        {"start": "2024-03-10T00:00:00.000Z"},
        {"end": "2024-03-10T23:59:59.999Z"},
        {"start": "", "end": "2024-03-10T23:59:59.999Z"},
    ],
)
def test_resolve_with_a_missing_bound_stays_unresolved(params):
    assert resolve(params, CATALOG).window is None


def test_resolve_ignores_blank_identifier_and_interval():
    request = resolve({"identifier": "  ", "interval": ""}, CATALOG)

    assert request.identifier == "BV1"
    assert request.interval is Interval.ONE_HOUR


def test_resolve_normalizes_offsets_to_utc():
    request = resolve(
        {"start": "2024-03-10T08:00:00+08:00", "end": "2024-03-11T08:00:00+08:00"},
        CATALOG,
    )

    assert request.window.start == datetime(2024, 3, 10, 0, 0, tzinfo=timezone.utc)


def test_resolve_rejects_unknown_interval():
    with pytest.raises(InvalidInterval):
        resolve({"interval": "2h"}, CATALOG)


@pytest.mark.parametrize(
    "start, end",
    [
        ("2024-03-11T00:00:00.000Z", "2024-03-10T00:00:00.000Z"),
        ("yesterday", "2024-03-10T00:00:00.000Z"),
        ("2024-03-10T00:00:00", "2024-03-10T01:00:00"),
        ("9999-12-31T23:00:00-05:00", "9999-12-31T23:30:00-05:00"),
    ],
)
def test_resolve_rejects_invalid_windows(start, end):
    with pytest.raises(InvalidTimeWindow):
        resolve({"start": start, "end": end}, CATALOG)


def test_resolve_is_deterministic():
    params = {
        "identifier": "BV2",
        "interval": "1d",
        "start": "2024-03-01T00:00:00.000Z",
        "end": "2024-03-08T00:00:00.000Z",
    }

    first = resolve(params, CATALOG)
    second = resolve(dict(params), CATALOG)

    assert first == second
    assert resolve({}, CATALOG) == resolve({}, CATALOG)


def test_resolve_uses_fallback_when_catalog_is_empty():
    assert resolve({}, parse_catalog("", "X")).identifier == "X"
