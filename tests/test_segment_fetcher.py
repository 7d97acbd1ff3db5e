import json

import httpx
import pytest

from app.core.catalog import parse_catalog
from app.core.errors import BusinessFailure, HttpFailure, TransportFailure
from app.core.resolver import resolve
from app.services.segment_fetcher import SegmentFetcher

API_URL = "http://aggregator.test/api/v1/video/watch-segments"


def _resolved_request():
    return resolve(
        {
            "identifier": "BV1",
            "interval": "1h",
            "start": "2024-03-10T00:00:00.000Z",
            "end": "2024-03-10T23:59:59.999Z",
        },
        parse_catalog(None, "BV1"),
    )


def _fetcher(handler) -> SegmentFetcher:
    """@brief Build a fetcher whose HTTP traffic is answered by `handler`."""
    return SegmentFetcher(
        api_url=API_URL, client=httpx.Client(transport=httpx.MockTransport(handler))
    )


def test_fetch_posts_query_and_returns_segments():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "code": 0,
                "msg": "success",
                "data": {
                    "segments": [
                        {
                            "segment_start_time": "2024-03-10T00:00:00Z",
                            "segment_end_time": "2024-03-10T01:00:00Z",
                            "watched_duration_seconds": 120,
                        },
                        {
                            "segment_start_time": "2024-03-10T01:00:00Z",
                            "segment_end_time": "2024-03-10T02:00:00Z",
                            "watched_duration_seconds": 0,
                        },
                    ],
                    "total_watched_duration_seconds": 120,
                },
            },
        )

    segments = _fetcher(handler).fetch(_resolved_request())

    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == API_URL
    assert json.loads(seen[0].content) == {
        "identifier": "BV1",
        "start_time": "2024-03-10T00:00:00.000Z",
        "end_time": "2024-03-10T23:59:59.999Z",
        "interval": "1h",
    }
    assert [segment.watched_duration_seconds for segment in segments] == [120, 0]
    assert segments[0].segment_start_time == "2024-03-10T00:00:00Z"


def test_fetch_without_data_returns_empty_list():
    fetcher = _fetcher(lambda request: httpx.Response(200, json={"code": 0, "msg": "success", "data": None}))

    assert fetcher.fetch(_resolved_request()) == []


def test_fetch_non_2xx_raises_http_failure():
    fetcher = _fetcher(lambda request: httpx.Response(502, text="bad gateway"))

    with pytest.raises(HttpFailure) as exc_info:
        fetcher.fetch(_resolved_request())

    assert exc_info.value.status_code == 502
    assert exc_info.value.body == "bad gateway"
    assert str(exc_info.value) == "API request failed: 502 - bad gateway"


def test_fetch_business_code_raises_business_failure():
    fetcher = _fetcher(
        lambda request: httpx.Response(200, json={"code": 1, "msg": "Either aid or bvid must be provided", "data": None})
    )

    with pytest.raises(BusinessFailure) as exc_info:
        fetcher.fetch(_resolved_request())

    assert exc_info.value.message == "Either aid or bvid must be provided"
    assert str(exc_info.value) == "API error: Either aid or bvid must be provided"


def test_fetch_network_error_raises_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TransportFailure):
        _fetcher(handler).fetch(_resolved_request())


def test_fetch_unreadable_body_raises_transport_failure():
    fetcher = _fetcher(lambda request: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(TransportFailure):
        fetcher.fetch(_resolved_request())


def test_fetch_refuses_unresolved_requests_without_network_call():
    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"code": 0, "msg": "success"})

    unresolved = resolve({}, parse_catalog(None, "BV1"))

    with pytest.raises(ValueError):
        _fetcher(handler).fetch(unresolved)
    assert calls == []


def test_fetcher_reads_endpoint_from_environment(monkeypatch):
    monkeypatch.setenv("SEGMENTS_API_URL", "http://elsewhere.test/segments")
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(str(request.url))
        return httpx.Response(200, json={"code": 0, "msg": "success", "data": {"segments": []}})

    fetcher = SegmentFetcher(client=httpx.Client(transport=httpx.MockTransport(handler)))
    fetcher.fetch(_resolved_request())

    assert seen == ["http://elsewhere.test/segments"]
