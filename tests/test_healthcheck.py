from unittest.mock import patch

from fastapi.testclient import TestClient

from app.main import app


client = TestClient(app)


def test_healthcheck_returns_latency_metrics_per_route():
    with patch(
        "app.services.healthcheck.LatencyRecord.get_latencies",
        side_effect=[[10.0, 20.0], [30.0, 40.0]],
    ):
        response = client.get("/healthcheck")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "UP"
    assert payload["segments_api_url"] == "http://aggregator.test/api/v1/video/watch-segments"
    assert payload["dashboard_latency_ms"] == {"avg": 15.0, "p95": 20.0, "count": 2}
    assert payload["segments_latency_ms"] == {"avg": 35.0, "p95": 40.0, "count": 2}


def test_healthcheck_returns_zero_metrics_when_no_requests():
    with patch(
        "app.services.healthcheck.LatencyRecord.get_latencies",
        side_effect=[[], []],
    ):
        response = client.get("/healthcheck")

    assert response.status_code == 200
    payload = response.json()
    assert payload["dashboard_latency_ms"] == {"avg": 0.0, "p95": 0.0, "count": 0}
    assert payload["segments_latency_ms"] == {"avg": 0.0, "p95": 0.0, "count": 0}


def test_healthcheck_returns_503_when_redis_read_fails():
    with patch(
        "app.services.healthcheck.LatencyRecord.get_latencies",
        side_effect=RuntimeError("redis unavailable"),
    ):
        response = client.get("/healthcheck")

    assert response.status_code == 503
    assert response.json()["detail"] == "Telemetry backend unavailable for healthcheck."
