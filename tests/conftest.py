import pytest

from app.database.latency import LatencyRecord


@pytest.fixture(autouse=True)
def _default_test_env(monkeypatch: pytest.MonkeyPatch):
    """@brief Provide stable default env values for the test suite.

    @details
    Ensures local `.env` changes do not make tests flaky. Individual tests may
    still override these values with `monkeypatch.setenv(...)` when needed.
    """
    monkeypatch.setenv("SEGMENTS_API_URL", "http://aggregator.test/api/v1/video/watch-segments")
    monkeypatch.setenv("VIDEO_IDENTIFIERS", "BV1, BV2 ,BV3")
    monkeypatch.setenv("DEFAULT_VIDEO_IDENTIFIER", "BVFALLBACK")
    monkeypatch.setenv("DISPLAY_TIMEZONE", "UTC")
    monkeypatch.setenv("LATENCY_HISTORY_LIMIT", "10")
    monkeypatch.setenv("REDIS_URL", "redis://redis:6379/0")


@pytest.fixture(autouse=True)
def _no_latency_writes(monkeypatch: pytest.MonkeyPatch):
    """@brief Keep the latency middleware away from a real Redis server."""
    monkeypatch.setattr(LatencyRecord, "push_latency", lambda self, route, latency_ms: None)
